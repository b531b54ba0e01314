"""
verlib — семантические версии и алгебра ограничений.

Разбор, сравнение и изменение версий (Semantic Versioning 2.0.0),
проверка ограничений и поиск противоречий в наборах ограничений.

Разбор версии:

    v = verlib.parse_version("1.2.3-beta.1+5678")
    v.lenient_string()            # "1.2.3-beta.1+5678"

Строгий разбор (SemVer 2.0.0):

    v = verlib.parse_semver("1.2.3-beta.1+5678")
    v.strict_string()             # "1.2.3-beta.1+5678"

Сравнение:

    verlib.new_version(1, 0, 0).less(verlib.new_version(2, 0, 0))   # True

Ограничения:

    c = verlib.parse_constraint(">= 1.2.0")
    verlib.satisfies(verlib.new_version(2, 0, 0), c)                 # True

Противоречия:

    err = verlib.parse_constraint_set(">= 2.0.0, < 1.5.0").contradicts()
    if err is not None:
        for c1, c2 in err.pairs():
            ...

Инкремент:

    verlib.new_version(1, 2, 3).increment_major().strict_string()   # "2.0.0"
"""

from verlib.core.contracts import ContractViolationError
from verlib.core.domain import (
    UINT64_MAX,
    Constraint,
    ContradictionError,
    ContradictionsError,
    Constraints,
    Operator,
    StrictVersionError,
    Version,
    contradicts,
    new_constraint,
    new_prerelease_version,
    new_version,
    overlaps,
    satisfies,
)
from verlib.core.parsing import (
    InvalidOperatorError,
    ParseMode,
    VersionParseError,
    is_valid_constraint,
    is_valid_version,
    must_parse_constraint,
    must_parse_constraint_set,
    must_parse_semver,
    must_parse_strict_constraint,
    must_parse_strict_constraint_set,
    must_parse_version,
    parse_constraint,
    parse_constraint_set,
    parse_semver,
    parse_strict_constraint,
    parse_strict_constraint_set,
    parse_version,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "UINT64_MAX",
    "Version",
    "Operator",
    "Constraint",
    "Constraints",
    "ParseMode",
    # Constructors
    "new_version",
    "new_prerelease_version",
    "new_constraint",
    # Algebra
    "satisfies",
    "overlaps",
    "contradicts",
    # Exceptions
    "StrictVersionError",
    "VersionParseError",
    "InvalidOperatorError",
    "ContradictionError",
    "ContradictionsError",
    "ContractViolationError",
    # Parsing
    "parse_version",
    "must_parse_version",
    "parse_semver",
    "must_parse_semver",
    "parse_constraint",
    "must_parse_constraint",
    "parse_strict_constraint",
    "must_parse_strict_constraint",
    "parse_constraint_set",
    "must_parse_constraint_set",
    "parse_strict_constraint_set",
    "must_parse_strict_constraint_set",
    "is_valid_version",
    "is_valid_constraint",
]
