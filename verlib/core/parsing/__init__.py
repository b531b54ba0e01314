"""
Разбор строк версий и ограничений (мягкая и строгая грамматики).
"""

from verlib.core.parsing.parser import (
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

__all__ = [
    # Types
    "ParseMode",
    # Exceptions
    "VersionParseError",
    "InvalidOperatorError",
    # Versions
    "parse_version",
    "must_parse_version",
    "parse_semver",
    "must_parse_semver",
    # Constraints
    "parse_constraint",
    "must_parse_constraint",
    "parse_strict_constraint",
    "must_parse_strict_constraint",
    # Constraint sets
    "parse_constraint_set",
    "must_parse_constraint_set",
    "parse_strict_constraint_set",
    "must_parse_strict_constraint_set",
    # Validation
    "is_valid_version",
    "is_valid_constraint",
]
