"""
Domain models and value objects.

Содержит Version, Operator, Constraint, Constraints и алгебру
satisfies / overlaps / contradicts.
"""

from verlib.core.domain.constraint import (
    CONSTRAINT_SET_JOINER,
    CONSTRAINT_SET_SEPARATOR,
    Constraint,
    Constraints,
    Operator,
    new_constraint,
    overlaps,
    satisfies,
)
from verlib.core.domain.contradiction import (
    ContradictionError,
    ContradictionsError,
    contradicts,
    find_contradictions,
)
from verlib.core.domain.version import (
    UINT64_MAX,
    StrictVersionError,
    Version,
    new_prerelease_version,
    new_version,
)

__all__ = [
    # Version model
    "UINT64_MAX",
    "StrictVersionError",
    "Version",
    "new_version",
    "new_prerelease_version",
    # Constraint model
    "CONSTRAINT_SET_SEPARATOR",
    "CONSTRAINT_SET_JOINER",
    "Operator",
    "Constraint",
    "Constraints",
    "new_constraint",
    "satisfies",
    "overlaps",
    # Contradictions
    "ContradictionError",
    "ContradictionsError",
    "contradicts",
    "find_contradictions",
]
