"""
Constraint — Ограничения версий и алгебра операторов

Immutable Pydantic модели:
- Operator: 7 операторов сравнения ("=", "!=", ">", ">=", "<", "<=", "~>")
- Constraint: оператор + версия
- Constraints: упорядоченный набор ограничений (все должны выполняться)

Операции:
- satisfies(version, constraint): проверка одной версии
- overlaps(c1, c2): существует ли версия, удовлетворяющая обоим ограничениям

ВАЖНО: overlaps — таблица случаев по паре операторов, а не пересечение
интервалов. Таблица несимметрична: для пар "~>"/">=" и "~>"/"<" граница
вычисляется через Version.increment(), тогда как satisfies для "~>"
использует Version.increment_pessimistic(). Эти вызовы нельзя унифицировать.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Final, Iterator, Optional

from pydantic import BaseModel, Field, RootModel

from verlib.core.contracts import DocumentKind, validate_document
from verlib.core.domain.version import StrictVersionError, Version

if TYPE_CHECKING:
    from verlib.core.domain.contradiction import ContradictionsError


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Разделитель элементов в строке набора ограничений
CONSTRAINT_SET_SEPARATOR: Final[str] = ","

# Разделитель при рендеринге набора ограничений
CONSTRAINT_SET_JOINER: Final[str] = ", "


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Оператор сравнения версий"""

    EQ = "="  # Ровно указанная версия
    NE = "!="  # Любая версия, кроме указанной
    GT = ">"  # Строго новее
    GE = ">="  # Новее или равна
    LT = "<"  # Строго старше
    LE = "<="  # Старше или равна
    PESSIMISTIC = "~>"  # Растёт только самый правый указанный компонент

    def __str__(self) -> str:
        return self.value


# =============================================================================
# CONSTRAINT MODEL
# =============================================================================


class Constraint(BaseModel):
    """
    Ограничение версии: оператор + версия.

    Immutable модель (frozen=True).
    """

    operator: Operator = Field(..., description="Оператор сравнения")
    version: Version = Field(..., description="Версия, с которой сравнивается кандидат")

    model_config = {"frozen": True}  # Immutable

    def lenient_string(self) -> str:
        """"<оператор> <мягкая строка версии>", например ">= 1.2"."""
        return f"{self.operator.value} {self.version.lenient_string()}"

    def strict_string(self) -> str:
        """
        "<оператор> <строгая строка версии>", например ">= 1.2.0".

        Raises:
            StrictVersionError: Если версия не представима строгим SemVer
        """
        try:
            version_text = self.version.strict_string()
        except StrictVersionError as e:
            raise StrictVersionError(
                f"failed to generate strict string for constraint version: {e}"
            ) from e

        return f"{self.operator.value} {version_text}"

    def __str__(self) -> str:
        return self.lenient_string()

    def satisfied_by(self, version: Version) -> bool:
        return satisfies(version, self)

    def overlaps(self, other: "Constraint") -> bool:
        return overlaps(self, other)

    def to_document(self) -> Dict[str, Any]:
        """Документ ограничения (схема constraint.json)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_document(cls, document: Any) -> "Constraint":
        """
        Ограничение из JSON документа.

        Raises:
            ContractViolationError: Если документ не соответствует constraint.json
        """
        validate_document(DocumentKind.CONSTRAINT, document)
        return cls.model_validate(document)


# =============================================================================
# SATISFACTION
# =============================================================================


def _satisfies_pessimistic(version: Version, bound: Version) -> bool:
    return version.greater_equal(bound) and version.less(bound.increment_pessimistic())


_SATISFACTION_TABLE: Final[Dict[Operator, Callable[[Version, Version], bool]]] = {
    Operator.EQ: lambda v, bound: v.equal(bound),
    Operator.NE: lambda v, bound: not v.equal(bound),
    Operator.GT: lambda v, bound: v.greater(bound),
    Operator.GE: lambda v, bound: v.greater_equal(bound),
    Operator.LT: lambda v, bound: v.less(bound),
    Operator.LE: lambda v, bound: v.less_equal(bound),
    Operator.PESSIMISTIC: _satisfies_pessimistic,
}


def satisfies(version: Version, constraint: Constraint) -> bool:
    """
    Проверка, удовлетворяет ли версия ограничению.

    "~>" X: version >= X и version < X.increment_pessimistic()

    Args:
        version: Проверяемая версия
        constraint: Ограничение

    Returns:
        True если версия удовлетворяет ограничению

    Examples:
        >>> bound = Constraint(operator="~>", version=Version(major=1, minor=8, patch=0))
        >>> satisfies(Version(major=1, minor=8, patch=999), bound)
        True
        >>> satisfies(Version(major=1, minor=9, patch=0), bound)
        False
    """
    predicate = _SATISFACTION_TABLE.get(constraint.operator)
    if predicate is None:
        return False
    return predicate(version, constraint.version)


# =============================================================================
# OVERLAP
# =============================================================================


def overlaps(c1: Constraint, c2: Constraint) -> bool:
    """
    Проверка, существует ли версия, удовлетворяющая обоим ограничениям.

    Таблица случаев по паре операторов (порядок веток значим):
        "="  : версия c1 удовлетворяет c2
        "!=" : версия c1 НЕ удовлетворяет c2
        ">"  : c1.version <= c2.version
        ">=" vs "~>" (в обе стороны): граница ">=" в [X, X.increment())
        ">=" : c1.version < c2.version
        "<" vs "<=" (в обе стороны): версия "<=" строго меньше версии "<"
        "<" vs "~>" (в обе стороны): версия "~>" <= версии "<"
        "<"  : c1.version >= c2.version
        "<=" : c1.version > c2.version
        "~>" : c2.version в [c1.version, c1.version.increment())
        иначе: False

    Returns:
        True если ограничения пересекаются
    """
    op1, op2 = c1.operator, c2.operator
    v1, v2 = c1.version, c2.version

    if op1 is Operator.EQ:
        return satisfies(v1, c2)
    if op1 is Operator.NE:
        return not satisfies(v1, c2)
    if op1 is Operator.GT:
        return v1.less_equal(v2)
    if op1 is Operator.GE and op2 is Operator.PESSIMISTIC:
        return v1.greater_equal(v2) and v1.less(v2.increment())
    if op2 is Operator.GE and op1 is Operator.PESSIMISTIC:
        return v2.greater_equal(v1) and v2.less(v1.increment())
    if op1 is Operator.GE:
        return v1.less(v2)
    if op1 is Operator.LT and op2 is Operator.LE:
        return v2.less(v1)
    if op1 is Operator.LE and op2 is Operator.LT:
        return v1.less(v2)
    if op1 is Operator.LT and op2 is Operator.PESSIMISTIC:
        return v2.less(v1) or v2.equal(v1)
    if op2 is Operator.LT and op1 is Operator.PESSIMISTIC:
        return v1.less(v2) or v1.equal(v2)
    if op1 is Operator.LT:
        return v1.greater_equal(v2)
    if op1 is Operator.LE:
        return v1.greater(v2)
    if op1 is Operator.PESSIMISTIC:
        return v2.greater_equal(v1) and v2.less(v1.increment())
    return False


# =============================================================================
# CONSTRAINT SET
# =============================================================================


class Constraints(RootModel[tuple[Constraint, ...]]):
    """
    Упорядоченный набор ограничений, все из которых должны выполняться.

    Порядок влияет только на порядок отчёта о противоречиях.
    """

    model_config = {"frozen": True}  # Immutable

    def __iter__(self) -> Iterator[Constraint]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Constraint:
        return self.root[index]

    def lenient_string(self) -> str:
        return CONSTRAINT_SET_JOINER.join(c.lenient_string() for c in self.root)

    def strict_string(self) -> str:
        """
        Строгие строки всех ограничений через ", ".

        Raises:
            StrictVersionError: На первом ограничении, не представимом строго
        """
        parts = []
        for constraint in self.root:
            try:
                parts.append(constraint.strict_string())
            except StrictVersionError as e:
                raise StrictVersionError(
                    f"failed to generate strict string for constraint: {e}"
                ) from e
        return CONSTRAINT_SET_JOINER.join(parts)

    def __str__(self) -> str:
        return self.lenient_string()

    def satisfied_by(self, version: Version) -> bool:
        """True если версия удовлетворяет каждому ограничению набора."""
        return all(satisfies(version, c) for c in self.root)

    def contradicts(self, *additional: "Constraints") -> Optional["ContradictionsError"]:
        """
        Поиск противоречий в этом наборе и дополнительных наборах.

        Args:
            *additional: Дополнительные наборы, объединяемые с текущим

        Returns:
            ContradictionsError со всеми противоречивыми парами или None
        """
        from verlib.core.domain.contradiction import find_contradictions

        return find_contradictions(self, *additional)

    def is_consistent(self, *additional: "Constraints") -> bool:
        return self.contradicts(*additional) is None

    # -------------------------------------------------------------------------
    # JSON documents
    # -------------------------------------------------------------------------

    def to_document(self) -> Dict[str, Any]:
        """Документ {"constraints": [...]} (схема constraint_set.json)."""
        return {"constraints": self.model_dump(mode="json", by_alias=True)}

    @classmethod
    def from_document(cls, document: Any) -> "Constraints":
        """
        Набор ограничений из JSON документа.

        Raises:
            ContractViolationError: Если документ не соответствует constraint_set.json
        """
        validate_document(DocumentKind.CONSTRAINT_SET, document)
        return cls.model_validate(document["constraints"])


def new_constraint(operator: Operator, version: Version) -> Constraint:
    """Ограничение с указанными оператором и версией."""
    return Constraint(operator=operator, version=version)
