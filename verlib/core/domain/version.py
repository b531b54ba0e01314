"""
Version — Модель семантической версии

Immutable Pydantic модель версии: major.minor.patch[-pre_release][+build_metadata].

Minor и patch опциональны: "1" и "1.0.0" — разные значения
(различаются при мягком рендеринге), но одинаковые по порядку.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Модель неизменяема (frozen=True): любое "изменение" создаёт новый экземпляр
2. Сравнение игнорирует build metadata
3. Pre-release сравнивается как обычная строка (упрощение относительно SemVer 2.0.0:
   "alpha.10" < "alpha.2")
4. greater/equal/greater_equal/less_equal выводятся только из less
"""

from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field

from verlib.core.contracts import DocumentKind, validate_document
from verlib.core.grammar import STRICT_VERSION_RE


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное значение числового компонента (unsigned 64-bit)
UINT64_MAX: Final[int] = 2**64 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class StrictVersionError(ValueError):
    """
    Версия не может быть представлена строкой строгого SemVer 2.0.0.

    Возникает, если pre-release или build metadata содержат символы вне
    [0-9A-Za-z-.], пустые идентификаторы или числовые идентификаторы с ведущими нулями.
    """

    pass


# =============================================================================
# VERSION MODEL
# =============================================================================


class Version(BaseModel):
    """
    Семантическая версия.

    Immutable модель (frozen=True). Все методы with_* и increment*
    возвращают новый экземпляр, исходный не изменяется.

    Поля minor_number/patch_number хранят факт присутствия компонента
    (None = компонент не указан). Для конструирования и JSON используются
    алиасы minor/patch.
    """

    major: int = Field(0, ge=0, le=UINT64_MAX, description="Major компонент")
    minor_number: Optional[int] = Field(
        None, ge=0, le=UINT64_MAX, alias="minor", description="Minor компонент (None = не указан)"
    )
    patch_number: Optional[int] = Field(
        None, ge=0, le=UINT64_MAX, alias="patch", description="Patch компонент (None = не указан)"
    )
    pre_release: str = Field("", description="Pre-release метка без ведущего '-'")
    build_metadata: str = Field("", description="Build metadata без ведущего '+'")

    model_config = {"frozen": True, "populate_by_name": True}  # Immutable

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def minor(self) -> int:
        """Minor компонент, 0 если не указан."""
        return self.minor_number if self.minor_number is not None else 0

    @property
    def patch(self) -> int:
        """Patch компонент, 0 если не указан."""
        return self.patch_number if self.patch_number is not None else 0

    @property
    def has_minor(self) -> bool:
        return self.minor_number is not None

    @property
    def has_patch(self) -> bool:
        return self.patch_number is not None

    # -------------------------------------------------------------------------
    # Copy-on-write
    # -------------------------------------------------------------------------

    def _derive(self, **changes: Any) -> "Version":
        """Новый провалидированный экземпляр с изменёнными полями."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def with_pre_release(self, pre_release: str) -> "Version":
        """
        Копия версии с заменённой pre-release меткой.

        Args:
            pre_release: Новая метка (например, "beta.2"); "" удаляет метку

        Returns:
            Новый Version
        """
        return self._derive(pre_release=pre_release)

    def with_build_metadata(self, build_metadata: str) -> "Version":
        """
        Копия версии с заменённой build metadata.

        Args:
            build_metadata: Новые метаданные (например, "2023.07.27")

        Returns:
            Новый Version
        """
        return self._derive(build_metadata=build_metadata)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def lenient_string(self) -> str:
        """
        Мягкое строковое представление.

        Выводятся только указанные компоненты: "1", "1.2", "1.2.3-rc.1+build".
        Patch выводится только вместе с minor.
        """
        text = str(self.major)

        if self.minor_number is not None:
            text += f".{self.minor_number}"
            if self.patch_number is not None:
                text += f".{self.patch_number}"
        if self.pre_release:
            text += f"-{self.pre_release}"
        if self.build_metadata:
            text += f"+{self.build_metadata}"
        return text

    def strict_string(self) -> str:
        """
        Строковое представление по SemVer 2.0.0.

        Всегда выводит major.minor.patch (отсутствующие компоненты = 0),
        затем pre-release и build metadata. Результат проверяется строгой
        грамматикой после добавления каждой части.

        Returns:
            Строка вида "1.0.0-alpha+build"

        Raises:
            StrictVersionError: Если pre-release или build metadata невалидны
        """
        text = f"{self.major}.{self.minor}.{self.patch}"

        if self.pre_release:
            text += f"-{self.pre_release}"
            if STRICT_VERSION_RE.match(text) is None:
                raise StrictVersionError(
                    f"pre-release label invalid for strict version: "
                    f"{self.pre_release!r} in {text!r}"
                )

        if self.build_metadata:
            text += f"+{self.build_metadata}"
            if STRICT_VERSION_RE.match(text) is None:
                raise StrictVersionError(
                    f"build metadata invalid for strict version: "
                    f"{self.build_metadata!r} in {text!r}"
                )

        return text

    def __str__(self) -> str:
        return self.lenient_string()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def less(self, other: "Version") -> bool:
        """
        Строго меньше.

        Алгоритм:
            1. Лексикографически по (major, minor, patch), отсутствующие = 0
            2. Версия без pre-release больше версии с pre-release
            3. Две pre-release метки сравниваются как строки

        Build metadata не учитывается.
        """
        if self.major != other.major:
            return self.major < other.major
        if self.minor != other.minor:
            return self.minor < other.minor
        if self.patch != other.patch:
            return self.patch < other.patch

        if not self.pre_release and other.pre_release:
            return False
        if self.pre_release and not other.pre_release:
            return True
        return self.pre_release < other.pre_release

    def greater(self, other: "Version") -> bool:
        return other.less(self) and not self.less(other)

    def equal(self, other: "Version") -> bool:
        """Семантическое равенство (build metadata игнорируется)."""
        return not self.less(other) and not other.less(self)

    def greater_equal(self, other: "Version") -> bool:
        return not self.less(other)

    def less_equal(self, other: "Version") -> bool:
        return not self.greater(other)

    # Операторы сравнения делегируют семантическим методам.
    # "==" остаётся структурным (Pydantic), для семантики — equal().

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.greater(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.greater_equal(other)

    # -------------------------------------------------------------------------
    # Increments
    # -------------------------------------------------------------------------

    def increment(self) -> "Version":
        """
        Следующая версия: увеличивается самый правый указанный компонент.

        Pre-release и build metadata сбрасываются. Отсутствующие компоненты
        не достраиваются: "1.2" → "1.3".

        Examples:
            >>> str(Version(major=1).increment())
            '2'
            >>> str(Version(major=3, minor=4, patch=5).increment())
            '3.4.6'
        """
        if self.patch_number is not None:
            return self._derive(patch_number=self.patch_number + 1, pre_release="", build_metadata="")
        if self.minor_number is not None:
            return self._derive(minor_number=self.minor_number + 1, pre_release="", build_metadata="")
        return self._derive(major=self.major + 1, pre_release="", build_metadata="")

    def increment_major(self) -> "Version":
        """major + 1, minor и patch = 0 (указаны), метки сброшены."""
        return type(self)(major=self.major + 1, minor=0, patch=0)

    def increment_minor(self) -> "Version":
        """
        minor + 1 (1, если minor не указан), patch = 0, метки сброшены.
        """
        return self._derive(
            minor_number=self.minor + 1,
            patch_number=0,
            pre_release="",
            build_metadata="",
        )

    def increment_patch(self) -> "Version":
        """
        patch + 1 (1, если patch не указан), minor достраивается до 0, метки сброшены.
        """
        return self._derive(
            minor_number=self.minor,
            patch_number=self.patch + 1,
            pre_release="",
            build_metadata="",
        )

    def increment_pessimistic(self) -> "Version":
        """
        Первая версия, нарушающая pessimistic-ограничение "~>" от текущей.

        Алгоритм:
            1. Pre-release и build metadata сбрасываются
            2. Если patch указан: patch = 0, minor + 1
            3. Иначе если minor указан: minor = 0, major + 1
            4. Иначе: major + 1

        Returns:
            Новый Version

        Examples:
            "1.2.3-alpha.1" → "1.3.0"
            "2.1"           → "3.0"
            "1"             → "2"
        """
        if self.patch_number is not None:
            return self._derive(
                minor_number=self.minor + 1,
                patch_number=0,
                pre_release="",
                build_metadata="",
            )
        if self.minor_number is not None:
            return self._derive(
                major=self.major + 1,
                minor_number=0,
                pre_release="",
                build_metadata="",
            )
        return self._derive(major=self.major + 1, pre_release="", build_metadata="")

    # -------------------------------------------------------------------------
    # JSON documents
    # -------------------------------------------------------------------------

    def to_document(self) -> Dict[str, Any]:
        """Документ версии (схема version.json)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_document(cls, document: Any) -> "Version":
        """
        Версия из JSON документа.

        Raises:
            ContractViolationError: Если документ не соответствует version.json
        """
        validate_document(DocumentKind.VERSION, document)
        return cls.model_validate(document)


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def new_version(major: int, minor: int, patch: int) -> Version:
    """
    Версия с указанными major, minor и patch.

    Raises:
        ValidationError: Если компонент вне диапазона unsigned 64-bit
    """
    return Version(major=major, minor=minor, patch=patch)


def new_prerelease_version(major: int, minor: int, patch: int, pre_release: str) -> Version:
    """Версия с указанными major, minor, patch и pre-release меткой."""
    return Version(major=major, minor=minor, patch=patch, pre_release=pre_release)
