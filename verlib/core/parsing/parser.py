"""
Parser — Разбор строк версий и ограничений

Точки входа (fallible → VersionParseError, must → RuntimeError):
- parse_version / must_parse_version: мягкая грамматика
- parse_semver / must_parse_semver: строгий SemVer 2.0.0
- parse_constraint / must_parse_constraint: мягкое ограничение (">=1.2", "~> v1")
- parse_strict_constraint / must_parse_strict_constraint: "<оператор> <SemVer>"
- parse_constraint_set / parse_strict_constraint_set (+ must_*): список через запятую

must_* предназначены для мест, где невалидный ввод — ошибка программиста.
"""

import logging
import re
from enum import Enum
from typing import Callable, List, Optional, TypeVar

from verlib.core.domain.constraint import (
    CONSTRAINT_SET_SEPARATOR,
    Constraint,
    Constraints,
    Operator,
)
from verlib.core.domain.version import UINT64_MAX, Version
from verlib.core.grammar import (
    CONSTRAINT_RE,
    LENIENT_VERSION_RE,
    STRICT_CONSTRAINT_RE,
    STRICT_VERSION_RE,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class ParseMode(str, Enum):
    """Грамматика разбора"""

    LENIENT = "lenient"
    STRICT = "strict"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class VersionParseError(ValueError):
    """
    Строка не соответствует грамматике версии/ограничения,
    либо числовой компонент вне диапазона unsigned 64-bit.
    """

    pass


class InvalidOperatorError(VersionParseError):
    """
    Токен оператора строгого ограничения не входит в набор из 7 операторов
    ("=> 1.0.0", "== 1.0.0", "<> 2.0.0").

    Мягкая грамматика не выделяет токен: лишние символы после оператора
    считаются разделителем (">=>1.0" → ">= 1.0").
    """

    pass


# =============================================================================
# VERSIONS
# =============================================================================


def _parse_component(name: str, raw: str) -> int:
    """
    Разбор числового компонента как unsigned 64-bit.

    Raises:
        VersionParseError: Если значение превышает UINT64_MAX
    """
    value = int(raw)
    if value > UINT64_MAX:
        logger.debug("Version component %s %r out of range", name, raw)
        raise VersionParseError(
            f"failed to parse {name} version component {raw!r}: value out of range"
        )
    return value


def _parse_with(pattern: "re.Pattern[str]", text: str) -> Version:
    match = pattern.match(text)
    if match is None:
        logger.debug("Version %r does not match grammar", text)
        raise VersionParseError(f"regex failed to match version {text!r}")

    minor: Optional[str] = match.group("minor")
    patch: Optional[str] = match.group("patch")

    return Version(
        major=_parse_component("major", match.group("major")),
        minor=_parse_component("minor", minor) if minor else None,
        patch=_parse_component("patch", patch) if patch else None,
        pre_release=match.group("prerelease") or "",
        build_metadata=match.group("buildmetadata") or "",
    )


def parse_version(text: str) -> Version:
    """
    Мягкий разбор версии.

    Допускает нецифровой префикс ("v1.2"), отсутствие minor/patch,
    произвольную pre-release метку до первого '+' и хвостовой мусор.

    Args:
        text: Строка версии

    Returns:
        Version (minor/patch отсутствуют, если не указаны)

    Raises:
        VersionParseError: Нет совпадения с грамматикой или переполнение компонента

    Examples:
        >>> parse_version("v1.2.3-rc.1+build.5").lenient_string()
        '1.2.3-rc.1+build.5'
        >>> parse_version("1").strict_string()
        '1.0.0'
    """
    return _parse_with(LENIENT_VERSION_RE, text)


def parse_semver(text: str) -> Version:
    """
    Строгий разбор версии по SemVer 2.0.0.

    Требуется полное совпадение: major.minor.patch без ведущих нулей,
    валидные pre-release и build metadata идентификаторы.

    Raises:
        VersionParseError: Строка не является строгим SemVer
    """
    return _parse_with(STRICT_VERSION_RE, text)


# =============================================================================
# CONSTRAINTS
# =============================================================================


def _to_operator(token: str, text: str) -> Operator:
    try:
        return Operator(token)
    except ValueError as e:
        logger.debug("Invalid operator %r in constraint %r", token, text)
        raise InvalidOperatorError(f"invalid operator {token!r} in constraint {text!r}") from e


def parse_constraint(text: str) -> Constraint:
    """
    Мягкий разбор ограничения.

    Формат: [оператор][нецифровой разделитель]<версия>.
    Отсутствующий оператор = "=". Версия разбирается мягкой грамматикой.

    Raises:
        VersionParseError: Строка не соответствует формату или версия невалидна

    Examples:
        >>> parse_constraint(">=1.2").strict_string()
        '>= 1.2.0'
        >>> parse_constraint("~> v2").lenient_string()
        '~> 2'
    """
    text = text.strip()
    match = CONSTRAINT_RE.match(text)
    if match is None:
        logger.debug("Constraint %r does not match grammar", text)
        raise VersionParseError(f"failed to parse version constraint {text!r}")

    # Группа operator совпадает только с одним из 7 операторов
    operator = Operator(match.group("operator") or Operator.EQ.value)

    try:
        version = parse_version(match.group("version"))
    except VersionParseError as e:
        logger.debug("Invalid version in constraint %r: %s", text, e)
        raise VersionParseError(f"failed to parse version in constraint: {e}") from e

    return Constraint(operator=operator, version=version)


def parse_strict_constraint(text: str) -> Constraint:
    """
    Строгий разбор ограничения.

    Формат: [оператор][пробелы]<строгий SemVer>. Пробелы по краям игнорируются.
    Отсутствующий оператор = "=".

    Raises:
        VersionParseError: Нет совпадения или версия отсутствует
        InvalidOperatorError: Токен оператора не является одним из 7 операторов

    Examples:
        >>> parse_strict_constraint("  <=   4.0.0").strict_string()
        '<= 4.0.0'
    """
    text = text.strip()
    match = STRICT_CONSTRAINT_RE.match(text)
    if match is None or not match.group("semver"):
        logger.debug("Strict constraint %r does not match grammar", text)
        raise VersionParseError(f"failed to parse strict version constraint {text!r}")

    operator = _to_operator(match.group("operator") or Operator.EQ.value, text)

    try:
        version = parse_semver(match.group("semver"))
    except VersionParseError as e:
        logger.debug("Invalid semver in strict constraint %r: %s", text, e)
        raise VersionParseError(f"failed to parse semver in strict constraint: {e}") from e

    return Constraint(operator=operator, version=version)


# =============================================================================
# CONSTRAINT SETS
# =============================================================================


def _parse_set(text: str, parse_one: Callable[[str], Constraint], label: str) -> Constraints:
    result: List[Constraint] = []
    for raw in text.split(CONSTRAINT_SET_SEPARATOR):
        try:
            result.append(parse_one(raw))
        except VersionParseError as e:
            raise VersionParseError(f"failed to parse {label} {raw!r}: {e}") from e
    return Constraints(tuple(result))


def parse_constraint_set(text: str, mode: ParseMode = ParseMode.LENIENT) -> Constraints:
    """
    Разбор набора ограничений через запятую.

    Каждый элемент разбирается независимо; первая ошибка прерывает разбор.

    Args:
        text: Например ">=1.0.0, !=1.1.0, <2"
        mode: LENIENT или STRICT

    Returns:
        Constraints в порядке следования

    Raises:
        VersionParseError: Если хотя бы один элемент невалиден
    """
    if mode is ParseMode.STRICT:
        return _parse_set(text, parse_strict_constraint, "strict constraint")
    return _parse_set(text, parse_constraint, "constraint")


def parse_strict_constraint_set(text: str) -> Constraints:
    return parse_constraint_set(text, mode=ParseMode.STRICT)


# =============================================================================
# MUST-VARIANTS
# =============================================================================


def _must(parse: Callable[[str], T], text: str, what: str) -> T:
    try:
        return parse(text)
    except VersionParseError as e:
        logger.debug("Unexpected invalid %s %r: %s", what, text, e)
        raise RuntimeError(f"failed to parse {what}: {e}") from e


def must_parse_version(text: str) -> Version:
    return _must(parse_version, text, "version")


def must_parse_semver(text: str) -> Version:
    return _must(parse_semver, text, "semantic version")


def must_parse_constraint(text: str) -> Constraint:
    return _must(parse_constraint, text, "constraint")


def must_parse_strict_constraint(text: str) -> Constraint:
    return _must(parse_strict_constraint, text, "strict constraint")


def must_parse_constraint_set(text: str) -> Constraints:
    return _must(parse_constraint_set, text, "constraint set")


def must_parse_strict_constraint_set(text: str) -> Constraints:
    return _must(parse_strict_constraint_set, text, "strict constraint set")


# =============================================================================
# VALIDATION
# =============================================================================


def is_valid_version(text: str, strict: bool = False) -> bool:
    """
    Проверка строки версии без exception.

    Args:
        text: Строка версии
        strict: Использовать строгую грамматику SemVer 2.0.0

    Returns:
        True если строка разбирается
    """
    try:
        parse_semver(text) if strict else parse_version(text)
    except VersionParseError:
        return False
    return True


def is_valid_constraint(text: str, strict: bool = False) -> bool:
    """Проверка строки ограничения без exception."""
    try:
        parse_strict_constraint(text) if strict else parse_constraint(text)
    except VersionParseError:
        return False
    return True
