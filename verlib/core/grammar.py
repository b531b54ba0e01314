"""
Grammar — Скомпилированные грамматики версий и ограничений

Четыре грамматики:
- LENIENT_VERSION_RE: мягкий разбор ("v1.2", "1.2.3-rc.1+build", хвостовой мусор отбрасывается)
- STRICT_VERSION_RE: строгий SemVer 2.0.0 (полное совпадение, без ведущих нулей)
- CONSTRAINT_RE: оператор + произвольный нецифровой разделитель + версия
- STRICT_CONSTRAINT_RE: токен оператора + пробелы + строгий SemVer

Все шаблоны компилируются с re.ASCII: \\d, \\s и \\S совпадают только с ASCII.
Конец строки задаётся через \\Z, чтобы завершающий '\\n' не принимался.
"""

import re
from typing import Final


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================

# Порядок альтернатив важен: двухсимвольные операторы перед односимвольными
OPERATOR_ALTERNATION: Final[str] = r"!=|=|>=|>|<=|<|~>"

# Любая последовательность символов операторов ("=>", "==", "<>").
# Строгая грамматика захватывает токен целиком и проверяет его отдельно.
OPERATOR_TOKEN: Final[str] = r"[!=<>~]+"


# =============================================================================
# ЧИСЛОВЫЕ И ТЕКСТОВЫЕ ИДЕНТИФИКАТОРЫ SEMVER
# =============================================================================

# 0 или число без ведущих нулей
_NUMERIC_IDENTIFIER: Final[str] = r"0|[1-9]\d*"

# Pre-release идентификатор: числовой либо содержащий хотя бы одну букву/дефис
_PRERELEASE_IDENTIFIER: Final[str] = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"

_PRERELEASE: Final[str] = rf"{_PRERELEASE_IDENTIFIER}(?:\.{_PRERELEASE_IDENTIFIER})*"

_BUILD_METADATA: Final[str] = r"[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*"

# Тело строгой версии без именованных групп (для вложения в другие шаблоны)
_STRICT_VERSION_BODY: Final[str] = (
    rf"(?:{_NUMERIC_IDENTIFIER})\.(?:{_NUMERIC_IDENTIFIER})\.(?:{_NUMERIC_IDENTIFIER})"
    rf"(?:-{_PRERELEASE})?"
    rf"(?:\+{_BUILD_METADATA})?"
)


# =============================================================================
# ГРАММАТИКИ ВЕРСИЙ
# =============================================================================

# Необязательный нецифровой префикс ("v", "-"), major, .minor, .patch,
# -prerelease (всё до первого '+'), +buildmetadata, хвост отбрасывается.
LENIENT_VERSION_RE: Final[re.Pattern[str]] = re.compile(
    r"^\D*?(?P<major>\d+)"
    r"(?:\.(?P<minor>\d+))?"
    r"(?:\.(?P<patch>\d+))?"
    r"(?:-(?P<prerelease>[^+\n]*))?"
    r"(?:\+(?P<buildmetadata>.*))?"
    r"[^\n]*\Z",
    re.ASCII,
)

STRICT_VERSION_RE: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<major>{_NUMERIC_IDENTIFIER})"
    rf"\.(?P<minor>{_NUMERIC_IDENTIFIER})"
    rf"\.(?P<patch>{_NUMERIC_IDENTIFIER})"
    rf"(?:-(?P<prerelease>{_PRERELEASE}))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD_METADATA}))?\Z",
    re.ASCII,
)


# =============================================================================
# ГРАММАТИКИ ОГРАНИЧЕНИЙ
# =============================================================================

# Оператор (необязательный), нецифровой разделитель, версия до конца строки
CONSTRAINT_RE: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<operator>{OPERATOR_ALTERNATION})?[^\d\n]*(?P<version>\d+\S*)\Z",
    re.ASCII,
)

# Токен оператора (необязательный), пробелы, строгий SemVer (группа может быть пустой)
STRICT_CONSTRAINT_RE: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<operator>{OPERATOR_TOKEN})?\s*(?P<semver>{_STRICT_VERSION_BODY})?\Z",
    re.ASCII,
)
