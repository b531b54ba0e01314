"""
Document Contracts — JSON Schema контракты документов версий и ограничений

Схемы (Draft 2020-12) поставляются в каталоге schema/ рядом с модулем
и связаны через $ref:

    constraint_set.json ──$ref──▶ constraint.json ──$ref──▶ version.json

Все схемы регистрируются в одном referencing.Registry по их $id,
поэтому ссылки разрешаются без сетевых запросов.

Доменные модели (Version, Constraint, Constraints) проверяют документ
через validate_document() до построения модели.
"""

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

# Каталог схем по умолчанию
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Общий префикс $id всех схем пакета
SCHEMA_BASE_URI: Final[str] = "https://verlib.dev/schema/"


# =============================================================================
# ENUMS
# =============================================================================


class DocumentKind(str, Enum):
    """Вид документа = имя файла схемы без расширения"""

    VERSION = "version"
    CONSTRAINT = "constraint"
    CONSTRAINT_SET = "constraint_set"

    @property
    def schema_uri(self) -> str:
        return f"{SCHEMA_BASE_URI}{self.value}.json"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolationError(ValueError):
    """
    Документ не соответствует JSON Schema контракту.

    Атрибуты:
        kind: Вид документа
        errors: Все ошибки валидации (в порядке пути внутри документа)
    """

    def __init__(self, kind: DocumentKind, errors: List[ValidationError]):
        self.kind = kind
        self.errors = errors
        details = "; ".join(f"{e.json_path}: {e.message}" for e in errors)
        super().__init__(f"{kind.value} document violates contract: {details}")


# =============================================================================
# REGISTRY
# =============================================================================


def load_registry(schema_dir: Path = SCHEMA_DIR) -> Registry:
    """
    Загрузка всех схем каталога в referencing.Registry.

    Args:
        schema_dir: Каталог с *.json схемами

    Returns:
        Registry, где каждая схема доступна по своему $id

    Raises:
        RuntimeError: Если каталог не существует
        ValueError: Если схема не проходит meta-валидацию или не имеет $id
    """
    if not schema_dir.is_dir():
        raise RuntimeError(f"Schema directory not found: {schema_dir}")

    resources: List[tuple[str, Resource]] = []
    for schema_path in sorted(schema_dir.glob("*.json")):
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        if "$id" not in schema:
            raise ValueError(f"JSON Schema {schema_path.name} has no $id")

        resources.append((schema["$id"], DRAFT202012.create_resource(schema)))

    return Registry().with_resources(resources)


@lru_cache(maxsize=None)
def _default_registry() -> Registry:
    return load_registry()


@lru_cache(maxsize=None)
def get_validator(kind: DocumentKind) -> Draft202012Validator:
    """Валидатор для вида документа (кэшируется)."""
    registry = _default_registry()
    return Draft202012Validator(registry.contents(kind.schema_uri), registry=registry)


# =============================================================================
# VALIDATION
# =============================================================================


def iter_document_errors(kind: DocumentKind, data: Any) -> Iterator[ValidationError]:
    """
    Итератор по всем ошибкам валидации документа.

    Yields:
        ValidationError для каждого нарушения
    """
    return get_validator(kind).iter_errors(data)


def is_valid_document(kind: DocumentKind, data: Any) -> bool:
    return get_validator(kind).is_valid(data)


def validate_document(kind: DocumentKind, data: Any) -> None:
    """
    Проверка документа против схемы его вида.

    Args:
        kind: Вид документа
        data: Разобранный JSON (dict, list, ...)

    Raises:
        ContractViolationError: Со всеми найденными нарушениями
    """
    errors = sorted(iter_document_errors(kind, data), key=lambda e: list(e.absolute_path))
    if errors:
        raise ContractViolationError(kind, errors)
