"""
Contract Validation Module

JSON Schema контракты документов версий и ограничений.
"""

from .validators import (
    SCHEMA_DIR,
    ContractViolationError,
    DocumentKind,
    get_validator,
    is_valid_document,
    iter_document_errors,
    load_registry,
    validate_document,
)

__all__ = [
    # Types
    "DocumentKind",
    "SCHEMA_DIR",
    # Exceptions
    "ContractViolationError",
    # Registry
    "load_registry",
    "get_validator",
    # Functions
    "validate_document",
    "is_valid_document",
    "iter_document_errors",
]
