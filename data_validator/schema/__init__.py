"""YAML schema validator.

Compiles a YAML schema document into typed rules and validates YAML record
collections against them, reporting every violation found.

Usage::

    from data_validator.schema import SchemaValidator

    validator = SchemaValidator(schema_yaml)
    result = validator.check(collection_yaml)
    if not result.valid:
        print(result.message)
"""

from __future__ import annotations

from data_validator.schema.core import (
    PropertySpec,
    Schema,
    SchemaValidator,
    ValidationResult,
)
from data_validator.schema.errors import ErrorCollector
from data_validator.schema.types import PropertyType

__all__ = [
    "ErrorCollector",
    "PropertySpec",
    "PropertyType",
    "Schema",
    "SchemaValidator",
    "ValidationResult",
]
