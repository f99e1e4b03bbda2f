"""Validate collections of YAML records against a YAML schema."""

from data_validator.exceptions import DataValidatorError, SchemaError, ValidationError
from data_validator.schema import SchemaValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "DataValidatorError",
    "SchemaError",
    "SchemaValidator",
    "ValidationError",
    "ValidationResult",
    "__version__",
]
