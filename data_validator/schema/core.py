"""Schema-driven validation of YAML record collections.

A schema document is parsed, checked for well-formedness, and compiled into
a frozen ``Schema`` model. The compiled schema is then applied to any number
of collection documents, each a YAML sequence of mappings.

The schema format is::

    description: Description of the objects described by the schema
    used_by:
      - list of projects using the data
    primary_key: (optional) property other collections use to reference
      objects in this collection
    properties:
      [property name]:
        type: String, Array, Fixnum (or Integer), or Boolean
        description: (optional) explanation of the property
        key_into: (optional) collection this property is a reference into
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from data_validator.exceptions import SchemaError, ValidationError
from data_validator.schema.errors import ErrorCollector
from data_validator.schema.markup import dump_document, load_document
from data_validator.schema.types import (
    DECLARED_TYPES,
    PropertyType,
    name_of_type,
    resolve_type,
    type_name,
)

logger = logging.getLogger(__name__)

# =============================================================================
# FIELD RULES
# =============================================================================


REQUIRED_SCHEMA_FIELDS: dict[str, type] = {
    "description": str,
    "used_by": list,
}

OPTIONAL_SCHEMA_FIELDS: dict[str, type] = {
    "primary_key": str,
}

REQUIRED_PROPERTY_FIELDS: dict[str, type] = {
    "type": str,
}

OPTIONAL_PROPERTY_FIELDS: dict[str, type] = {
    "description": str,
    "key_into": str,
}


# =============================================================================
# MODELS
# =============================================================================


class PropertySpec(BaseModel):
    """A compiled schema property.

    Attributes:
        type: Resolved type tag.
        description: Optional explanation of the property.
        key_into: Optional name of the collection this property references.
            Informational only.
    """

    model_config = ConfigDict(frozen=True)

    type: PropertyType
    description: str | None = None
    key_into: str | None = None


class Schema(BaseModel):
    """A compiled schema.

    ``properties`` keeps declaration order, which is the order violations
    are reported in.
    """

    model_config = ConfigDict(frozen=True)

    description: str
    used_by: list[Any]
    primary_key: str | None = None
    properties: dict[Any, PropertySpec] = Field(default_factory=dict)


class ValidationResult(BaseModel):
    """Result of checking a collection against a schema.

    Attributes:
        valid: Whether the collection conforms to the schema.
        errors: Report lines (empty when valid).
        message: Rendered report (empty when valid).
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    message: str = ""


# =============================================================================
# VALIDATOR
# =============================================================================


class SchemaValidator:
    """Validates YAML record collections against a YAML schema.

    Construction compiles the schema and raises SchemaError when it is
    malformed. The compiled schema is never mutated afterwards and callers
    only ever see copies of it, so one validator may be shared across
    callers.
    """

    def __init__(self, schema: str) -> None:
        """Parse, check and compile a schema.

        Args:
            schema: YAML text of the schema.

        Raises:
            SchemaError: If the schema fails to parse, is malformed, or
                declares an unknown property type.
        """
        try:
            raw = load_document(schema)
        except yaml.YAMLError as exc:
            raise SchemaError("Schema failed to parse") from exc

        if raw is None:
            raise SchemaError("Schema failed to parse")

        errors = _validate_schema(raw)
        if errors.has_errors():
            errors.introduction = "Invalid schema:"
            raise SchemaError(errors.render(), errors=errors.errors)

        self._schema = _compile_schema(raw)
        logger.debug(
            "Compiled schema with %d properties (primary key: %s)",
            len(self._schema.properties),
            self._schema.primary_key,
        )

    @property
    def schema(self) -> Schema:
        """A copy of the compiled schema.

        Changes made to the returned model do not affect validation.
        """
        return self._schema.model_copy(deep=True)

    def validate(self, collection: str) -> None:
        """Validate a collection of objects.

        Args:
            collection: YAML text holding a sequence of mappings.

        Raises:
            ValidationError: If the collection fails to parse, is not a
                sequence, or any object violates the schema. The message
                holds one "Malformed object:" block per offending object.
        """
        try:
            parsed = load_document(collection)
        except yaml.YAMLError as exc:
            raise ValidationError("Object collection failed to parse") from exc

        if parsed is None:
            raise ValidationError("Object collection failed to parse")

        if not isinstance(parsed, list):
            raise ValidationError("Collection is not an Array of objects")

        errors = ErrorCollector()
        for element in parsed:
            element_errors = self._validate_element(element)
            if element_errors.has_errors():
                errors.concat(
                    "Malformed object:\n" + dump_document(element),
                    element_errors,
                )

        logger.debug("Validated %d objects", len(parsed))

        if errors.has_errors():
            raise ValidationError(errors.render(), errors=errors.errors)

    def check(self, collection: str) -> ValidationResult:
        """Validate a collection, returning a result instead of raising.

        Args:
            collection: YAML text holding a sequence of mappings.

        Returns:
            ValidationResult with the report lines if any.
        """
        try:
            self.validate(collection)
        except ValidationError as exc:
            return ValidationResult(valid=False, errors=exc.errors, message=str(exc))
        return ValidationResult(valid=True)

    def _validate_element(self, element: Any) -> ErrorCollector:
        errors = ErrorCollector()

        if not isinstance(element, dict):
            errors.add(
                f"object: should be of type {name_of_type(dict)}, "
                f"but is of type {type_name(element)}"
            )
            return errors

        primary_key = self._schema.primary_key
        if primary_key is not None and primary_key not in element:
            errors.add(f"missing primary key field {primary_key}:")

        properties = self._schema.properties
        for name, spec in properties.items():
            if name not in element:
                continue
            value = element[name]
            if spec.type.matches(value):
                continue
            if spec.type is PropertyType.BOOLEAN:
                errors.add(f"{name}: should be boolean, but is of type {type_name(value)}")
            else:
                errors.add(
                    f"{name}: should be of type {spec.type.value}, "
                    f"but is of type {type_name(value)}"
                )

        for key in element:
            if key not in properties:
                errors.add(f"unknown field {key}:")

        return errors


# =============================================================================
# HELPERS
# =============================================================================


def _validate_schema(raw: Any) -> ErrorCollector:
    """Check a parsed schema document.

    Returns:
        ErrorCollector; empty when the schema is well formed.
    """
    if not isinstance(raw, dict):
        errors = ErrorCollector()
        errors.add(
            f"schema: should be of type {name_of_type(dict)}, "
            f"but is of type {type_name(raw)}"
        )
        return errors

    errors = _validate_fields(raw, REQUIRED_SCHEMA_FIELDS, OPTIONAL_SCHEMA_FIELDS)

    primary_key = raw.get("primary_key")
    properties = raw.get("properties")

    if properties is None:
        errors.add("no properties defined")
        return errors

    if not isinstance(properties, dict):
        errors.add(
            f"properties: should be of type {name_of_type(dict)}, "
            f"but is of type {type_name(properties)}"
        )
        return errors

    # Unhashable values (sequences, mappings) can never name a property.
    if primary_key is not None and primary_key is not False and (
        not isinstance(primary_key, Hashable) or primary_key not in properties
    ):
        errors.add("missing primary_key: property")

    for name, criteria in properties.items():
        property_errors = _validate_property(criteria)
        if property_errors.has_errors():
            errors.concat(f"malformed property {name}:", property_errors)

    return errors


def _validate_property(criteria: Any) -> ErrorCollector:
    if not isinstance(criteria, dict):
        errors = ErrorCollector()
        errors.add(
            f"should be of type {name_of_type(dict)}, but is of type {type_name(criteria)}"
        )
        return errors

    errors = _validate_fields(criteria, REQUIRED_PROPERTY_FIELDS, OPTIONAL_PROPERTY_FIELDS)

    declared = criteria.get("type")
    if isinstance(declared, str) and resolve_type(declared) is None:
        errors.add(
            f"type: unknown type {declared}, should be one of {', '.join(DECLARED_TYPES)}"
        )

    return errors


def _validate_fields(
    entity: dict[Any, Any],
    required_fields: dict[str, type],
    optional_fields: dict[str, type],
) -> ErrorCollector:
    """Check required and optional fields of a mapping.

    Missing required fields and fields of the wrong type are reported;
    absent optional fields are not.
    """
    errors = ErrorCollector()

    for field, expected in required_fields.items():
        if field in entity:
            _validate_type(entity, field, expected, errors)
        else:
            errors.add(f"missing {field}:")

    for field, expected in optional_fields.items():
        if field in entity:
            _validate_type(entity, field, expected, errors)

    return errors


def _validate_type(
    entity: dict[Any, Any],
    field: str,
    expected: type,
    errors: ErrorCollector,
) -> None:
    value = entity[field]
    if type(value) is not expected:
        errors.add(
            f"{field}: should be of type {name_of_type(expected)}, "
            f"but is of type {type_name(value)}"
        )


def _compile_schema(raw: dict[str, Any]) -> Schema:
    """Build the Schema model from an already-checked document."""
    properties: dict[Any, PropertySpec] = {}
    for name, criteria in raw["properties"].items():
        properties[name] = PropertySpec(
            type=DECLARED_TYPES[criteria["type"]],
            description=criteria.get("description"),
            key_into=criteria.get("key_into"),
        )

    return Schema(
        description=raw["description"],
        used_by=raw["used_by"],
        primary_key=raw.get("primary_key"),
        properties=properties,
    )
