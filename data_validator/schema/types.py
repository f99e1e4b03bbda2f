"""Property type tags and the type-name vocabulary used in reports.

Schemas declare property types by name. Names are resolved once, at schema
compile time, into a PropertyType tag through a fixed lookup table.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Any


class PropertyType(str, Enum):
    """Kinds of value a schema property may declare.

    BOOLEAN is a tag of its own: a boolean property accepts exactly
    ``true`` or ``false`` rather than "any value of the same Python type".
    """

    STRING = "String"
    ARRAY = "Array"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    def matches(self, value: Any) -> bool:
        """Check a value against this tag.

        Non-boolean tags require the exact Python type, so ``True`` is not
        accepted where an Integer is expected.
        """
        if self is PropertyType.BOOLEAN:
            return value is True or value is False
        return type(value) is self.python_type


_PYTHON_TYPES: dict[PropertyType, type] = {
    PropertyType.STRING: str,
    PropertyType.ARRAY: list,
    PropertyType.INTEGER: int,
    PropertyType.BOOLEAN: bool,
}

# Declared type name -> tag. "Fixnum" is an alias of "Integer".
DECLARED_TYPES: dict[str, PropertyType] = {
    "String": PropertyType.STRING,
    "Array": PropertyType.ARRAY,
    "Fixnum": PropertyType.INTEGER,
    "Integer": PropertyType.INTEGER,
    "Boolean": PropertyType.BOOLEAN,
}

# Python type -> name shown in violation messages. Order matters: bool must
# be checked before int and datetime before date.
_TYPE_NAMES: list[tuple[type, str]] = [
    (bool, "Boolean"),
    (int, "Integer"),
    (float, "Float"),
    (str, "String"),
    (list, "Array"),
    (dict, "Hash"),
    (type(None), "Null"),
    (datetime.datetime, "Time"),
    (datetime.date, "Date"),
    (bytes, "Binary"),
    (set, "Set"),
]


def resolve_type(name: str) -> PropertyType | None:
    """Look up a declared type name, returning None when it is unknown."""
    return DECLARED_TYPES.get(name)


def type_name(value: Any) -> str:
    """Return the report name for a value's type."""
    return name_of_type(type(value))


def name_of_type(python_type: type) -> str:
    """Return the report name for a Python type."""
    for candidate, name in _TYPE_NAMES:
        if python_type is candidate:
            return name
    return python_type.__name__
