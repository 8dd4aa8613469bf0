"""Runtime type tags and the type matcher used by schema nodes."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

UNION_TYPES = (list, tuple, set, frozenset)


class _Missing:
    """Placeholder for a field that the data mapping does not contain."""

    def __reduce__(self) -> str:
        return "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class TypeTag(str, Enum):
    """Type names a schema node may declare in its ``type`` field."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"


def runtime_type_tag(value: Any) -> TypeTag | None:
    """Classify a data value, or return None when no tag describes it."""
    if value is MISSING:
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.NULL
    # bool is an int subclass, so it has to be checked first.
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if callable(value):
        return TypeTag.FUNCTION
    return None


def matches_type(value: Any, descriptor: Any) -> bool:
    """
    Check a value against a schema ``type`` descriptor.

    A list, tuple or set descriptor is a union and matches when the value's
    tag is any of its members. A string descriptor must equal the tag. Every
    other descriptor, and any unknown tag name, never matches.
    """
    tag = runtime_type_tag(value)
    if tag is None:
        return False

    if isinstance(descriptor, UNION_TYPES):
        return any(isinstance(item, str) and item == tag.value for item in descriptor)

    if isinstance(descriptor, str):
        return descriptor == tag.value

    return False
