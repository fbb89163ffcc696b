"""
Value model shared by instances and schemas.

Parsed JSON-like input arrives as plain Python objects. This module decides
which kind of value each object is, and defines the single structural
equality used by ``enum`` and ``uniqueItems``.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind:
    """Classify a value. ``bool`` is checked before numbers since it subclasses ``int``."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def to_decimal(value: int | float | Decimal) -> Decimal:
    """
    Exact decimal form of a number.
    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")
    rather than the binary approximation.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def is_integral(value: Any) -> bool:
    if not is_number(value):
        return False
    number = to_decimal(value)
    return number.is_finite() and number == number.to_integral_value()


def describe(value: Any) -> str:
    """Kind name used in messages; integral numbers read as 'integer'."""
    kind = kind_of(value)
    if kind is ValueKind.NUMBER and is_integral(value):
        return "integer"
    return kind.value


def deep_equal(left: Any, right: Any) -> bool:
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind is not right_kind:
        return False

    if left_kind is ValueKind.NUMBER:
        return to_decimal(left) == to_decimal(right)

    if left_kind is ValueKind.ARRAY:
        return len(left) == len(right) and all(
            deep_equal(a, b) for a, b in zip(left, right)
        )

    if left_kind is ValueKind.OBJECT:
        if set(left.keys()) != set(right.keys()):
            return False
        return all(deep_equal(left[key], right[key]) for key in left)

    return left == right
