"""Number keywords: minimum, maximum, divisibleBy."""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING, Any

from schemaguard.exceptions import ConfigurationError
from schemaguard.models.value import is_number, to_decimal
from schemaguard.schemas.report import Path, ValidationError
from schemaguard.validators.common import (
    Schema,
    bound_errors,
    error,
    read_bounds,
    read_number,
)

if TYPE_CHECKING:
    from schemaguard.services.validation import SchemaValidator

KEYWORDS = ("minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum", "divisibleBy")


def validate_number(
    validator: SchemaValidator, instance: Any, schema: Schema, path: Path
) -> list[ValidationError]:
    divisor = None
    if "divisibleBy" in schema:
        divisor = read_number(schema, "divisibleBy", path)
        if not divisor.is_finite() or divisor <= 0:
            raise ConfigurationError(
                f"Divisor must be a positive number, got {divisor}",
                keyword="divisibleBy",
                path=path,
            )

    bounds = read_bounds(schema, path, lower="minimum", upper="maximum")

    if not is_number(instance):
        return []

    value = to_decimal(instance)
    errors = bound_errors(value, bounds, path, "Value")

    # Fractions keep the remainder exact for non-integral divisors.
    if divisor is not None and (
        not value.is_finite() or Fraction(value) % Fraction(divisor) != 0
    ):
        errors.append(error(path, "divisibleBy", f"Value {value} is not divisible by {divisor}"))
    return errors
