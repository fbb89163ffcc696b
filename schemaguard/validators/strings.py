"""String keywords: pattern, format, minLength, maxLength."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from schemaguard.exceptions import ConfigurationError
from schemaguard.schemas.report import Path, ValidationError
from schemaguard.services.formats import FORMATS
from schemaguard.validators.common import (
    Schema,
    bound_errors,
    compile_pattern,
    error,
    read_bounds,
)

if TYPE_CHECKING:
    from schemaguard.services.validation import SchemaValidator

KEYWORDS = ("pattern", "format", "minLength", "maxLength")


def validate_string(
    validator: SchemaValidator, instance: Any, schema: Schema, path: Path
) -> list[ValidationError]:
    # Keyword values are read before the kind gate; a broken schema raises
    # whatever the instance is.
    pattern = compile_pattern(schema["pattern"], "pattern", path) if "pattern" in schema else None

    format_name = schema.get("format")
    if format_name is not None and (not isinstance(format_name, str) or format_name not in FORMATS):
        raise ConfigurationError(
            f"Unknown format {format_name!r}", keyword="format", path=path
        )
    lengths = read_bounds(schema, path, lower="minLength", upper="maxLength", counts=True)

    if not isinstance(instance, str):
        return []

    errors: list[ValidationError] = []
    if pattern is not None and not pattern.search(instance):
        errors.append(
            error(path, "pattern", f"{instance!r} does not match pattern {pattern.pattern!r}")
        )
    if format_name is not None and not FORMATS[format_name].search(instance):
        errors.append(error(path, "format", f"{instance!r} is not a valid {format_name}"))

    errors.extend(bound_errors(Decimal(len(instance)), lengths, path, "String length"))
    return errors
