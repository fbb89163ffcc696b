"""Null/required short-circuit, type and enum keywords."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from schemaguard.exceptions import ConfigurationError
from schemaguard.models.value import ValueKind, deep_equal, describe, is_integral, kind_of
from schemaguard.schemas.report import Path, ValidationError
from schemaguard.validators.common import Schema, error, read_flag

if TYPE_CHECKING:
    from schemaguard.services.validation import SchemaValidator

KEYWORDS = ("required", "type", "enum")

TYPE_PREDICATES: dict[str, Callable[[Any], bool]] = {
    "string": lambda value: kind_of(value) is ValueKind.STRING,
    "number": lambda value: kind_of(value) is ValueKind.NUMBER,
    "integer": is_integral,
    "boolean": lambda value: kind_of(value) is ValueKind.BOOLEAN,
    "array": lambda value: kind_of(value) is ValueKind.ARRAY,
    "object": lambda value: kind_of(value) is ValueKind.OBJECT,
    "null": lambda value: value is None,
    "any": lambda value: True,
}


def type_names(schema: Schema, path: Path) -> tuple[str, ...]:
    """The declared type names; empty when ``type`` is absent."""
    if "type" not in schema:
        return ()
    declared = schema["type"]
    names = tuple(declared) if isinstance(declared, (list, tuple)) else (declared,)
    for name in names:
        if not isinstance(name, str) or name not in TYPE_PREDICATES:
            raise ConfigurationError(
                f"Unknown type {name!r}", keyword="type", path=path
            )
    return names


def null_short_circuit(schema: Schema, path: Path) -> list[ValidationError] | None:
    """
    Outcome for a null instance, or None when ordinary checks apply.

    Null passes unless ``required: true`` is declared. Only a schema that
    names the null type itself gets the regular keyword checks.
    """
    required = read_flag(schema, "required", path)
    if "null" in type_names(schema, path):
        return None
    if required:
        return [error(path, "required", "Value is required")]
    return []


def check_type(
    validator: SchemaValidator, instance: Any, schema: Schema, path: Path
) -> list[ValidationError]:
    names = type_names(schema, path)
    if not names or any(TYPE_PREDICATES[name](instance) for name in names):
        return []
    expected = " | ".join(names)
    return [error(path, "type", f"Expected {expected}, got {describe(instance)}")]


def check_enum(
    validator: SchemaValidator, instance: Any, schema: Schema, path: Path
) -> list[ValidationError]:
    if "enum" not in schema:
        return []
    options = schema["enum"]
    if not isinstance(options, (list, tuple)):
        raise ConfigurationError(
            f"Expected a list of allowed values, got {options!r}",
            keyword="enum",
            path=path,
        )
    if any(deep_equal(instance, option) for option in options):
        return []
    return [error(path, "enum", f"Value {instance!r} is not one of {list(options)!r}")]
