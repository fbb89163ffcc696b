"""
Composition keywords: allOf, anyOf, oneOf, not.

Every alternative is validated against the same instance at the same path.
Only allOf passes sub-errors through; the others report one summary error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from schemaguard.schemas.report import Path, ValidationError
from schemaguard.validators.common import Schema, error, require_schema, require_schema_list

if TYPE_CHECKING:
    from schemaguard.services.validation import SchemaValidator

KEYWORDS = ("allOf", "anyOf", "oneOf", "not")


def _read_not(schema: Schema, path: Path) -> list[Schema]:
    negated = schema["not"]
    if isinstance(negated, Mapping):
        return [negated]
    if isinstance(negated, (list, tuple)):
        return require_schema_list(negated, "not", path)
    return [require_schema(negated, "not", path)]


def validate_composition(
    validator: SchemaValidator, instance: Any, schema: Schema, path: Path
) -> list[ValidationError]:
    errors: list[ValidationError] = []

    if "allOf" in schema:
        for sub_schema in require_schema_list(schema["allOf"], "allOf", path):
            errors.extend(validator.descend(instance, sub_schema, path))

    if "anyOf" in schema:
        alternatives = require_schema_list(schema["anyOf"], "anyOf", path)
        outcomes = [validator.conforms(instance, s, path) for s in alternatives]
        if not any(outcomes):
            errors.append(
                error(
                    path,
                    "anyOf",
                    f"Value does not match any of the {len(alternatives)} allowed schemas",
                )
            )

    if "oneOf" in schema:
        alternatives = require_schema_list(schema["oneOf"], "oneOf", path)
        matches = sum(validator.conforms(instance, s, path) for s in alternatives)
        if matches != 1:
            errors.append(
                error(
                    path,
                    "oneOf",
                    f"Value matches {matches} of {len(alternatives)} schemas, expected exactly one",
                )
            )

    if "not" in schema:
        negated = _read_not(schema, path)
        if all([validator.conforms(instance, s, path) for s in negated]):
            errors.append(error(path, "not", "Value must not match the given schema"))

    return errors
