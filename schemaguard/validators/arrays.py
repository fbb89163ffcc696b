"""Array keywords: items, additionalItems, minItems, maxItems, uniqueItems."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from schemaguard.exceptions import ConfigurationError
from schemaguard.models.value import deep_equal
from schemaguard.schemas.report import Path, ValidationError
from schemaguard.validators.common import (
    Schema,
    bound_errors,
    error,
    read_bounds,
    read_flag,
    require_schema,
    require_schema_list,
)

if TYPE_CHECKING:
    from schemaguard.services.validation import SchemaValidator

KEYWORDS = ("items", "additionalItems", "minItems", "maxItems", "uniqueItems")


def _read_items(schema: Schema, path: Path) -> Schema | list[Schema] | None:
    if "items" not in schema:
        return None
    items = schema["items"]
    if isinstance(items, (list, tuple)):
        return require_schema_list(items, "items", path)
    return require_schema(items, "items", path)


def _read_additional_items(schema: Schema, path: Path) -> bool | Schema:
    # Positional item lists close the array unless told otherwise.
    policy = schema.get("additionalItems", False)
    if isinstance(policy, (bool, Mapping)):
        return policy
    raise ConfigurationError(
        f"Expected a boolean or a schema, got {policy!r}",
        keyword="additionalItems",
        path=path,
    )


def validate_array(
    validator: SchemaValidator, instance: Any, schema: Schema, path: Path
) -> list[ValidationError]:
    items = _read_items(schema, path)
    additional = _read_additional_items(schema, path)
    unique = read_flag(schema, "uniqueItems", path)
    counts = read_bounds(schema, path, lower="minItems", upper="maxItems", counts=True)

    if not isinstance(instance, (list, tuple)):
        return []

    errors: list[ValidationError] = []

    if isinstance(items, Mapping):
        for index, element in enumerate(instance):
            errors.extend(validator.descend(element, items, path + (index,)))
    elif items is not None:
        for index, element in enumerate(instance):
            if index < len(items):
                errors.extend(validator.descend(element, items[index], path + (index,)))
            elif additional is False:
                errors.append(
                    error(
                        path + (index,),
                        "additionalItems",
                        f"Item at index {index} is not allowed; only {len(items)} item(s) are declared",
                    )
                )
            elif additional is not True:
                errors.extend(validator.descend(element, additional, path + (index,)))

    errors.extend(bound_errors(Decimal(len(instance)), counts, path, "Array length"))

    if unique:
        for first in range(len(instance)):
            for second in range(first + 1, len(instance)):
                if deep_equal(instance[first], instance[second]):
                    errors.append(
                        error(
                            path,
                            "uniqueItems",
                            f"Items at index {first} and {second} are equal",
                        )
                    )
    return errors
