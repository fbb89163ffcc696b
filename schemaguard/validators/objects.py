"""
Object keywords: properties, patternProperties, additionalProperties,
dependencies.

Child values are validated through the orchestrator, so a missing property
reaches its sub-schema as null and is judged by the null/required rule there.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from schemaguard.exceptions import ConfigurationError
from schemaguard.schemas.report import Path, ValidationError
from schemaguard.validators.common import Schema, compile_pattern, error, require_schema

if TYPE_CHECKING:
    from schemaguard.services.validation import SchemaValidator

KEYWORDS = ("properties", "patternProperties", "additionalProperties", "dependencies")


def _read_properties(schema: Schema, path: Path) -> dict[str, Schema]:
    declared = schema.get("properties", {})
    if not isinstance(declared, Mapping):
        raise ConfigurationError(
            "Expected an object of property schemas", keyword="properties", path=path
        )
    return {
        name: require_schema(sub_schema, "properties", path)
        for name, sub_schema in declared.items()
    }


def _read_pattern_properties(
    schema: Schema, path: Path
) -> list[tuple[re.Pattern[str], Schema]]:
    declared = schema.get("patternProperties", {})
    if not isinstance(declared, Mapping):
        raise ConfigurationError(
            "Expected an object of pattern schemas",
            keyword="patternProperties",
            path=path,
        )
    return [
        (
            compile_pattern(pattern, "patternProperties", path),
            require_schema(sub_schema, "patternProperties", path),
        )
        for pattern, sub_schema in declared.items()
    ]


def _read_additional(schema: Schema, path: Path) -> bool | list[str] | Schema:
    policy = schema.get("additionalProperties", True)
    if isinstance(policy, bool) or isinstance(policy, Mapping):
        return policy
    if isinstance(policy, (list, tuple)) and all(isinstance(name, str) for name in policy):
        return list(policy)
    raise ConfigurationError(
        f"Expected a boolean, a list of names or a schema, got {policy!r}",
        keyword="additionalProperties",
        path=path,
    )


def _read_dependencies(schema: Schema, path: Path) -> dict[str, list[str] | Schema]:
    declared = schema.get("dependencies", {})
    if not isinstance(declared, Mapping):
        raise ConfigurationError(
            "Expected an object of dependencies", keyword="dependencies", path=path
        )
    dependencies: dict[str, list[str] | Schema] = {}
    for name, dependency in declared.items():
        if isinstance(dependency, str):
            dependencies[name] = [dependency]
        elif isinstance(dependency, Mapping):
            dependencies[name] = dependency
        elif isinstance(dependency, (list, tuple)) and all(
            isinstance(required, str) for required in dependency
        ):
            dependencies[name] = list(dependency)
        else:
            raise ConfigurationError(
                f"Dependency of {name!r} must be a name, a list of names or a schema",
                keyword="dependencies",
                path=path,
            )
    return dependencies


def validate_object(
    validator: SchemaValidator, instance: Any, schema: Schema, path: Path
) -> list[ValidationError]:
    properties = _read_properties(schema, path)
    pattern_properties = _read_pattern_properties(schema, path)
    additional = _read_additional(schema, path)
    dependencies = _read_dependencies(schema, path)

    if not isinstance(instance, Mapping):
        return []

    errors: list[ValidationError] = []

    for name, sub_schema in properties.items():
        errors.extend(validator.descend(instance.get(name), sub_schema, path + (name,)))

    residual: list[str] = []
    for key, value in instance.items():
        matched = False
        for pattern, sub_schema in pattern_properties:
            if pattern.search(key):
                matched = True
                errors.extend(validator.descend(value, sub_schema, path + (key,)))
        if not matched and key not in properties:
            residual.append(key)

    if additional is not True:
        for key in residual:
            if additional is False:
                errors.append(
                    error(path + (key,), "additionalProperties", f"Property {key!r} is not allowed")
                )
            elif isinstance(additional, list):
                if key not in additional:
                    errors.append(
                        error(
                            path + (key,),
                            "additionalProperties",
                            f"Property {key!r} is not one of the allowed names {additional!r}",
                        )
                    )
            else:
                errors.extend(validator.descend(instance[key], additional, path + (key,)))

    for name, dependency in dependencies.items():
        if name not in instance:
            continue
        if isinstance(dependency, list):
            for required in dependency:
                if required not in instance:
                    errors.append(
                        error(
                            path,
                            "dependencies",
                            f"Property {required!r} is required when {name!r} is present",
                        )
                    )
        else:
            errors.extend(validator.descend(instance, dependency, path))

    return errors
