"""
Readers for keyword values shared by the validator families.

Each reader returns the keyword's value in a usable form, or raises
ConfigurationError when the schema author wrote something that cannot be
evaluated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from schemaguard.exceptions import ConfigurationError
from schemaguard.models.value import is_integral, is_number, to_decimal
from schemaguard.schemas.report import Path, ValidationError

Schema = Mapping[str, Any]


def error(path: Path, keyword: str, message: str) -> ValidationError:
    return ValidationError(path=path, keyword=keyword, message=message)


def require_schema(value: Any, keyword: str | None, path: Path) -> Schema:
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"Schema must be an object, got {type(value).__name__}",
            keyword=keyword,
            path=path,
        )
    return value


def require_schema_list(value: Any, keyword: str, path: Path) -> list[Schema]:
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(
            f"Expected a list of schemas, got {type(value).__name__}",
            keyword=keyword,
            path=path,
        )
    return [require_schema(entry, keyword, path) for entry in value]


def read_flag(schema: Schema, keyword: str, path: Path) -> bool:
    value = schema.get(keyword, False)
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Expected a boolean, got {value!r}", keyword=keyword, path=path
        )
    return value


def read_number(schema: Schema, keyword: str, path: Path) -> Decimal:
    value = schema[keyword]
    if not is_number(value) or to_decimal(value).is_nan():
        raise ConfigurationError(
            f"Expected a number, got {value!r}", keyword=keyword, path=path
        )
    return to_decimal(value)


def read_count(schema: Schema, keyword: str, path: Path) -> int:
    value = schema[keyword]
    if not is_integral(value) or value < 0:
        raise ConfigurationError(
            f"Expected a non-negative integer, got {value!r}",
            keyword=keyword,
            path=path,
        )
    return int(value)


def compile_pattern(pattern: Any, keyword: str, path: Path) -> re.Pattern[str]:
    if not isinstance(pattern, str):
        raise ConfigurationError(
            f"Expected a regular expression string, got {pattern!r}",
            keyword=keyword,
            path=path,
        )
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(
            f"Invalid regular expression {pattern!r}: {exc}",
            keyword=keyword,
            path=path,
        ) from exc


@dataclass(frozen=True)
class Bounds:
    """Declared lower/upper bounds of one keyword pair, with their exclusive flags."""

    lower_keyword: str
    upper_keyword: str
    lower: Decimal | int | None = None
    upper: Decimal | int | None = None
    exclusive_min: bool = False
    exclusive_max: bool = False


def read_bounds(
    schema: Schema, path: Path, *, lower: str, upper: str, counts: bool = False
) -> Bounds:
    """
    Read the ``lower``/``upper`` keywords of ``schema``.

    Bounds are inclusive unless exclusiveMinimum/exclusiveMaximum is true.
    The same two flags govern length, count and numeric bounds.
    """
    read = read_count if counts else read_number
    return Bounds(
        lower_keyword=lower,
        upper_keyword=upper,
        lower=read(schema, lower, path) if lower in schema else None,
        upper=read(schema, upper, path) if upper in schema else None,
        exclusive_min=read_flag(schema, "exclusiveMinimum", path),
        exclusive_max=read_flag(schema, "exclusiveMaximum", path),
    )


def bound_errors(
    actual: Decimal, bounds: Bounds, path: Path, subject: str
) -> list[ValidationError]:
    errors: list[ValidationError] = []

    if bounds.lower is not None:
        bound = bounds.lower
        if actual.is_nan() or actual < bound or (bounds.exclusive_min and actual == bound):
            qualifier = "greater than" if bounds.exclusive_min else "at least"
            errors.append(
                error(
                    path,
                    bounds.lower_keyword,
                    f"{subject} must be {qualifier} {bound}, got {actual}",
                )
            )

    if bounds.upper is not None:
        bound = bounds.upper
        if actual.is_nan() or actual > bound or (bounds.exclusive_max and actual == bound):
            qualifier = "less than" if bounds.exclusive_max else "at most"
            errors.append(
                error(
                    path,
                    bounds.upper_keyword,
                    f"{subject} must be {qualifier} {bound}, got {actual}",
                )
            )

    return errors
