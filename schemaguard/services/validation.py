"""
Schema validation service.

Walks an instance and a schema together and collects every violation rather
than failing on the first one. Per node the order is fixed:

    null/required short-circuit -> type -> enum -> string/number keywords
    -> object/array keywords -> allOf/anyOf/oneOf/not

Malformed schemas raise ConfigurationError; bad instance data never raises.
"""

from __future__ import annotations

import logging
from typing import Any

from schemaguard.schemas.report import Path, ValidationError, ValidationReport, json_pointer
from schemaguard.validators import arrays, composition, core, numbers, objects, strings
from schemaguard.validators.common import require_schema

logger = logging.getLogger(__name__)

_STEPS = (
    core.check_type,
    core.check_enum,
    strings.validate_string,
    numbers.validate_number,
    objects.validate_object,
    arrays.validate_array,
    composition.validate_composition,
)

RECOGNIZED_KEYWORDS = frozenset(
    core.KEYWORDS
    + strings.KEYWORDS
    + numbers.KEYWORDS
    + objects.KEYWORDS
    + arrays.KEYWORDS
    + composition.KEYWORDS
)


class SchemaValidator:
    """
    Stateless recursive matcher.

    Usage:
        validator = SchemaValidator()
        errors = validator.validate({"age": -1}, {"properties": {"age": {"minimum": 0}}})

    One instance may be shared between threads as long as callers do not
    mutate the schema or instance while a call is running.
    """

    def validate(self, instance: Any, schema: Any) -> list[ValidationError]:
        errors = self.descend(instance, schema, ())
        logger.debug("Validation finished with %d error(s)", len(errors))
        return errors

    def descend(self, instance: Any, schema: Any, path: Path) -> list[ValidationError]:
        """Validate the sub-tree at ``path`` against ``schema``."""
        schema = require_schema(schema, None, path)
        if logger.isEnabledFor(logging.DEBUG):
            unknown = sorted(str(k) for k in schema if k not in RECOGNIZED_KEYWORDS)
            if unknown:
                logger.debug(
                    "Ignoring unrecognized keyword(s) %s at %s",
                    ", ".join(unknown),
                    json_pointer(path) or "/",
                )

        if instance is None:
            outcome = core.null_short_circuit(schema, path)
            if outcome is not None:
                return outcome

        errors: list[ValidationError] = []
        for step in _STEPS:
            errors.extend(step(self, instance, schema, path))
        return errors

    def conforms(self, instance: Any, schema: Any, path: Path = ()) -> bool:
        return not self.descend(instance, schema, path)


_validator = SchemaValidator()


def validate(instance: Any, schema: Any) -> list[ValidationError]:
    """
    Validate an instance against a schema.
    Returns every violation in evaluation order (empty list = valid).
    """
    return _validator.validate(instance, schema)


def validate_report(instance: Any, schema: Any) -> ValidationReport:
    return ValidationReport.from_errors(validate(instance, schema))


def validate_against_schema(data: Any, schema: Any) -> list[str]:
    """
    Validate data against a schema.
    Returns a list of error messages (empty list = valid).
    """
    return [str(error) for error in validate(data, schema)]
