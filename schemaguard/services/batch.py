"""
Batch validation for record streams.

Invalid records are collected with their errors and do not halt the batch;
the caller decides what to do with each partition.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from schemaguard.schemas.report import BatchReport, InvalidRecord
from schemaguard.services.validation import SchemaValidator

logger = logging.getLogger(__name__)


def validate_records(
    records: Iterable[Any],
    schema: Any,
    validator: SchemaValidator | None = None,
) -> BatchReport:
    """Split records into those that conform to ``schema`` and those that don't."""
    validator = validator or SchemaValidator()
    valid, invalid = [], []

    for index, record in enumerate(records):
        errors = validator.validate(record, schema)
        if errors:
            invalid.append(InvalidRecord(index=index, record=record, errors=errors))
        else:
            valid.append(record)

    logger.info("Validation: %d valid, %d invalid", len(valid), len(invalid))
    return BatchReport(valid_records=valid, invalid_records=invalid)
