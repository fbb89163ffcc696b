"""Tests for batch validation – no schema caching, no I/O."""

import logging

from schemaguard.services.batch import validate_records

ORDER_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "required": True},
        "quantity": {"type": "integer", "minimum": 1},
    },
}


def test_records_split_into_valid_and_invalid():
    records = [
        {"id": "A-1", "quantity": 2},
        {"quantity": 0},
        {"id": "A-3"},
    ]
    report = validate_records(records, ORDER_SCHEMA)

    assert report.valid_count == 2
    assert report.invalid_count == 1
    invalid = report.invalid_records[0]
    assert invalid.index == 1
    assert invalid.record == {"quantity": 0}
    assert [(e.path, e.keyword) for e in invalid.errors] == [
        (("id",), "required"),
        (("quantity",), "minimum"),
    ]


def test_empty_batch():
    report = validate_records([], ORDER_SCHEMA)
    assert report.valid_count == 0
    assert report.invalid_count == 0


def test_report_serializes():
    report = validate_records([{"quantity": 1}], ORDER_SCHEMA)
    dumped = report.model_dump()
    assert dumped["invalid_records"][0]["errors"][0] == {
        "path": ("id",),
        "keyword": "required",
        "message": "Value is required",
    }


def test_batch_logs_counts(caplog):
    with caplog.at_level(logging.INFO, logger="schemaguard.services.batch"):
        validate_records([{"id": "x"}, {}], ORDER_SCHEMA)
    assert "Validation: 1 valid, 1 invalid" in caplog.text
