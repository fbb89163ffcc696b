"""Tests for object keywords."""

import pytest

from schemaguard.exceptions import ConfigurationError
from schemaguard.services.validation import validate


def _summary(errors):
    return [(e.path, e.keyword) for e in errors]


def test_missing_required_property():
    schema = {"properties": {"a": {"type": "integer", "required": True}}}
    assert _summary(validate({}, schema)) == [(("a",), "required")]


def test_missing_optional_property():
    assert validate({}, {"properties": {"a": {"type": "integer"}}}) == []


def test_nested_properties_extend_path():
    schema = {"properties": {"a": {"properties": {"b": {"type": "string"}}}}}
    assert _summary(validate({"a": {"b": 1}}, schema)) == [(("a", "b"), "type")]


def test_additional_properties_false():
    schema = {"properties": {"a": {"type": "integer"}}, "additionalProperties": False}
    errors = validate({"a": 1, "b": 2}, schema)
    assert _summary(errors) == [(("b",), "additionalProperties")]


def test_additional_properties_default_allows_anything():
    assert validate({"a": 1, "zzz": [1, 2]}, {"properties": {"a": {}}}) == []


def test_pattern_properties_count_as_covered():
    schema = {
        "properties": {"a": {}},
        "patternProperties": {"^x-": {}},
        "additionalProperties": False,
    }
    assert _summary(validate({"a": 1, "x-trace": 2, "b": 3}, schema)) == [
        (("b",), "additionalProperties")
    ]


def test_key_must_satisfy_every_matching_pattern():
    schema = {"patternProperties": {"^x-": {"type": "string"}, "id$": {"type": "integer"}}}
    assert _summary(validate({"x-id": "abc"}, schema)) == [(("x-id",), "type")]
    assert validate({"x-name": "abc", "user_id": 3}, schema) == []


def test_additional_properties_allow_list():
    schema = {"properties": {"a": {}}, "additionalProperties": ["b"]}
    assert _summary(validate({"a": 1, "b": 2, "c": 3}, schema)) == [
        (("c",), "additionalProperties")
    ]


def test_additional_properties_schema():
    schema = {"properties": {"id": {"type": "string"}}, "additionalProperties": {"type": "integer"}}
    assert _summary(validate({"id": "x", "count": 1, "label": "y"}, schema)) == [
        (("label",), "type")
    ]


def test_list_dependencies():
    schema = {"dependencies": {"a": ["b", "c"]}}
    errors = validate({"a": 1}, schema)
    assert _summary(errors) == [((), "dependencies"), ((), "dependencies")]
    assert "'b'" in errors[0].message and "'c'" in errors[1].message
    assert validate({"c": 3}, schema) == []
    assert validate({"a": 1, "b": 2, "c": 3}, schema) == []


def test_single_name_dependency():
    assert _summary(validate({"a": 1}, {"dependencies": {"a": "b"}})) == [((), "dependencies")]


def test_schema_dependency_validates_whole_object():
    schema = {"dependencies": {"card": {"properties": {"billing": {"required": True}}}}}
    assert _summary(validate({"card": "4111"}, schema)) == [(("billing",), "required")]
    assert validate({"card": "4111", "billing": "addr"}, schema) == []
    assert validate({}, schema) == []


def test_object_keywords_skip_other_kinds():
    schema = {"properties": {"a": {"required": True}}, "additionalProperties": False}
    assert validate([1, 2], schema) == []
    assert validate("text", schema) == []


def test_invalid_pattern_property_raises():
    with pytest.raises(ConfigurationError):
        validate({}, {"patternProperties": {"[": {}}})


def test_malformed_additional_properties_raises():
    with pytest.raises(ConfigurationError):
        validate({"a": 1}, {"additionalProperties": 0})


def test_malformed_dependency_raises():
    with pytest.raises(ConfigurationError):
        validate({"a": 1}, {"dependencies": {"a": 5}})
