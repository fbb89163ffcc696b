"""Tests for string keywords."""

import pytest

from schemaguard.exceptions import ConfigurationError
from schemaguard.services.validation import validate


def test_pattern_match():
    schema = {"pattern": "^fo+$"}
    assert validate("foo", schema) == []
    errors = validate("bar", schema)
    assert len(errors) == 1
    assert errors[0].keyword == "pattern"


def test_pattern_matches_anywhere():
    assert validate("xx-123-yy", {"pattern": r"\d{3}"}) == []


def test_invalid_pattern_raises_even_for_other_kinds():
    with pytest.raises(ConfigurationError, match="Invalid regular expression"):
        validate("abc", {"pattern": "(unclosed"})
    with pytest.raises(ConfigurationError):
        validate(7, {"pattern": "(unclosed"})


def test_length_bounds_inclusive():
    schema = {"minLength": 2, "maxLength": 4}
    assert validate("ab", schema) == []
    assert validate("abcd", schema) == []
    assert [e.keyword for e in validate("a", schema)] == ["minLength"]
    assert [e.keyword for e in validate("abcde", schema)] == ["maxLength"]


def test_length_bounds_exclusive():
    schema = {"minLength": 2, "maxLength": 4, "exclusiveMinimum": True, "exclusiveMaximum": True}
    assert [e.keyword for e in validate("ab", schema)] == ["minLength"]
    assert [e.keyword for e in validate("abcd", schema)] == ["maxLength"]
    assert validate("abc", schema) == []


def test_length_counts_code_points():
    assert validate("日本語", {"maxLength": 3}) == []
    assert validate("🎉", {"minLength": 1, "maxLength": 1}) == []


def test_length_message():
    error = validate("a", {"minLength": 2})[0]
    assert error.message == "String length must be at least 2, got 1"


def test_string_keywords_skip_other_kinds():
    schema = {"pattern": "^a$", "minLength": 5}
    assert validate(12, schema) == []
    assert validate(["a"], schema) == []


def test_negative_length_rejected():
    with pytest.raises(ConfigurationError):
        validate("abc", {"minLength": -1})


def test_length_bounds_checked_for_non_strings():
    with pytest.raises(ConfigurationError):
        validate([1], {"maxLength": "3"})
    with pytest.raises(ConfigurationError):
        validate(7, {"minLength": 1.5})


def test_non_boolean_exclusive_flag_rejected():
    with pytest.raises(ConfigurationError):
        validate("abc", {"minLength": 1, "exclusiveMinimum": "yes"})
