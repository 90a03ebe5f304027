"""
Unit Tests for the record parser.

Test Aspects Covered:
    ✅ Business Logic: Object parsing
    ✅ Error Handling: Malformed and non-object JSON
"""

from __future__ import annotations

import pytest

from assignment_pipeline.parsing.record_parser import (
    INVALID_JSON_MESSAGE,
    ParseResult,
    ensure_parsed,
    parse_record,
)
from tests.fixtures import DEEPLY_NESTED


class TestParseRecord:
    """Test cases for parse_record."""

    def test_parses_object(self) -> None:
        result = parse_record('{"sales_person": "Amit", "extra": [1, 2]}')

        assert result.ok
        assert result.record == {"sales_person": "Amit", "extra": [1, 2]}
        assert result.error is None

    @pytest.mark.parametrize("raw", ["", "{", "{'a': 1}", "undefined", "{\"a\": }"])
    def test_malformed_json(self, raw: str) -> None:
        """
        SCENARIO: Text that is not valid JSON
        EXPECTED: Failure result, no exception
        """
        result = parse_record(raw)

        assert not result.ok
        assert result.record is None
        assert result.error == INVALID_JSON_MESSAGE

    @pytest.mark.parametrize("raw", ["null", "42", '"text"', "[]", "true"])
    def test_non_object_root(self, raw: str) -> None:
        result = parse_record(raw)

        assert not result.ok
        assert result.error.startswith(INVALID_JSON_MESSAGE)

    def test_deeply_nested_input(self) -> None:
        """
        SCENARIO: Arrays nested past the decoder recursion limit
        EXPECTED: Failure result instead of RecursionError
        """
        result = parse_record(DEEPLY_NESTED)

        assert not result.ok
        assert result.error == INVALID_JSON_MESSAGE

    def test_empty_object_is_ok(self) -> None:
        assert parse_record("{}").ok


class TestEnsureParsed:
    """Test cases for ensure_parsed."""

    def test_passes_parse_result_through(self) -> None:
        parsed = ParseResult.success({"a": 1})

        assert ensure_parsed(parsed) is parsed

    def test_parses_raw_text(self) -> None:
        assert ensure_parsed('{"a": 1}').record == {"a": 1}
