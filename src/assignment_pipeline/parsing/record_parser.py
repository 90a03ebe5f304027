"""
Record Parser - Explicit Parse Result for Raw JSON Input.

Every stage consumes a ParseResult instead of re-parsing the raw text
and catching exceptions on its own. A failed parse carries the error
message that each stage turns into its own error marker.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional, Union

from assignment_pipeline.domain.value_objects import RecordDict

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON format"


@dataclass(frozen=True)
class ParseResult:
    """Success/failure variant of parsing raw input text."""

    record: Optional[RecordDict] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, record: RecordDict) -> "ParseResult":
        return cls(record=record)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(error=error)


# Either raw text or an already parsed result
ParsedInput = Union[str, ParseResult]


def parse_record(raw_text: str) -> ParseResult:
    """
    Parse raw JSON text into a candidate record.

    Args:
        raw_text: Free-form text expected to hold a JSON object

    Returns:
        ParseResult; failed if the text is not JSON or not an object
    """
    try:
        parsed = json.loads(raw_text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug(f"Unparseable input: {e}")
        return ParseResult.failure(INVALID_JSON_MESSAGE)

    if not isinstance(parsed, dict):
        logger.debug(f"JSON root is {type(parsed).__name__}, expected object")
        return ParseResult.failure(f"{INVALID_JSON_MESSAGE}: expected an object")

    return ParseResult.success(parsed)


def ensure_parsed(value: ParsedInput) -> ParseResult:
    """Parse raw text, or pass an existing ParseResult through."""
    if isinstance(value, ParseResult):
        return value
    return parse_record(value)
