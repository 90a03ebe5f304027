"""
Parsing Package - Raw Input Handling.

Turns raw JSON text into an explicit ParseResult consumed uniformly by
all pipeline stages.
"""

from assignment_pipeline.parsing.record_parser import (
    INVALID_JSON_MESSAGE,
    ParsedInput,
    ParseResult,
    ensure_parsed,
    parse_record,
)

__all__ = [
    "INVALID_JSON_MESSAGE",
    "ParsedInput",
    "ParseResult",
    "ensure_parsed",
    "parse_record",
]
