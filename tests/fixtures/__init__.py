"""
Shared test data helpers.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

FIXED_NOW = datetime(2024, 7, 22, 10, 30, tzinfo=timezone.utc)


def make_input(**fields) -> str:
    """Serialize a candidate record to raw JSON text."""
    return json.dumps(fields)


def fixed_clock() -> datetime:
    """Deterministic clock for enrichment timestamps."""
    return FIXED_NOW

# Nested deeper than the JSON decoder's recursion limit
DEEPLY_NESTED = "[" * 100000
