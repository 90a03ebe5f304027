"""
Enricher - Resolve Display Names from Reference Data.

Looks up district and taluka names for the codes in a candidate record
and stamps the enrichment time. Unknown codes resolve to empty names.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from assignment_pipeline.domain.value_objects import EnrichmentResult
from assignment_pipeline.parsing.record_parser import ParsedInput, ensure_parsed
from assignment_pipeline.reference.dataset import ReferenceDataset

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Enricher:
    """Resolves reference names for a candidate record."""

    def __init__(
        self,
        dataset: ReferenceDataset,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize enricher.

        Args:
            dataset: Reference tables to resolve names from
            clock: Source of the enrichment timestamp (defaults to UTC now)
        """
        self.dataset = dataset
        self._clock = clock or utc_now

    def enrich(self, raw: ParsedInput) -> EnrichmentResult:
        """
        Enrich a candidate record.

        Args:
            raw: Raw JSON text or ParseResult

        Returns:
            EnrichmentResult; carries ``error`` instead of raising when
            the input could not be parsed
        """
        timestamp = self._clock().isoformat()
        parsed = ensure_parsed(raw)
        if not parsed.ok:
            return EnrichmentResult(enrichment_date=timestamp, error=parsed.error)

        record = parsed.record or {}
        district_code = record.get("district_code")
        taluka_code = record.get("taluka_code")

        district_name = self.dataset.district_name(district_code)
        taluka_name = self.dataset.taluka_name(taluka_code)

        if not district_name:
            logger.debug(f"No district found for code {district_code!r}")
        if not taluka_name:
            logger.debug(f"No taluka found for code {taluka_code!r}")

        return EnrichmentResult(
            district_name=district_name,
            taluka_name=taluka_name,
            enrichment_date=timestamp,
        )
