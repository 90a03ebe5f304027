"""
Enrichment Package - Reference Name Resolution.
"""

from assignment_pipeline.enrichment.enricher import Enricher, utc_now

__all__ = ["Enricher", "utc_now"]
