"""
Field Validator - Validate Candidate Records.

Validates a candidate record before any rule or enrichment work:
    - Input is a JSON object
    - Required fields are present (district_code, taluka_code, sales_person)
    - district_code / taluka_code exist in the reference tables
    - sales_person meets the minimum length

Design Notes:
    - Required-field checks never short-circuit the content checks
    - Result order is deterministic
    - Taluka/district consistency is a separate, opt-in check
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from assignment_pipeline.config.models import ValidationConfig
from assignment_pipeline.domain.entities import FieldStatus
from assignment_pipeline.domain.value_objects import FieldResult, RecordDict
from assignment_pipeline.parsing.record_parser import ParsedInput, ensure_parsed
from assignment_pipeline.reference.dataset import ReferenceDataset

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("district_code", "taluka_code", "sales_person")


def has_errors(results: Sequence[FieldResult]) -> bool:
    """True if any result is invalid."""
    return any(r.status == FieldStatus.INVALID for r in results)


def _code_unit_length(value: str) -> int:
    """Length in UTF-16 code units (astral characters count as two)."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def _valid(field: str, message: str) -> FieldResult:
    return FieldResult(field=field, status=FieldStatus.VALID, message=message)


def _invalid(field: str, message: str) -> FieldResult:
    return FieldResult(field=field, status=FieldStatus.INVALID, message=message)


class FieldValidator:
    """
    Validates candidate records against the reference dataset.

    Validates:
        - Required fields
        - District code existence
        - Taluka code existence (and optionally its district)
        - Sales person name length
    """

    def __init__(
        self,
        dataset: ReferenceDataset,
        config: Optional[ValidationConfig] = None,
    ) -> None:
        """
        Initialize field validator.

        Args:
            dataset: Reference tables used for existence checks
            config: Validation settings (defaults applied if omitted)
        """
        self.dataset = dataset
        self.config = config or ValidationConfig()

    def validate(self, raw: ParsedInput) -> List[FieldResult]:
        """
        Validate raw JSON text or a parse result.

        Args:
            raw: Raw JSON text or ParseResult

        Returns:
            Ordered field results. A single ``json`` result if the input
            could not be parsed.
        """
        parsed = ensure_parsed(raw)
        if not parsed.ok:
            return [_invalid("json", parsed.error or "Invalid JSON format")]

        results = self.validate_record(parsed.record or {})

        invalid = [r.field for r in results if not r.is_valid]
        if invalid:
            logger.info(f"Validation failed for fields: {', '.join(invalid)}")
        else:
            logger.debug("All fields valid")
        return results

    def validate_record(self, record: RecordDict) -> List[FieldResult]:
        """Validate an already parsed record."""
        results: List[FieldResult] = []

        # Required fields first, in fixed order
        for field in REQUIRED_FIELDS:
            if not record.get(field):
                results.append(_invalid(field, f"{field} is required"))

        district_code = record.get("district_code")
        taluka_code = record.get("taluka_code")
        sales_person = record.get("sales_person")

        if district_code:
            results.append(self._check_district(district_code))

        if taluka_code:
            results.append(self._check_taluka(taluka_code))
            if self.config.check_taluka_district and district_code:
                consistency = self._check_taluka_district(taluka_code, district_code)
                if consistency:
                    results.append(consistency)

        if sales_person:
            results.append(self._check_sales_person(sales_person))

        return results

    def _check_district(self, code: Any) -> FieldResult:
        if self.dataset.find_district(code):
            return _valid("district_code", "District code exists")
        return _invalid("district_code", f"District code {code} not found")

    def _check_taluka(self, code: Any) -> FieldResult:
        if self.dataset.find_taluka(code):
            return _valid("taluka_code", "Taluka code exists")
        return _invalid("taluka_code", f"Taluka code {code} not found")

    def _check_taluka_district(
        self, taluka_code: Any, district_code: Any
    ) -> Optional[FieldResult]:
        """Check the taluka belongs to the district; None if either is unknown."""
        taluka = self.dataset.find_taluka(taluka_code)
        if taluka is None or self.dataset.find_district(district_code) is None:
            return None
        if taluka.district_code == district_code:
            return _valid("taluka_code", f"Taluka belongs to district {district_code}")
        return _invalid(
            "taluka_code",
            f"Taluka {taluka_code} does not belong to district {district_code}",
        )

    def _check_sales_person(self, name: Any) -> FieldResult:
        min_length = self.config.min_sales_person_length
        if isinstance(name, str) and _code_unit_length(name) >= min_length:
            return _valid("sales_person", "Sales person name is valid")
        return _invalid(
            "sales_person",
            f"Sales person name must be at least {min_length} characters",
        )
