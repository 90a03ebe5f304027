"""
Reference Data Loader - YAML Loading with Validation.

Loads District, Taluka and seed Assignment tables from a YAML file
of the form::

    districts:
      - {district_code: AHM001, district_name: Ahmedabad}
    talukas:
      - {district_code: AHM001, taluka_code: AHM-T001, taluka_name: Daskroi}
    assignments: []

Rows are validated with the domain Pydantic models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml
from pydantic import ValidationError

from assignment_pipeline.domain.entities import Assignment, District, Taluka
from assignment_pipeline.reference.assignment_store import AssignmentStore
from assignment_pipeline.reference.dataset import ReferenceDataset

logger = logging.getLogger(__name__)


class ReferenceDataError(Exception):
    """Raised when a reference data file is malformed."""

    def __init__(self, message: str, table: str = "") -> None:
        super().__init__(message)
        self.table = table
        self.message = message


class ReferenceLoader:
    """Loads reference tables from YAML files."""

    REQUIRED_TABLES = ("districts", "talukas")

    def load(self, path: Union[str, Path]) -> Tuple[ReferenceDataset, AssignmentStore]:
        """
        Load reference dataset and assignment store from YAML.

        Args:
            path: Path to YAML reference file

        Returns:
            Tuple of (ReferenceDataset, AssignmentStore)

        Raises:
            FileNotFoundError: If the file doesn't exist
            ReferenceDataError: If tables are missing or invalid
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return self.load_from_dict(data)

    def load_from_dict(
        self, data: Dict[str, Any]
    ) -> Tuple[ReferenceDataset, AssignmentStore]:
        """Build dataset and store from an already parsed mapping."""
        for table in self.REQUIRED_TABLES:
            if table not in data:
                raise ReferenceDataError(f"Missing table: {table}", table=table)

        districts = self._parse_rows(data["districts"], District, "districts")
        talukas = self._parse_rows(data["talukas"], Taluka, "talukas")
        assignments = self._parse_rows(
            data.get("assignments") or [], Assignment, "assignments"
        )

        self._check_unique([d.district_code for d in districts], "districts")
        self._check_unique([t.taluka_code for t in talukas], "talukas")
        self._warn_dangling_talukas(districts, talukas)

        logger.info(
            f"Loaded reference data: {len(districts)} districts, "
            f"{len(talukas)} talukas, {len(assignments)} assignments"
        )
        return ReferenceDataset(districts, talukas), AssignmentStore(assignments)

    def _parse_rows(self, rows: Any, model: Any, table: str) -> List[Any]:
        """Validate each row against its model."""
        if not isinstance(rows, list):
            raise ReferenceDataError(f"Table {table} must be a list", table=table)
        try:
            return [model.model_validate(row) for row in rows]
        except ValidationError as e:
            raise ReferenceDataError(f"Invalid row in {table}: {e}", table=table) from e

    def _check_unique(self, codes: List[str], table: str) -> None:
        """Reject duplicate codes in a table."""
        seen = set()
        for code in codes:
            if code in seen:
                raise ReferenceDataError(
                    f"Duplicate code {code} in {table}", table=table
                )
            seen.add(code)

    def _warn_dangling_talukas(
        self, districts: List[District], talukas: List[Taluka]
    ) -> None:
        """Log talukas whose district is not in the districts table."""
        known = {d.district_code for d in districts}
        for taluka in talukas:
            if taluka.district_code not in known:
                logger.warning(
                    f"Taluka {taluka.taluka_code} references unknown district "
                    f"{taluka.district_code}"
                )


def load_reference_data(
    path: Union[str, Path],
) -> Tuple[ReferenceDataset, AssignmentStore]:
    """
    Convenience function to load reference data.

    Args:
        path: Path to YAML reference file

    Returns:
        Tuple of (ReferenceDataset, AssignmentStore)
    """
    return ReferenceLoader().load(path)
