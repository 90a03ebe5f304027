"""
Reference Dataset - Read-Only Lookup Tables.

Holds the District and Taluka tables for the lifetime of the process.
The dataset is immutable; lookups are exact, case-sensitive matches on
the code fields.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from assignment_pipeline.domain.entities import District, Taluka
from assignment_pipeline.reference.tables import default_districts, default_talukas


class ReferenceDataset:
    """Read-only District and Taluka lookup tables."""

    def __init__(
        self,
        districts: Iterable[District],
        talukas: Iterable[Taluka],
    ) -> None:
        """
        Initialize dataset.

        Args:
            districts: District rows
            talukas: Taluka rows
        """
        self._districts: Tuple[District, ...] = tuple(districts)
        self._talukas: Tuple[Taluka, ...] = tuple(talukas)
        self._districts_by_code: Dict[str, District] = {
            d.district_code: d for d in self._districts
        }
        self._talukas_by_code: Dict[str, Taluka] = {
            t.taluka_code: t for t in self._talukas
        }

    @classmethod
    def default(cls) -> "ReferenceDataset":
        """Create the dataset from the built-in tables."""
        return cls(default_districts(), default_talukas())

    @property
    def districts(self) -> Tuple[District, ...]:
        return self._districts

    @property
    def talukas(self) -> Tuple[Taluka, ...]:
        return self._talukas

    def find_district(self, code: Any) -> Optional[District]:
        """Find a district by exact code match."""
        if not isinstance(code, str):
            return None
        return self._districts_by_code.get(code)

    def find_taluka(self, code: Any) -> Optional[Taluka]:
        """Find a taluka by exact code match."""
        if not isinstance(code, str):
            return None
        return self._talukas_by_code.get(code)

    def district_name(self, code: Any) -> str:
        """Display name for a district code, empty string if unknown."""
        district = self.find_district(code)
        return district.district_name if district else ""

    def taluka_name(self, code: Any) -> str:
        """Display name for a taluka code, empty string if unknown."""
        taluka = self.find_taluka(code)
        return taluka.taluka_name if taluka else ""

    def __repr__(self) -> str:
        return (
            f"ReferenceDataset(districts={len(self._districts)}, "
            f"talukas={len(self._talukas)})"
        )
