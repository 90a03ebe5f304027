"""
In-Memory Assignment Store.

Append-only table of sales person assignments. Entries live only for
the lifetime of the store instance.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Iterable, List, Optional, Tuple

from assignment_pipeline.domain.entities import Assignment
from assignment_pipeline.reference.tables import default_assignments

logger = logging.getLogger(__name__)


class AssignmentStore:
    """Append-only, lock-guarded assignment table."""

    def __init__(self, assignments: Optional[Iterable[Assignment]] = None) -> None:
        """
        Initialize the store.

        Args:
            assignments: Initial rows. Defaults to an empty table.
        """
        self._assignments: List[Assignment] = list(assignments or [])
        self._lock = Lock()

    @classmethod
    def with_defaults(cls) -> "AssignmentStore":
        """Create a store seeded with the built-in assignments."""
        return cls(default_assignments())

    def append(self, assignment: Assignment) -> None:
        """Append a new assignment."""
        with self._lock:
            self._assignments.append(assignment)
            total = len(self._assignments)
        logger.debug(
            f"Assignment appended: {assignment.sales_person} -> "
            f"{assignment.taluka_code} ({total} total)"
        )

    def count_for(self, sales_person: object) -> int:
        """Count assignments whose sales_person exactly equals the value."""
        with self._lock:
            return sum(1 for a in self._assignments if a.sales_person == sales_person)

    def all(self) -> Tuple[Assignment, ...]:
        """Snapshot of all assignments in insertion order."""
        with self._lock:
            return tuple(self._assignments)

    def __len__(self) -> int:
        with self._lock:
            return len(self._assignments)
