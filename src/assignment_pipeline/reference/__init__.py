"""
Reference Package - Lookup Tables and Assignment Storage.

Components:
    - ReferenceDataset: Read-only District and Taluka tables
    - AssignmentStore: Append-only, in-memory Assignment table
    - ReferenceLoader: Loads both from YAML
"""

from assignment_pipeline.reference.assignment_store import AssignmentStore
from assignment_pipeline.reference.dataset import ReferenceDataset
from assignment_pipeline.reference.loader import (
    ReferenceDataError,
    ReferenceLoader,
    load_reference_data,
)

__all__ = [
    "AssignmentStore",
    "ReferenceDataset",
    "ReferenceDataError",
    "ReferenceLoader",
    "load_reference_data",
]
