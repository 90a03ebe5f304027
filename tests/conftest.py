"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests. Every test gets
a fresh reference dataset and assignment store.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from assignment_pipeline.adapters.console_logger import ConsoleAuditLogger
from assignment_pipeline.config.models import PipelineConfig
from assignment_pipeline.domain.entities import Assignment
from assignment_pipeline.pipeline.orchestrator import AssignmentPipeline
from assignment_pipeline.pipeline.progress import ProgressEvent
from assignment_pipeline.reference.assignment_store import AssignmentStore
from assignment_pipeline.reference.dataset import ReferenceDataset


@pytest.fixture
def reference_yaml_path() -> Path:
    """Path to sample reference data file."""
    return Path(__file__).parent / "fixtures" / "sample_reference.yaml"


@pytest.fixture
def dataset() -> ReferenceDataset:
    """Built-in reference dataset."""
    return ReferenceDataset.default()


@pytest.fixture
def store() -> AssignmentStore:
    """Fresh assignment store seeded with the built-in assignments."""
    return AssignmentStore.with_defaults()


@pytest.fixture
def default_config() -> PipelineConfig:
    """Create default pipeline configuration."""
    return PipelineConfig()


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def progress_events() -> List[ProgressEvent]:
    """Collects progress events emitted by a pipeline."""
    return []


@pytest.fixture
def pipeline(
    dataset: ReferenceDataset,
    store: AssignmentStore,
    default_config: PipelineConfig,
    console_logger: ConsoleAuditLogger,
    progress_events: List[ProgressEvent],
) -> AssignmentPipeline:
    """Create a fully configured pipeline for testing."""
    return AssignmentPipeline(
        dataset=dataset,
        store=store,
        config=default_config,
        audit_logger=console_logger,
        progress_listener=progress_events.append,
    )


@pytest.fixture
def ravi_assignment() -> Assignment:
    """An existing assignment for Ravi Patel."""
    return Assignment(
        district_code="AHM001",
        district_name="Ahmedabad",
        taluka_code="AHM-T002",
        taluka_name="Sanand",
        sales_person="Ravi Patel",
    )
