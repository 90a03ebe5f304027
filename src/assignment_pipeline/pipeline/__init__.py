"""
Pipeline Package - Orchestration and Progress Reporting.

Components:
    - AssignmentPipeline: Main orchestrator coordinating all stages
    - ProgressTracker: Per-stage status and percentage for listeners
    - create_pipeline: Factory wiring config and reference data

The pipeline is responsible for:
    - Rejecting blank input
    - Running validation, rules, enrichment and finalization in order
    - Halting on validation failure (and on rule failure when enforced)
    - Appending the merged record to the assignment store
"""

from assignment_pipeline.pipeline.orchestrator import (
    EMPTY_INPUT_MESSAGE,
    OUTPUT_FIELDS,
    AssignmentPipeline,
    EmptyInputError,
    create_pipeline,
)
from assignment_pipeline.pipeline.progress import (
    ProgressEvent,
    ProgressListener,
    ProgressTracker,
)

__all__ = [
    "EMPTY_INPUT_MESSAGE",
    "OUTPUT_FIELDS",
    "AssignmentPipeline",
    "EmptyInputError",
    "create_pipeline",
    "ProgressEvent",
    "ProgressListener",
    "ProgressTracker",
]
