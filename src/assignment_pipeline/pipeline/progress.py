"""
Progress Tracker - Stage Status and Progress Reporting.

Holds the visible state of a pipeline run (logical state, per-stage
status, percentage) and emits a ProgressEvent to an optional listener
on every change. Replaces timed UI waits with explicit events. A deferred
tracker queues events until flush() so the owner can deliver them after
releasing its own lock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, List, Optional

from assignment_pipeline.domain.entities import PipelineState, StageName, StepStatus

logger = logging.getLogger(__name__)

# Progress milestones reported as a run advances
PROGRESS_STARTED = 10
PROGRESS_VALIDATING = 25
PROGRESS_VALIDATED = 45
PROGRESS_RULES_APPLIED = 65
PROGRESS_ENRICHED = 85
PROGRESS_FINALIZED = 100


@dataclass(frozen=True)
class ProgressEvent:
    """Snapshot delivered to progress listeners."""

    state: PipelineState
    progress: int
    stage: Optional[StageName] = None
    status: Optional[StepStatus] = None


ProgressListener = Callable[[ProgressEvent], None]


class ProgressTracker:
    """Tracks state, per-stage status and percentage for one pipeline."""

    def __init__(
        self,
        listener: Optional[ProgressListener] = None,
        deferred: bool = False,
    ) -> None:
        self._listener = listener
        self._deferred = deferred
        self._pending: List[ProgressEvent] = []
        self._pending_lock = Lock()
        self.state = PipelineState.IDLE
        self.progress = 0
        self.statuses: Dict[StageName, StepStatus] = {}
        self.reset()

    def reset(self) -> None:
        """Return to IDLE with every stage pending."""
        self.state = PipelineState.IDLE
        self.progress = 0
        self.statuses = {stage: StepStatus.PENDING for stage in StageName}
        self._emit()

    def transition(self, state: PipelineState, progress: Optional[int] = None) -> None:
        """Move to a new logical state, optionally updating progress."""
        logger.debug(f"Pipeline state: {self.state.value} -> {state.value}")
        self.state = state
        if progress is not None:
            self.progress = progress
        self._emit()

    def set_progress(self, progress: int) -> None:
        self.progress = progress
        self._emit()

    def start_stage(self, stage: StageName) -> None:
        self._set_status(stage, StepStatus.PROCESSING)

    def complete_stage(self, stage: StageName, progress: int) -> None:
        self.progress = progress
        self._set_status(stage, StepStatus.COMPLETED)

    def fail_stage(self, stage: StageName) -> None:
        self.transition(PipelineState.FAILED)
        self._set_status(stage, StepStatus.ERROR)

    def snapshot(self) -> Dict[StageName, StepStatus]:
        """Copy of the per-stage statuses."""
        return dict(self.statuses)

    def flush(self) -> None:
        """Deliver queued events to the listener, oldest first."""
        with self._pending_lock:
            events, self._pending = self._pending, []
        for event in events:
            self._listener(event)

    def _set_status(self, stage: StageName, status: StepStatus) -> None:
        self.statuses[stage] = status
        self._emit(stage, status)

    def _emit(
        self,
        stage: Optional[StageName] = None,
        status: Optional[StepStatus] = None,
    ) -> None:
        if self._listener is None:
            return
        event = ProgressEvent(
            state=self.state,
            progress=self.progress,
            stage=stage,
            status=status,
        )
        if not self._deferred:
            self._listener(event)
            return
        with self._pending_lock:
            self._pending.append(event)
