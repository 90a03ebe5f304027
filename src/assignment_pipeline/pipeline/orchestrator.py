"""
Assignment Pipeline - Main Orchestrator.

Sequences Field Validation -> Business Rules -> ETL Processing -> Final
Output for one candidate record, halting on validation failure, and
appends the merged record to the assignment store.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Protocol, Union

from assignment_pipeline.config.loader import load_config
from assignment_pipeline.config.models import PipelineConfig
from assignment_pipeline.domain.entities import (
    Assignment,
    PipelineState,
    StageName,
    StepStatus,
)
from assignment_pipeline.domain.value_objects import (
    EnrichmentResult,
    FieldResult,
    PipelineResult,
    RecordDict,
    RuleResult,
)
from assignment_pipeline.enrichment.enricher import Enricher, utc_now
from assignment_pipeline.parsing.record_parser import ParseResult, parse_record
from assignment_pipeline.pipeline.progress import (
    PROGRESS_ENRICHED,
    PROGRESS_FINALIZED,
    PROGRESS_RULES_APPLIED,
    PROGRESS_STARTED,
    PROGRESS_VALIDATED,
    PROGRESS_VALIDATING,
    ProgressListener,
    ProgressTracker,
)
from assignment_pipeline.reference.assignment_store import AssignmentStore
from assignment_pipeline.reference.dataset import ReferenceDataset
from assignment_pipeline.reference.loader import load_reference_data
from assignment_pipeline.rules.assignment_limit import AssignmentLimitRule
from assignment_pipeline.validation.field_validator import FieldValidator, has_errors

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter JSON data to process"

# Fixed key order of the final output record
OUTPUT_FIELDS = (
    "district_code",
    "district_name",
    "taluka_code",
    "taluka_name",
    "sales_person",
)


class EmptyInputError(Exception):
    """Raised when a run is submitted with blank input."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class ValidatorProtocol(Protocol):
    """Protocol for field validators."""

    def validate(self, raw: Union[str, ParseResult]) -> List[FieldResult]:
        ...


class RuleEngineProtocol(Protocol):
    """Protocol for business rule engines."""

    def evaluate(self, raw: Union[str, ParseResult]) -> RuleResult:
        ...


class EnricherProtocol(Protocol):
    """Protocol for enrichers."""

    def enrich(self, raw: Union[str, ParseResult]) -> EnrichmentResult:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_stage_start(self, stage_name: str) -> None:
        ...

    def log_stage_end(
        self, stage_name: str, status: str, duration_seconds: float
    ) -> None:
        ...

    def log_field_failure(self, field: str, message: str) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class AssignmentPipeline:
    """Main orchestrator for the assignment workflow."""

    VERSION = "0.1.0"

    def __init__(
        self,
        dataset: ReferenceDataset,
        store: AssignmentStore,
        config: Optional[PipelineConfig] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        progress_listener: Optional[ProgressListener] = None,
        validator: Optional[ValidatorProtocol] = None,
        rule_engine: Optional[RuleEngineProtocol] = None,
        enricher: Optional[EnricherProtocol] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            dataset: Read-only reference tables
            store: Assignment table the final record is appended to
            config: Pipeline configuration (defaults applied if omitted)
            audit_logger: For the stage audit trail (optional)
            progress_listener: Receives a ProgressEvent on every change,
                delivered once the run lock is released
            validator: Field validator (built from dataset if omitted)
            rule_engine: Rule engine (built from store if omitted)
            enricher: Enricher (built from dataset if omitted)
            clock: UTC clock for timestamps (defaults to utc_now)
        """
        self.config = config or PipelineConfig()
        self.dataset = dataset
        self.store = store
        self.audit_logger = audit_logger
        self.validator = validator or FieldValidator(dataset, self.config.validation)
        self.rule_engine = rule_engine or AssignmentLimitRule(store, self.config.rules)
        self.clock = clock or utc_now
        self.enricher = enricher or Enricher(dataset, clock=self.clock)
        self.tracker = ProgressTracker(progress_listener, deferred=True)
        self.tracker.flush()
        self._lock = Lock()
        self._stage_started = 0.0

    @property
    def state(self) -> PipelineState:
        return self.tracker.state

    @property
    def progress(self) -> int:
        return self.tracker.progress

    def reset(self) -> None:
        """Clear visible progress back to IDLE."""
        with self._lock:
            self.tracker.reset()
        self.tracker.flush()

    def process(self, raw_text: str) -> PipelineResult:
        """
        Run the full pipeline on raw JSON text.

        Args:
            raw_text: JSON text describing the candidate record

        Returns:
            PipelineResult with per-stage outputs and statuses

        Raises:
            EmptyInputError: If raw_text is empty or whitespace only
        """
        if not raw_text or not raw_text.strip():
            raise EmptyInputError()

        try:
            with self._lock:
                return self._run(raw_text)
        finally:
            # Listeners run outside the lock and may call back into the pipeline
            self.tracker.flush()

    def _run(self, raw_text: str) -> PipelineResult:
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        if self.audit_logger:
            self.audit_logger.set_correlation_id(correlation_id)

        tracker = self.tracker
        tracker.reset()
        tracker.transition(PipelineState.VALIDATING, PROGRESS_STARTED)

        parsed = parse_record(raw_text)
        result: Dict[str, Any] = {}

        # 1. Field validation
        self._start_stage(StageName.VALIDATE)
        tracker.set_progress(PROGRESS_VALIDATING)
        field_results = self.validator.validate(parsed)
        result["field_results"] = field_results

        if has_errors(field_results):
            self._report_field_failures(field_results)
            self._fail_stage(StageName.VALIDATE)
            return self._build_result(
                result, correlation_id, start_time, StageName.VALIDATE
            )
        self._complete_stage(StageName.VALIDATE, PROGRESS_VALIDATED)

        # 2. Business rules
        tracker.transition(PipelineState.APPLYING_RULES)
        self._start_stage(StageName.APPLY_RULES)
        rule_result = self.rule_engine.evaluate(parsed)
        result["rule_messages"] = list(rule_result.messages)

        if not rule_result.passed:
            enforced = self.config.rules.enforce_assignment_limit
            self._log_anomaly(
                "; ".join(rule_result.messages),
                severity="ERROR" if enforced else "WARNING",
                context={
                    "assignment_count": rule_result.assignment_count,
                    "enforced": enforced,
                },
            )
            if enforced:
                self._fail_stage(StageName.APPLY_RULES)
                return self._build_result(
                    result, correlation_id, start_time, StageName.APPLY_RULES
                )
        self._complete_stage(StageName.APPLY_RULES, PROGRESS_RULES_APPLIED)

        # 3. Enrichment
        tracker.transition(PipelineState.ENRICHING)
        self._start_stage(StageName.ENRICH)
        enrichment = self.enricher.enrich(parsed)
        result["enrichment"] = enrichment
        self._complete_stage(StageName.ENRICH, PROGRESS_ENRICHED)

        # 4. Final output
        self._start_stage(StageName.FINALIZE)
        output_record = self._finalize(parsed.record or {}, enrichment)
        result["output_record"] = output_record
        result["output_json"] = self.to_json(output_record)
        self._complete_stage(StageName.FINALIZE, PROGRESS_FINALIZED)
        tracker.transition(PipelineState.FINALIZED)

        logger.info(
            f"Assignment recorded: {output_record.sales_person} -> "
            f"{output_record.district_code}/{output_record.taluka_code}"
        )
        return self._build_result(result, correlation_id, start_time)

    def _start_stage(self, stage: StageName) -> None:
        self._stage_started = time.perf_counter()
        self.tracker.start_stage(stage)
        if self.audit_logger:
            self.audit_logger.log_stage_start(stage.value)

    def _complete_stage(self, stage: StageName, progress: int) -> None:
        self.tracker.complete_stage(stage, progress)
        self._end_stage(stage, StepStatus.COMPLETED)

    def _fail_stage(self, stage: StageName) -> None:
        self.tracker.fail_stage(stage)
        self._end_stage(stage, StepStatus.ERROR)

    def _end_stage(self, stage: StageName, status: StepStatus) -> None:
        if self.audit_logger:
            self.audit_logger.log_stage_end(
                stage.value,
                status.value,
                time.perf_counter() - self._stage_started,
            )

    def _finalize(
        self, record: RecordDict, enrichment: EnrichmentResult
    ) -> Assignment:
        """Build the fixed-key output record and append it to the store."""
        assignment = Assignment(
            district_code=record["district_code"],
            district_name=enrichment.district_name,
            taluka_code=record["taluka_code"],
            taluka_name=enrichment.taluka_name,
            sales_person=record["sales_person"],
        )
        self.store.append(assignment)
        return assignment

    def to_json(self, assignment: Assignment) -> str:
        """Serialize an output record with the fixed key order."""
        data = assignment.model_dump()
        ordered = {key: data[key] for key in OUTPUT_FIELDS}
        return json.dumps(ordered, indent=self.config.output.indent, ensure_ascii=False)

    def _report_field_failures(self, field_results: List[FieldResult]) -> None:
        if not self.audit_logger:
            return
        for field_result in field_results:
            if not field_result.is_valid:
                self.audit_logger.log_field_failure(
                    field_result.field, field_result.message
                )

    def _log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        if self.audit_logger:
            self.audit_logger.log_anomaly(message, severity, context)

    def _build_result(
        self,
        result: Dict[str, Any],
        correlation_id: str,
        start_time: float,
        failed_stage: Optional[StageName] = None,
    ) -> PipelineResult:
        duration = time.perf_counter() - start_time
        return PipelineResult(
            state=self.tracker.state,
            progress=self.tracker.progress,
            step_statuses=self.tracker.snapshot(),
            failed_stage=failed_stage,
            metadata={
                "correlation_id": correlation_id,
                "timestamp": self.clock().isoformat(),
                "duration_seconds": duration,
                "version": self.VERSION,
            },
            **result,
        )


def create_pipeline(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    reference_path: Optional[Union[str, Path]] = None,
    base_path: Optional[Path] = None,
    audit_logger: Optional[AuditLoggerProtocol] = None,
    progress_listener: Optional[ProgressListener] = None,
) -> AssignmentPipeline:
    """
    Build a pipeline from optional config and reference files.

    Args:
        config_path: YAML config file (defaults used if omitted)
        profile: Optional config profile applied over config_path
        reference_path: YAML reference data (built-in tables if omitted)
        base_path: Base path for resolving a relative config_path
        audit_logger: Optional audit logger
        progress_listener: Optional progress callback

    Returns:
        Configured AssignmentPipeline
    """
    config = load_config(config_path, profile, base_path)

    if reference_path is not None:
        dataset, store = load_reference_data(reference_path)
    else:
        dataset, store = ReferenceDataset.default(), AssignmentStore.with_defaults()

    return AssignmentPipeline(
        dataset=dataset,
        store=store,
        config=config,
        audit_logger=audit_logger,
        progress_listener=progress_listener,
    )
