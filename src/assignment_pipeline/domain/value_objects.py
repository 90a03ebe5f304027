"""
Value Objects for Domain Layer.

Immutable results produced by the individual pipeline stages and the
aggregate result handed to the presentation layer.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from assignment_pipeline.domain.entities import (
    Assignment,
    FieldStatus,
    PipelineState,
    StageName,
    StepStatus,
)


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Parsed candidate record (any JSON object)
RecordDict = Dict[str, Any]

# Visible status per stage
StepStatusDict = Dict[StageName, StepStatus]


class FieldResult(BaseModel):
    """Per-field outcome of validation."""

    field: str
    status: FieldStatus
    message: str

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        return self.status == FieldStatus.VALID


class RuleResult(BaseModel):
    """Outcome of the business rules stage."""

    messages: List[str] = Field(default_factory=list)
    passed: bool = True
    assignment_count: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class EnrichmentResult(BaseModel):
    """Display names resolved from reference data."""

    district_name: str = ""
    taluka_name: str = ""
    enrichment_date: str = Field(..., alias="enrichmentDate")
    error: Optional[str] = None

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the external key names, omitting an absent error."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PipelineResult(BaseModel):
    """Everything a single pipeline run exposes to the presentation layer."""

    state: PipelineState
    progress: int = Field(default=0, ge=0, le=100)
    step_statuses: StepStatusDict = Field(default_factory=dict)
    failed_stage: Optional[StageName] = None
    field_results: List[FieldResult] = Field(default_factory=list)
    rule_messages: List[str] = Field(default_factory=list)
    enrichment: Optional[EnrichmentResult] = None
    output_record: Optional[Assignment] = None
    output_json: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.state == PipelineState.FINALIZED

    @property
    def invalid_fields(self) -> List[FieldResult]:
        """Field results that failed validation."""
        return [r for r in self.field_results if not r.is_valid]
