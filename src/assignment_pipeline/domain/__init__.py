"""
Domain Layer - Core Business Entities and Value Objects.

Entities:
    - District, Taluka: Static geographic reference entities
    - Assignment: Sales person bound to a district/taluka pair
    - FieldStatus, StepStatus, StageName, PipelineState: Enums

Value Objects:
    - FieldResult: Per-field validation outcome
    - RuleResult: Business rules outcome
    - EnrichmentResult: Resolved display names
    - PipelineResult: Complete result of a pipeline run
"""

from assignment_pipeline.domain.entities import (
    Assignment,
    District,
    FieldStatus,
    PipelineState,
    StageName,
    StepStatus,
    Taluka,
)
from assignment_pipeline.domain.value_objects import (
    EnrichmentResult,
    FieldResult,
    PipelineResult,
    RecordDict,
    RuleResult,
)

__all__ = [
    "Assignment",
    "District",
    "FieldStatus",
    "PipelineState",
    "StageName",
    "StepStatus",
    "Taluka",
    "EnrichmentResult",
    "FieldResult",
    "PipelineResult",
    "RecordDict",
    "RuleResult",
]
