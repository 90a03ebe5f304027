"""
Core Domain Entities.

This module defines the fundamental entities of the assignment pipeline:
the geographic reference entities (District, Taluka), the denormalized
Assignment record, and the enums describing pipeline progress.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FieldStatus(str, Enum):
    """Outcome of a single field check."""

    VALID = "valid"
    INVALID = "invalid"


class StepStatus(str, Enum):
    """Visible status of a pipeline stage."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class StageName(str, Enum):
    """Stages in their fixed execution order."""

    VALIDATE = "field_validation"
    APPLY_RULES = "business_rules"
    ENRICH = "etl_processing"
    FINALIZE = "final_output"


class PipelineState(str, Enum):
    """Logical states of a pipeline run."""

    IDLE = "idle"
    VALIDATING = "validating"
    APPLYING_RULES = "applying_rules"
    ENRICHING = "enriching"
    FINALIZED = "finalized"
    FAILED = "failed"


class District(BaseModel):
    """A district, identified by a unique code."""

    district_code: str = Field(..., description="Unique district code")
    district_name: str = Field(..., description="Display name")

    model_config = {"frozen": True}


class Taluka(BaseModel):
    """A taluka (sub-district) belonging to a district."""

    district_code: str = Field(..., description="Owning district code")
    taluka_code: str = Field(..., description="Unique taluka code")
    taluka_name: str = Field(..., description="Display name")

    model_config = {"frozen": True}


class Assignment(BaseModel):
    """Binding of one sales person to a district/taluka pair."""

    district_code: str
    district_name: str
    taluka_code: str
    taluka_name: str
    sales_person: str

    model_config = {"frozen": True}
