"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationConfig(BaseModel):
    """Configuration for field validation."""

    min_sales_person_length: int = Field(default=4, ge=1)
    check_taluka_district: bool = False


class RulesConfig(BaseModel):
    """Configuration for business rules."""

    max_assignments_per_sales_person: int = Field(default=2, ge=1)
    enforce_assignment_limit: bool = False


class OutputConfig(BaseModel):
    """Configuration for the final JSON output."""

    indent: int = Field(default=2, ge=0)


class PipelineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
