"""
Validation Package - Candidate Record Validation.

    - FieldValidator: Required, referential and format checks
    - has_errors: True if any field result is invalid
"""

from assignment_pipeline.validation.field_validator import (
    REQUIRED_FIELDS,
    FieldValidator,
    has_errors,
)

__all__ = [
    "REQUIRED_FIELDS",
    "FieldValidator",
    "has_errors",
]
