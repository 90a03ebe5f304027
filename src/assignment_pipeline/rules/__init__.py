"""
Rules Package - Business Rules over the Assignment Table.
"""

from assignment_pipeline.rules.assignment_limit import (
    ERROR_PREFIX,
    LIMIT_PASSED_MESSAGE,
    AssignmentLimitRule,
)

__all__ = [
    "ERROR_PREFIX",
    "LIMIT_PASSED_MESSAGE",
    "AssignmentLimitRule",
]
