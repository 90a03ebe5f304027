"""
Assignment Pipeline - Validate, Enrich and Record Sales Assignments.

Walks a JSON record binding a sales person to a district/taluka pair
through four stages: field validation, business rules, enrichment from
reference tables, and the final merged output appended to an in-memory
assignment table.

Main Components:
    - domain: Entities (District, Taluka, Assignment) and stage results
    - reference: Read-only lookup tables and the assignment store
    - parsing: Raw JSON to an explicit ParseResult
    - validation, rules, enrichment: The pipeline stages
    - pipeline: Orchestration and progress reporting
    - adapters: Console audit logger
    - config: Configuration models and loaders

Example:
    >>> from assignment_pipeline import create_pipeline
    >>> pipeline = create_pipeline()
    >>> result = pipeline.process(
    ...     '{"district_code": "AHM001", "taluka_code": "AHM-T001",'
    ...     ' "sales_person": "Ravi Patel"}'
    ... )
    >>> print(result.output_json)

"""

import logging

from assignment_pipeline.pipeline.orchestrator import (
    AssignmentPipeline,
    EmptyInputError,
    create_pipeline,
)

__version__ = "0.1.0"

__all__ = [
    "AssignmentPipeline",
    "EmptyInputError",
    "configure_logging",
    "create_pipeline",
]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the assignment pipeline.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("assignment_pipeline").setLevel(level)
