"""
Assignment Limit Rule.

Counts how many assignments a sales person already holds and checks the
count against a configured upper bound. The outcome is advisory unless
the orchestrator is configured to enforce it.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from assignment_pipeline.config.models import RulesConfig
from assignment_pipeline.domain.value_objects import RuleResult
from assignment_pipeline.parsing.record_parser import ParsedInput, ensure_parsed
from assignment_pipeline.reference.assignment_store import AssignmentStore

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "
LIMIT_PASSED_MESSAGE = "Sales person assignment limit validation passed"


class AssignmentLimitRule:
    """Business rule engine for sales person assignment limits."""

    def __init__(
        self,
        store: AssignmentStore,
        config: Optional[RulesConfig] = None,
    ) -> None:
        """
        Initialize with the assignment table and rule settings.

        Args:
            store: Existing assignments to count against
            config: Rule settings (defaults applied if omitted)
        """
        self.store = store
        self.config = config or RulesConfig()

    @property
    def name(self) -> str:
        return "assignment_limit"

    def apply_rules(self, raw: ParsedInput) -> List[str]:
        """Apply the rules and return their messages only."""
        return list(self.evaluate(raw).messages)

    def evaluate(self, raw: ParsedInput) -> RuleResult:
        """
        Evaluate the assignment limit for a candidate record.

        Args:
            raw: Raw JSON text or ParseResult

        Returns:
            RuleResult; a single error message and ``passed=False`` if the
            input could not be parsed
        """
        parsed = ensure_parsed(raw)
        if not parsed.ok:
            return RuleResult(
                messages=[f"{ERROR_PREFIX}{parsed.error}"],
                passed=False,
            )

        sales_person = (parsed.record or {}).get("sales_person")
        limit = self.config.max_assignments_per_sales_person
        count = self.store.count_for(sales_person)

        if count < limit:
            return RuleResult(
                messages=[LIMIT_PASSED_MESSAGE],
                passed=True,
                assignment_count=count,
            )

        logger.warning(
            f"Sales person {sales_person!r} already has {count} assignments "
            f"(limit {limit})"
        )
        return RuleResult(
            messages=[
                f"{ERROR_PREFIX}Sales person {sales_person} already has {count} "
                f"assignments (limit {limit})"
            ],
            passed=False,
            assignment_count=count,
        )
