"""SelectionService: list rules and evaluate candidates against them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from compselect.domain.notation import parse_component_notation
from compselect.domain.selection import ComponentSelection
from compselect.domain.specs import SATISFY_ALL, ComponentSelectionMatchingSpec
from compselect.errors import RuleEvaluationError, UnsupportedNotationError
from compselect.rules.processor import ComponentSelectionRulesProcessor
from compselect.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from compselect.rules.registry import ComponentSelectionRules, SpecRuleAction

logger = logging.getLogger(__name__)


def describe_rule(index: int, rule: SpecRuleAction[ComponentSelection]) -> dict[str, Any]:
    """Serializable summary of one registered rule."""
    if rule.spec is SATISFY_ALL:
        target = "all"
    elif isinstance(rule.spec, ComponentSelectionMatchingSpec):
        target = str(rule.spec.target)
    else:
        target = repr(rule.spec)
    return {"index": index, "target": target, "action": repr(rule.action)}


class SelectionService:
    """Operations over a configured :class:`ComponentSelectionRules`."""

    def __init__(
        self,
        rules: ComponentSelectionRules,
        processor: ComponentSelectionRulesProcessor | None = None,
    ) -> None:
        self._rules = rules
        self._processor = processor or ComponentSelectionRulesProcessor()

    def list_rules(self) -> ServiceResult:
        items = [describe_rule(i, rule) for i, rule in enumerate(self._rules.rules)]
        return ServiceResult(ok=True, op="rules", data={"count": len(items), "rules": items})

    def evaluate(self, coordinates: Sequence[str]) -> ServiceResult:
        """Apply the registered rules to each ``group:module:version`` coordinate."""
        results: list[dict[str, Any]] = []
        for coordinate in coordinates:
            try:
                candidate = parse_component_notation(coordinate)
            except UnsupportedNotationError as exc:
                return ServiceResult.failure(
                    "evaluate", "INVALID_CANDIDATE", str(exc), candidate=coordinate
                )

            selection = ComponentSelection(candidate)
            # Counted before evaluation, so rules after a rejection are included.
            matching = len(self._rules.matching(selection))
            try:
                self._processor.apply(selection, self._rules.rules)
            except RuleEvaluationError as exc:
                logger.debug("Rule evaluation failed for %s", candidate, exc_info=True)
                return ServiceResult.failure(
                    "evaluate",
                    "RULE_FAILED",
                    str(exc),
                    candidate=coordinate,
                    cause=str(exc.__cause__),
                )
            results.append(
                {
                    "candidate": candidate.display_name,
                    "matching_rules": matching,
                    "rejected": selection.rejected,
                    "reason": selection.rejection_reason,
                }
            )
        rejected = sum(1 for r in results if r["rejected"])
        return ServiceResult(
            ok=True,
            op="evaluate",
            data={"candidates": results, "accepted": len(results) - rejected, "rejected": rejected},
        )
