"""Apply registered rules to a candidate selection.

This is the consuming side of the registry: the resolution engine builds a
:class:`ComponentSelection` per candidate and runs it through the rules.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from compselect.errors import RuleEvaluationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from compselect.domain.selection import ComponentSelection
    from compselect.rules.registry import SpecRuleAction

logger = logging.getLogger(__name__)


class ComponentSelectionRulesProcessor:
    """Evaluates rules against selections, stopping at the first rejection."""

    def apply(
        self,
        selection: ComponentSelection,
        rules: Iterable[SpecRuleAction[ComponentSelection]],
    ) -> ComponentSelection:
        """Run every rule whose spec matches *selection*, in order.

        Raises:
            RuleEvaluationError: If an action raises; the original
                exception is the ``__cause__``.
        """
        for rule in rules:
            if not rule.applies_to(selection):
                continue
            try:
                rule.action.execute(selection)
            except Exception as exc:
                msg = (
                    "There was an error while evaluating a component selection rule "
                    f"for {selection.candidate.display_name}."
                )
                raise RuleEvaluationError(msg) from exc
            if selection.rejected:
                logger.debug(
                    "Rejected %s: %s", selection.candidate, selection.rejection_reason
                )
                break
        return selection
