"""Rule layer: action adaptation, the rule registry, and rule evaluation."""

from compselect.rules.actions import (
    Action,
    DefaultRuleActionAdapter,
    RuleAction,
    RuleActionAdapter,
)
from compselect.rules.processor import ComponentSelectionRulesProcessor
from compselect.rules.registry import ComponentSelectionRules, SpecRuleAction

__all__ = [
    "Action",
    "ComponentSelectionRules",
    "ComponentSelectionRulesProcessor",
    "DefaultRuleActionAdapter",
    "RuleAction",
    "RuleActionAdapter",
    "SpecRuleAction",
]
