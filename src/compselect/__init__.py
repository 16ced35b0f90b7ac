"""compselect: component selection rules for dependency resolution."""

from __future__ import annotations

from compselect.domain.identifiers import ModuleComponentIdentifier, ModuleIdentifier
from compselect.domain.selection import ComponentSelection
from compselect.errors import (
    CompselectError,
    InvalidUserCodeError,
    RuleEvaluationError,
    UnsupportedNotationError,
)
from compselect.rules.registry import ComponentSelectionRules

__version__ = "0.3.0"

__all__ = [
    "ComponentSelection",
    "ComponentSelectionRules",
    "CompselectError",
    "InvalidUserCodeError",
    "ModuleComponentIdentifier",
    "ModuleIdentifier",
    "RuleEvaluationError",
    "UnsupportedNotationError",
    "__version__",
]
