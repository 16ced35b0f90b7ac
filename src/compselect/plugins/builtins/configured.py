"""Built-in plugin registering the ``[[rules]]`` tables of compselect.toml.

Each configured rule becomes a :class:`VersionRejectionAction` registered
through ``rules.all`` (no ``module``) or ``rules.module``.
"""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from compselect.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from collections.abc import Sequence

    from compselect.config.models import RuleConfig
    from compselect.domain.selection import ComponentSelection
    from compselect.rules.registry import ComponentSelectionRules

logger = logging.getLogger(__name__)


class VersionRejectionAction:
    """Rejects candidates whose version matches one of *patterns*.

    Patterns are exact versions or ``fnmatch`` globs such as ``*-SNAPSHOT``.
    """

    def __init__(self, patterns: Sequence[str], reason: str | None = None) -> None:
        self._patterns = tuple(patterns)
        self._reason = reason

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    def execute(self, subject: ComponentSelection) -> None:
        version = subject.candidate.version
        for pattern in self._patterns:
            if fnmatchcase(version, pattern):
                subject.reject(self._reason or f"version {version} matches '{pattern}'")
                return

    def __repr__(self) -> str:
        return f"VersionRejectionAction({list(self._patterns)!r})"


def register_configured_rules(
    rules: ComponentSelectionRules, rule_configs: Sequence[RuleConfig]
) -> ComponentSelectionRules:
    """Register one rule per entry of *rule_configs*, in order."""
    for config in rule_configs:
        action = VersionRejectionAction(config.reject_versions, config.reason)
        if config.module is None:
            rules.all(action)
        else:
            rules.module(config.module, action)
    return rules


class ConfiguredRulesPlugin:
    """Contributes the rules declared in settings."""

    def __init__(self, rule_configs: Sequence[RuleConfig] = ()) -> None:
        self._rule_configs = tuple(rule_configs)

    @hookimpl
    def register_component_selection_rules(self, rules: ComponentSelectionRules) -> None:
        register_configured_rules(rules, self._rule_configs)
        logger.debug("Registered %d configured rules", len(self._rule_configs))
