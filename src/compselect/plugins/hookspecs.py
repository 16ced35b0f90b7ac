"""Pluggy hook specifications for compselect."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from compselect.rules.registry import ComponentSelectionRules

hookspec = pluggy.HookspecMarker("compselect")
hookimpl = pluggy.HookimplMarker("compselect")


class CompselectHookSpec:
    """Hook specifications for the compselect plugin system."""

    @hookspec
    def register_component_selection_rules(self, rules: ComponentSelectionRules) -> None:
        """Add rules to *rules* via ``rules.all(...)`` or ``rules.module(...)``."""
