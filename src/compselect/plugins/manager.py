"""Plugin discovery, loading, and rule contribution."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from compselect.plugins.hookspecs import CompselectHookSpec

if TYPE_CHECKING:
    from compselect.rules.registry import ComponentSelectionRules

PROJECT_NAME = "compselect"
ENTRY_POINT_GROUP = "compselect.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CompselectHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``compselect.plugins`` entry-point group.

        A plugin that fails to load is skipped with a warning.
        Returns the names of all registered plugins.
        """
        try:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load entry-point plugins", exc_info=True)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def contribute_rules(self, rules: ComponentSelectionRules) -> ComponentSelectionRules:
        """Let every plugin register its component selection rules.

        Pluggy calls implementations in LIFO registration order; the rule
        order within each plugin is preserved.
        """
        self._pm.hook.register_component_selection_rules(rules=rules)
        logger.debug("Plugins contributed rules; registry now holds %d", len(rules))
        return rules

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry points may name a class; hook dispatch against a class leaves
        ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
