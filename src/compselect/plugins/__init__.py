"""Extension layer: rule contributions via pluggy.

Discovery: entry_points (pip-installed) in the ``compselect.plugins`` group.
INVARIANT: Plugin load failures are warnings. Rule registration errors
raised by a plugin propagate; they are user-code errors.
"""

from compselect.plugins.manager import PluginManager

__all__ = ["PluginManager"]
