"""Domain layer: identifiers, candidate selections, specs, and notation.

This layer depends only on stdlib and ``compselect.errors``.
It must never import from rules, config, plugins, or commands.
"""
