"""Subcommand modules for compselect."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group.

    Uses deferred imports so modules are only loaded when actually invoked.
    """
    from compselect.commands.evaluate import evaluate
    from compselect.commands.rules import rules

    cli.add_command(rules)
    cli.add_command(evaluate)
