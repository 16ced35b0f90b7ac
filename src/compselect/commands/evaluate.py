"""Command: evaluate candidates against the registered rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from compselect.commands._context import AppContext


@click.command()
@click.argument("candidates", nargs=-1, required=True)
@click.pass_obj
def evaluate(app: AppContext, candidates: tuple[str, ...]) -> None:
    """Apply the rules to each CANDIDATE (group:module:version)."""
    from compselect.services.selection import SelectionService

    app.emit(SelectionService(app.rules).evaluate(candidates))
