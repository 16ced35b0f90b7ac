"""Command: list registered component selection rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from compselect.commands._context import AppContext


@click.command()
@click.pass_obj
def rules(app: AppContext) -> None:
    """List registered rules in evaluation order."""
    from compselect.services.selection import SelectionService

    app.emit(SelectionService(app.rules).list_rules())
