"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. The rule registry is built lazily so ``--help`` and
``--version`` never load plugins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from compselect.output.formatters import format_result

if TYPE_CHECKING:
    from compselect.config.settings import CompselectSettings
    from compselect.rules.registry import ComponentSelectionRules
    from compselect.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CompselectSettings) -> None:
        self.settings = settings
        self._rules: ComponentSelectionRules | None = None

        from compselect.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def rules(self) -> ComponentSelectionRules:
        """The configured rule registry (built on first access).

        Raises:
            click.ClickException: If a configured or plugin rule cannot be
                registered.
        """
        if self._rules is None:
            self._rules = self._build_rules()
        return self._rules

    def _build_rules(self) -> ComponentSelectionRules:
        from compselect.errors import CompselectError
        from compselect.plugins.builtins.configured import ConfiguredRulesPlugin
        from compselect.plugins.manager import PluginManager
        from compselect.rules.registry import ComponentSelectionRules

        pm = PluginManager()
        if self.settings.load_plugins:
            pm.discover_and_load()
        # Registered last so pluggy calls it first: configured rules precede plugin rules.
        pm.register_plugin(ConfiguredRulesPlugin(self.settings.rules), name="configured-rules")

        registry = ComponentSelectionRules()
        try:
            pm.contribute_rules(registry)
        except CompselectError as exc:
            raise click.ClickException(str(exc)) from exc
        return registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
