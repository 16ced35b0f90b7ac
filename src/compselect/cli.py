"""Root CLI group for compselect with global flags and command registration."""

from __future__ import annotations

import click
from click.core import ParameterSource

from compselect import __version__
from compselect.commands import register_commands
from compselect.commands._context import AppContext
from compselect.config.settings import CompselectSettings
from compselect.errors import ConfigurationError

_SETTING_FOR_FLAG = {
    "json_output": "json_output",
    "verbose": "verbose",
    "log_json": "log_json",
    "no_plugins": "load_plugins",
}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="compselect")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-plugins", is_flag=True, help="Skip entry-point plugin discovery.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    no_plugins: bool,
    config_path: str | None,
) -> None:
    """compselect: component selection rules for dependency resolution."""
    flags = {
        "json_output": json_output,
        "verbose": verbose,
        "log_json": log_json,
        "no_plugins": no_plugins,
    }
    # Unset flags stay out so env vars and compselect.toml can supply them.
    overrides = {
        _SETTING_FOR_FLAG[name]: value
        for name, value in flags.items()
        if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
    }
    if "load_plugins" in overrides:
        overrides["load_plugins"] = not overrides["load_plugins"]
    try:
        settings = CompselectSettings.from_cli(config_path=config_path, **overrides)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
