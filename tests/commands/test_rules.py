"""Tests for the ``rules`` command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from compselect.cli import cli
from tests.conftest import write_config


@pytest.mark.usefixtures("_isolated_config")
class TestRulesCommand:
    def test_no_rules(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--no-plugins", "rules"])
        assert result.exit_code == 0
        assert "0 rule(s)" in result.output

    def test_lists_configured_rules(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            '[[rules]]\nreject_versions = ["0.*"]\n\n'
            '[[rules]]\nmodule = "org.gradle:api"\nreject_versions = ["*-SNAPSHOT"]\n',
        )
        result = cli_runner.invoke(cli, ["--no-plugins", "rules"])
        assert result.exit_code == 0
        assert "[0] all" in result.output
        assert "[1] org.gradle:api" in result.output

    def test_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        write_config(tmp_path, '[[rules]]\nmodule = "org.gradle:api"\n')
        result = cli_runner.invoke(cli, ["--json", "--no-plugins", "rules"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["ok"] is True
        assert payload["data"]["rules"][0]["target"] == "org.gradle:api"

    def test_bad_module_notation(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        write_config(tmp_path, '[[rules]]\nmodule = "org.gradle:api:1.0"\n')
        result = cli_runner.invoke(cli, ["--no-plugins", "rules"])
        assert result.exit_code == 1
        assert (
            "Could not add a component selection rule for module 'org.gradle:api:1.0'."
            in result.output
        )

    def test_invalid_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        write_config(tmp_path, "[[rules]\n")
        result = cli_runner.invoke(cli, ["rules"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output
