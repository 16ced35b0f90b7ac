"""Tests for CompselectSettings: flags, env vars, and TOML rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from compselect.config.models import RuleConfig
from compselect.config.settings import CompselectSettings
from compselect.errors import ConfigurationError
from tests.conftest import write_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("COMPSELECT_CONFIG", "COMPSELECT_VERBOSE", "COMPSELECT_LOAD_PLUGINS"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = CompselectSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.load_plugins is True
        assert settings.rules == []

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CompselectSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_rules(self, tmp_path: Path) -> None:
        path = write_config(
            tmp_path,
            '[[rules]]\nmodule = "org.gradle:api"\nreject_versions = ["*-SNAPSHOT"]\n'
            'reason = "no snapshots"\n\n'
            '[[rules]]\nreject_versions = ["0.*"]\n',
        )
        settings = CompselectSettings.from_cli(start=tmp_path)
        assert settings.config_path == path
        assert settings.rules == [
            RuleConfig(
                module="org.gradle:api", reject_versions=["*-SNAPSHOT"], reason="no snapshots"
            ),
            RuleConfig(reject_versions=["0.*"]),
        ]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "rules.toml"
        custom.parent.mkdir()
        custom.write_text('[[rules]]\nmodule = "g:m"\n')
        settings = CompselectSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.config_path == custom
        assert settings.rules[0].module == "g:m"

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            CompselectSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "[[rules]\nmodule = ")
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            CompselectSettings.from_cli(start=tmp_path)

    def test_unknown_rule_key(self, tmp_path: Path) -> None:
        write_config(tmp_path, '[[rules]]\nmodule = "g:m"\naccept = ["1.0"]\n')
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            CompselectSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = CompselectSettings.from_cli(start=tmp_path, verbose=True, load_plugins=False)
        assert settings.verbose is True
        assert settings.load_plugins is False

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMPSELECT_VERBOSE", "true")
        settings = CompselectSettings.from_cli(start=tmp_path)
        assert settings.verbose is True
