"""Shared pytest fixtures and test helpers for compselect tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from compselect.domain.identifiers import new_component_id
from compselect.domain.selection import ComponentSelection


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.delenv("COMPSELECT_CONFIG", raising=False)
    for name in ("JSON_OUTPUT", "VERBOSE", "LOG_JSON", "LOAD_PLUGINS"):
        monkeypatch.delenv(f"COMPSELECT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_selection(group: str, module: str, version: str = "1.0") -> ComponentSelection:
    """Build a fresh selection for a ``group:module:version`` candidate."""
    return ComponentSelection(new_component_id(group, module, version))


def write_config(directory: Path, content: str) -> Path:
    """Write ``compselect.toml`` into *directory* and return its path."""
    path = directory / "compselect.toml"
    path.write_text(content, encoding="utf-8")
    return path
