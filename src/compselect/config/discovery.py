"""Locate the ``compselect.toml`` rules file.

The file holds the declarative ``[[rules]]`` tables and default flags for a
build. ``COMPSELECT_CONFIG`` names it explicitly; otherwise the nearest file
in the working directory or one of its parents is used, so a rules file at a
project root covers every subproject below it.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "compselect.toml"
CONFIG_ENV_VAR = "COMPSELECT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the rules file that applies to *start* (default: cwd), if any.

    An explicit ``COMPSELECT_CONFIG`` that does not point at a file yields
    None rather than falling back to the directory search.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
