"""Locate the shapekit.toml that applies to a directory.

``SHAPEKIT_CONFIG`` pins an explicit file and disables discovery.
Otherwise the nearest shapekit.toml in the directory or any ancestor wins.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "shapekit.toml"
CONFIG_ENV_VAR = "SHAPEKIT_CONFIG"


def candidate_paths(start: Path) -> Iterator[Path]:
    """Yield possible config locations, nearest directory first."""
    here = start.resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``SHAPEKIT_CONFIG`` naming a missing file yields None rather than
    falling back to discovery.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None
    return next((p for p in candidate_paths(start or Path.cwd()) if p.is_file()), None)
