"""Locate ``rovercli.toml``.

``--config`` wins, then ``ROVERCLI_CONFIG``, then the nearest
``rovercli.toml`` in the working directory or any of its parents.
A named file that does not exist means "no config file", not an error.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "rovercli.toml"
CONFIG_ENV_VAR = "ROVERCLI_CONFIG"


def _existing(path: str | Path) -> Path | None:
    p = Path(path)
    return p if p.is_file() else None


def find_config(start: Path | None = None) -> Path | None:
    """Return ``$ROVERCLI_CONFIG`` or the nearest ``rovercli.toml`` above *start*."""
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return _existing(env_path)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        if found := _existing(directory / CONFIG_FILENAME):
            return found
    return None


def resolve_config(explicit: str | None = None, *, start: Path | None = None) -> Path | None:
    """Pick the config file for an invocation; *explicit* is the ``--config`` value."""
    if explicit:
        return _existing(explicit)
    return find_config(start)
