"""Locating and reading ``fleetctl.toml``.

Lookup order: the file named by ``FLEETCTL_CONFIG`` (when set, that file
and nothing else), otherwise the nearest ``fleetctl.toml`` in the start
directory or one of its parents.  ``-c/--config`` bypasses both.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

CONFIG_FILENAME = "fleetctl.toml"
CONFIG_ENV_VAR = "FLEETCTL_CONFIG"


def _candidates(start: Path) -> Iterator[Path]:
    for directory in (start, *start.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    base = (start or Path.cwd()).resolve()
    return next((c for c in _candidates(base) if c.is_file()), None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        tomllib.TOMLDecodeError: On malformed TOML.
    """
    with path.open("rb") as fh:
        return tomllib.load(fh)

