"""Config file discovery.

Looks for ``isoperiod.toml``, or a ``pyproject.toml`` carrying a
``[tool.isoperiod]`` table, in the working directory and then each
parent in turn. ``ISOPERIOD_CONFIG`` names a file explicitly and
disables the walk.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "isoperiod.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "ISOPERIOD_CONFIG"


def _parents(start: Path | None) -> Iterator[Path]:
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def _is_config(candidate: Path) -> bool:
    if not candidate.is_file():
        return False
    if candidate.name != PYPROJECT_FILENAME:
        return True
    data = tomllib.loads(candidate.read_text(encoding="utf-8"))
    return "isoperiod" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file above *start* (default: cwd), or None.

    In each directory ``isoperiod.toml`` wins over ``pyproject.toml``. A
    ``pyproject.toml`` counts only when it has a ``tool.isoperiod`` table,
    written either as ``[tool.isoperiod]`` or as subtables such as
    ``[tool.isoperiod.parse]``.

    Raises:
        tomllib.TOMLDecodeError: If a candidate ``pyproject.toml`` is not
            valid TOML.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _parents(start):
        for name in (CONFIG_FILENAME, PYPROJECT_FILENAME):
            candidate = directory / name
            if _is_config(candidate):
                return candidate
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Return the isoperiod settings table from *path*.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get("isoperiod", {})
    return data

