"""
Layered lookup of the ``PA_*`` settings the client is configured from.

Priority, lowest first: ``os.environ`` (or an explicit base mapping), a
``.env`` file, then caller overrides.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

__all__ = ["build_environment", "read_env_file"]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    # Unquoted values may carry a trailing comment.
    return value.split(" #", 1)[0].rstrip()


def read_env_file(path: str) -> Dict[str, str]:
    """
    Read ``KEY=VALUE`` lines from ``path``; a missing file reads as empty.

    Blank lines, ``#`` comments and an ``export`` prefix are accepted.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        logging.debug("No env file at %s", path)
        return {}

    values: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = _unquote(value.strip())
    return values


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge the configuration sources into one mapping.

    The file only fills keys the base does not already set. Pass
    ``env_file=None`` to skip it.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)
    if env_file is not None:
        for key, value in read_env_file(env_file).items():
            merged.setdefault(key, value)
    merged.update(overrides or {})
    return merged
