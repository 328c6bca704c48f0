"""
Runtime configuration.

The server needs exactly one value: the directory holding pattern files.
It comes from the command line or the PATTERNS_DIR environment variable.
"""

from __future__ import annotations

import os
from pathlib import Path

from chuk_mcp_patterns.constants import PATTERNS_DIR_ENV, ErrorMessages
from chuk_mcp_patterns.errors import ConfigError


def resolve_patterns_dir(value: str | Path | None = None) -> Path:
    """
    Resolve the patterns directory.

    Args:
        value: Explicit path (e.g. from --patterns-dir). Falls back to
            the PATTERNS_DIR environment variable when not given.

    Returns:
        Absolute path to an existing directory

    Raises:
        ConfigError: If no path is configured or it is not a directory
    """
    if value is None or str(value).strip() == "":
        value = os.environ.get(PATTERNS_DIR_ENV, "").strip()
    if not value:
        raise ConfigError(ErrorMessages.PATTERNS_DIR_UNSET)

    path = Path(value).expanduser().resolve()
    if not path.exists():
        raise ConfigError(ErrorMessages.PATTERNS_DIR_MISSING.format(path=path))
    if not path.is_dir():
        raise ConfigError(ErrorMessages.PATTERNS_DIR_NOT_DIR.format(path=path))

    return path
