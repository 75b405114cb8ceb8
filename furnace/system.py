"""Locating the running program on disk."""

from __future__ import annotations

import sys
from pathlib import Path


def executable_path() -> Path:
    """Return the absolute path of the running program, or an empty path."""
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return Path()
    try:
        return Path(program).resolve()
    except (OSError, RuntimeError):
        return Path()


def executable_directory() -> Path:
    """Return the directory holding the running program, or an empty path."""
    try:
        return executable_path().parent
    except (OSError, RuntimeError, ValueError):
        return Path()