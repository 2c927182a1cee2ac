"""Configuration resolution.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    TESTGEN_FIXTURES_DIR: root for relative fixture group names (default: cwd)
    TESTGEN_BACKUP_SUFFIX: suffix for the renamed original (default: .old)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_BACKUP_SUFFIX = ".old"


def fixtures_root() -> Path:
    """Return the directory fixture group names are resolved against."""
    env = os.environ.get("TESTGEN_FIXTURES_DIR")
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def backup_suffix() -> str:
    """Return the suffix appended to the original file before rewriting."""
    return os.environ.get("TESTGEN_BACKUP_SUFFIX") or _DEFAULT_BACKUP_SUFFIX


def backup_path(path: Path | str) -> Path:
    """Return where the original of ``path`` is moved aside to."""
    p = Path(path)
    return p.with_name(p.name + backup_suffix())
