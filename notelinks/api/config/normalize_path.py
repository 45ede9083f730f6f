"""Normalize a configured directory.

Expands user home directory (~) and returns an absolute path
WITHOUT resolving symlinks.
"""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand user and return absolute path (no symlink resolution)."""
    return Path(path).expanduser().absolute()
