"""Anchor directories that relative links are joined against."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class AnchorDirectories:
    """Base directories for link resolution.

    ``root_dir`` and ``initial_dir`` are fixed for the session. The active
    document changes as the user navigates, so ``current_file`` is a
    callable that is asked again on every resolution.
    """

    initial_dir: str
    current_file: Callable[[], str]
    root_dir: str | None = None
    home_dir: str = field(default_factory=lambda: str(Path.home()))
