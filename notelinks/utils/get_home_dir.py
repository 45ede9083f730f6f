"""Get notelinks home directory path or path under it."""

import os
from pathlib import Path

from ..constants import NOTELINKS_HOME_ENV, NOTELINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get notelinks home directory path or path under it.

    Checks NOTELINKS_HOME first, defaults to ~/.notelinks if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.notelinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.notelinks/config.json")
    """
    home_env = os.environ.get(NOTELINKS_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME first so tests can isolate via monkeypatch
        user_home = os.environ.get("HOME")
        home = Path(user_home) / NOTELINKS_HOME_EXT if user_home else Path.home() / NOTELINKS_HOME_EXT

    return home / Path(*parts) if parts else home
