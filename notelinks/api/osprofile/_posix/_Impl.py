"""Shared POSIX implementation (Linux and macOS)."""

import re
import shlex

from ...escape import shell_escape_posix
from .._AbstractImpl import _AbstractImpl

# Characters that backslash escaping covers; anything else gets single quotes
_BACKSLASH_SAFE_RE = re.compile(r"[\w@%+=:,./\- '&()$#]*")


class _Impl(_AbstractImpl):
    """POSIX shell primitives. Subclasses supply :meth:`open_command`."""

    path_sep = "/"

    def shell_escape(self, text: str) -> str:
        return shell_escape_posix(text)

    def quote_arg(self, text: str) -> str:
        if _BACKSLASH_SAFE_RE.fullmatch(text):
            return self.shell_escape(text)
        return shlex.quote(text)

    def is_absolute(self, path: str) -> bool:
        return path.startswith("/") or path.startswith("~/")

    def expand_home(self, path: str, home_dir: str) -> str:
        if path.startswith("~/"):
            return home_dir.rstrip("/") + path[1:]
        return path

    def exists_command(self, path: str, kind: str) -> str:
        if kind not in ("f", "d"):
            raise ValueError(f"Invalid existence kind: {kind!r} (expected 'f' or 'd')")
        quoted = path.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$").replace("`", "\\`")
        return f'if [ -{kind} "{quoted}" ]; then echo true; else echo false; fi'

    def parse_exists(self, line: str | None) -> bool:
        # Anything but an explicit "false" counts as present
        return (line or "").strip() != "false"

    def mkdir_command(self, path: str) -> str:
        return f"mkdir -p {self.quote_arg(path)}"
