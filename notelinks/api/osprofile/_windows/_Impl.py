"""Windows OS profile - cmd.exe primitives."""

import re

from ...escape import shell_escape_windows
from ...escape._escape_chars import _escape_chars
from .._AbstractImpl import _AbstractImpl

_DRIVE_RE = re.compile(r"^[A-Z]:\\")

# Characters the plain caret escape covers
_CARET_SAFE_RE = re.compile(r"[\w@%+=:,.\\/~\- &]*")
_CMD_METACHARS = " &|<>()^"


def _no_quotes(text: str) -> str:
    # cmd.exe cannot escape '"'; it never occurs in a path and is %22 in a URL
    return text.replace('"', "%22")


class _Impl(_AbstractImpl):
    """Windows-specific primitives."""

    name = "windows"
    path_sep = "\\"

    def shell_escape(self, text: str) -> str:
        return shell_escape_windows(text)

    def quote_arg(self, text: str) -> str:
        if _CARET_SAFE_RE.fullmatch(text):
            return self.shell_escape(text)
        return _escape_chars(_no_quotes(text), _CMD_METACHARS, "^")

    def is_absolute(self, path: str) -> bool:
        return bool(_DRIVE_RE.match(path))

    def expand_home(self, path: str, home_dir: str) -> str:  # noqa: ARG002
        # cmd.exe has no "~" convention; absolute paths carry a drive letter
        return path

    def exists_command(self, path: str, kind: str) -> str:
        if kind not in ("f", "d"):
            raise ValueError(f"Invalid existence kind: {kind!r} (expected 'f' or 'd')")
        # A trailing backslash makes IF exist match directories only
        suffix = "\\" if kind == "d" else ""
        return f"IF exist {self.quote_arg(path)}{suffix} ( echo true ) ELSE ( echo false )"

    def parse_exists(self, line: str | None) -> bool:
        return "true" in (line or "")

    def mkdir_command(self, path: str) -> str:
        # Only creates the missing parents cmd's mkdir creates itself (no -p equivalent)
        return f'mkdir "{_no_quotes(path)}"'

    def open_command(self, target: str) -> str:
        return f'cmd.exe /c start "" "{_no_quotes(target)}"'
