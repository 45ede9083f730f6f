"""Fallback profile for operating systems without a backend."""

from .._AbstractImpl import _AbstractImpl
from ..UnsupportedOSError import UnsupportedOSError


class _Impl(_AbstractImpl):
    """Every shell capability raises :class:`UnsupportedOSError`.

    Pure string operations (splitting, joining, escaping) still work with
    POSIX conventions so classification and resolution can be reported.
    """

    name = "unsupported"
    path_sep = "/"

    def __init__(self, system: str = "unknown"):
        self.system = system

    def shell_escape(self, text: str) -> str:
        return text

    def quote_arg(self, text: str) -> str:
        return text

    def is_absolute(self, path: str) -> bool:
        return path.startswith("/")

    def expand_home(self, path: str, home_dir: str) -> str:  # noqa: ARG002
        return path

    def exists_command(self, path: str, kind: str) -> str:
        raise UnsupportedOSError(self.system)

    def parse_exists(self, line: str | None) -> bool:
        raise UnsupportedOSError(self.system)

    def mkdir_command(self, path: str) -> str:
        raise UnsupportedOSError(self.system)

    def open_command(self, target: str) -> str:
        raise UnsupportedOSError(self.system)
