"""macOS OS profile - opens targets with open(1) in the background."""

from .._posix._Impl import _Impl as _PosixImpl


class _Impl(_PosixImpl):
    """macOS-specific primitives."""

    name = "darwin"

    def open_command(self, target: str) -> str:
        return f"open {self.quote_arg(target)} &"
