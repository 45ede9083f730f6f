"""Linux OS profile - opens targets with xdg-open."""

from .._posix._Impl import _Impl as _PosixImpl


class _Impl(_PosixImpl):
    """Linux-specific primitives."""

    name = "linux"

    def open_command(self, target: str) -> str:
        return f"xdg-open {self.quote_arg(target)}"
