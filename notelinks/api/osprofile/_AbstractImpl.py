"""Abstract base class for OS profile implementations."""

from abc import ABC, abstractmethod


class _AbstractImpl(ABC):
    """Per-OS primitives used by link resolution.

    Command builders return a single shell command string; callers pass
    unescaped paths and each backend applies its own quoting.
    """

    name: str = ""
    path_sep: str = "/"

    @abstractmethod
    def shell_escape(self, text: str) -> str:
        """Escape ``text`` for this OS's shell."""
        pass

    @abstractmethod
    def quote_arg(self, text: str) -> str:
        """Quote ``text`` so the shell passes it through as exactly one argument."""
        pass

    @abstractmethod
    def is_absolute(self, path: str) -> bool:
        """Return True if ``path`` should bypass anchor directories."""
        pass

    @abstractmethod
    def expand_home(self, path: str, home_dir: str) -> str:
        """Replace a leading home marker with ``home_dir``."""
        pass

    @abstractmethod
    def exists_command(self, path: str, kind: str) -> str:
        """Build a command printing ``true`` or ``false``.

        Args:
            path: Path to test
            kind: "f" for a file, "d" for a directory
        """
        pass

    @abstractmethod
    def parse_exists(self, line: str | None) -> bool:
        """Interpret the output line of :meth:`exists_command`."""
        pass

    @abstractmethod
    def mkdir_command(self, path: str) -> str:
        """Build a command that creates directory ``path``."""
        pass

    @abstractmethod
    def open_command(self, target: str) -> str:
        """Build a command that opens ``target`` with the default application."""
        pass

    def split_dir(self, path: str) -> tuple[str | None, str]:
        """Split ``path`` at its last separator into (directory, name)."""
        directory, sep, name = path.rpartition(self.path_sep)
        if not sep:
            return None, path
        return directory, name

    def join(self, *parts: str) -> str:
        """Join path parts with this OS's separator (no normalization)."""
        return self.path_sep.join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
