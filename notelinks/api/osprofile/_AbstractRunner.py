"""Abstract base class for shell command runners."""

from abc import ABC, abstractmethod


class _AbstractRunner(ABC):
    """Narrow interface over the OS shell.

    Link resolution only needs two things from the shell: the first line a
    command prints, and running a command for its side effect.
    """

    @abstractmethod
    def read_line(self, command: str) -> str | None:
        """Run ``command`` and return the first line of stdout (None if empty)."""
        pass

    @abstractmethod
    def run(self, command: str) -> int:
        """Run ``command`` for its side effect and return the exit status."""
        pass
