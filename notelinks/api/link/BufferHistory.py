"""Navigator that tracks the active document and its history."""

import logging

from ..osprofile._AbstractImpl import _AbstractImpl
from ..osprofile._AbstractRunner import _AbstractRunner
from ._AbstractNavigator import _AbstractNavigator

logger = logging.getLogger(__name__)


class BufferHistory(_AbstractNavigator):
    """Keep the active document plus a LIFO stack of previous ones.

    When ``editor`` is set, every navigation also runs
    ``<editor> <escaped path>`` through the shell.
    """

    def __init__(
        self,
        current: str,
        runner: _AbstractRunner | None = None,
        profile: _AbstractImpl | None = None,
        editor: str | None = None,
    ):
        if editor and (runner is None or profile is None):
            raise ValueError("An editor command needs both a runner and an OS profile")
        self.current = current
        self.history: list[str] = []
        self._runner = runner
        self._profile = profile
        self._editor = editor

    def current_file(self) -> str:
        return self.current

    def navigate_to(self, path: str) -> None:
        self.history.append(self.current)
        self.current = path
        logger.info(f"Navigated to {path}")
        if self._editor and self._runner is not None and self._profile is not None:
            self._runner.run(f"{self._editor} {self._profile.quote_arg(path)}")

    def back(self) -> str | None:
        """Return to the previous document, or None if history is empty."""
        if not self.history:
            return None
        self.current = self.history.pop()
        return self.current
