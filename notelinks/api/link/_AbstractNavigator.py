"""Abstract base class for in-notebook navigation."""

from abc import ABC, abstractmethod


class _AbstractNavigator(ABC):
    """Opens a notebook document, remembering the one being left."""

    @abstractmethod
    def navigate_to(self, path: str) -> None:
        """Make ``path`` the active document.

        The previously active document is pushed onto a history stack first.
        """
        pass
