"""Abstract base class for heading lookup within the active document."""

from abc import ABC, abstractmethod


class _AbstractHeadingSearch(ABC):
    @abstractmethod
    def jump_to_heading(self, anchor_ref: str) -> int | None:
        """Locate the heading matching ``anchor_ref`` (including the leading ``#``).

        Returns:
            1-based line number of the heading, or None if not found
        """
        pass
