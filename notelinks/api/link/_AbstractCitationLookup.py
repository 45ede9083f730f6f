"""Abstract base class for citation lookup."""

from abc import ABC, abstractmethod


class _AbstractCitationLookup(ABC):
    @abstractmethod
    def resolve_citation(self, cite_key: str) -> str | None:
        """Return a substitute reference (URL, file: path, ...) for ``cite_key``.

        Args:
            cite_key: Pattern-escaped citation, including the leading ``@``

        Returns:
            The substitute reference, or None if the citation has none
        """
        pass
