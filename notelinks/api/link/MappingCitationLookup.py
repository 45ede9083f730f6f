"""Citation lookup backed by a key -> reference mapping."""

import re

from ._AbstractCitationLookup import _AbstractCitationLookup

_ESCAPED_CHAR_RE = re.compile(r"\\(.)")


class MappingCitationLookup(_AbstractCitationLookup):
    """Resolve citations from configured ``{key: reference}`` pairs.

    Keys may be written with or without the leading ``@``. The incoming key
    arrives pattern-escaped; the escape markers are removed and the result
    is compared literally, so ``+``, ``(`` or ``*`` in a key match only
    themselves.
    """

    def __init__(self, citations: dict[str, str] | None = None):
        self.citations = {key.lstrip("@"): value for key, value in (citations or {}).items()}

    def resolve_citation(self, cite_key: str) -> str | None:
        key = _ESCAPED_CHAR_RE.sub(r"\1", cite_key)
        if key.startswith("@"):
            key = key[1:]
        return self.citations.get(key)
