"""Classify a link reference."""

from .has_url import has_url
from .ReferenceKind import ReferenceKind


def classify_reference(reference: str) -> ReferenceKind:
    """Map a raw link target to exactly one :class:`ReferenceKind`.

    Rules are checked in order and the first match wins, so ``file:`` beats
    a URL-looking remainder and a URL beats a leading ``@`` or ``#``.
    """
    if reference.startswith("file:"):
        return ReferenceKind.FILE
    if has_url(reference):
        return ReferenceKind.URL
    if reference.startswith("@"):
        return ReferenceKind.CITATION
    if reference.startswith("#"):
        return ReferenceKind.ANCHOR
    return ReferenceKind.FILENAME
