"""Kinds of link reference."""

from enum import Enum


class ReferenceKind(str, Enum):
    """What a link target refers to."""

    FILE = "file"
    URL = "url"
    CITATION = "citation"
    ANCHOR = "anchor"
    FILENAME = "filename"

    def __str__(self) -> str:
        return self.value
