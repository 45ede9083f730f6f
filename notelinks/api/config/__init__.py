"""Configuration models and commands."""

from .LinksConfig import LinksConfig
from .NotelinksConfig import NotelinksConfig

__all__ = ["LinksConfig", "NotelinksConfig"]
