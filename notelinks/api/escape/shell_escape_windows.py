"""Escape a string for cmd.exe."""

from ._escape_chars import _escape_chars

WINDOWS_SPECIAL_CHARS = " &"


def shell_escape_windows(text: str) -> str:
    """Caret-escape spaces and ``&``."""
    return _escape_chars(text, WINDOWS_SPECIAL_CHARS, "^")
