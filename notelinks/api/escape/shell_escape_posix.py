"""Escape a string for a POSIX shell command line."""

from ._escape_chars import _escape_chars

POSIX_SPECIAL_CHARS = " '&()$#"


def shell_escape_posix(text: str) -> str:
    """Backslash-escape spaces, quotes, ``&``, parentheses, ``$`` and ``#``.

    >>> shell_escape_posix("My Notes (draft)")
    'My\\\\ Notes\\\\ \\\\(draft\\\\)'
    """
    return _escape_chars(text, POSIX_SPECIAL_CHARS, "\\")
