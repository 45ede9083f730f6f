"""Escape a string for literal use in a regular expression."""

from ._escape_chars import _escape_chars

PATTERN_SPECIAL_CHARS = "-.'\""


def pattern_escape(text: str) -> str:
    """Backslash-escape ``-``, ``.``, and both quote characters.

    The result is meant for ``re`` calls that match citation keys, which
    commonly contain dashes and dots (``@smith-jones.2020``).
    """
    return _escape_chars(text, PATTERN_SPECIAL_CHARS, "\\")
