"""Prefix selected characters with an escape marker."""

import re


def _escape_chars(text: str, chars: str, marker: str) -> str:
    """Prefix every character of ``text`` found in ``chars`` with ``marker``."""
    if not text:
        return text
    pattern = "[" + re.escape(chars) + "]"
    return re.sub(pattern, lambda m: marker + m.group(0), text)
