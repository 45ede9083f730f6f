"""URL shape detection."""

import re

# RFC 3986 scheme followed by "://", a mailto: address, or a bare www. host
_URL_RE = re.compile(
    r"""^(?:
        [A-Za-z][A-Za-z0-9+.\-]*://\S+
        | mailto:[^\s@]+@\S+
        | www\.[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)+\S*
    )$""",
    re.VERBOSE,
)


def has_url(text: str) -> bool:
    """Return True if ``text`` looks like a URL.

    Only the shape is checked; hosts are not validated or contacted.
    """
    return bool(_URL_RE.match(text.strip()))
