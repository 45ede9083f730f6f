"""Find markdown headings by anchor."""

import logging
import re
from collections.abc import Callable
from pathlib import Path

from ._AbstractHeadingSearch import _AbstractHeadingSearch

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})\s+(.*?)\s*#*\s*$")
_FENCE_RE = re.compile(r"^ {0,3}(```|~~~)")


def heading_slug(text: str) -> str:
    """Anchor form of a heading: lowercase, punctuation dropped, spaces to dashes."""
    slug = text.strip().lower()
    slug = re.sub(r"[^\w\- ]", "", slug)
    return slug.replace(" ", "-")


class MarkdownHeadingSearch(_AbstractHeadingSearch):
    """Search the active document for an ATX heading matching an anchor."""

    def __init__(self, current_file: Callable[[], str]):
        self._current_file = current_file
        self.line: int | None = None

    def jump_to_heading(self, anchor_ref: str) -> int | None:
        wanted = heading_slug(anchor_ref.lstrip("#"))
        path = self._current_file()
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read {path} to find {anchor_ref}: {e}")
            self.line = None
            return None

        in_fence = False
        for line_num, line in enumerate(text.splitlines(), start=1):
            if _FENCE_RE.match(line):
                in_fence = not in_fence
                continue
            if in_fence:
                continue
            match = _HEADING_RE.match(line)
            if match and heading_slug(match.group(2)) == wanted:
                self.line = line_num
                return line_num

        logger.info(f"No heading matching {anchor_ref} in {path}")
        self.line = None
        return None
