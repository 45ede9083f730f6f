"""Immutable context threaded through link resolution and dispatch."""

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...constants import DEFAULT_MAX_DEPTH
from ..osprofile._AbstractImpl import _AbstractImpl
from ..osprofile._AbstractRunner import _AbstractRunner
from ._AbstractCitationLookup import _AbstractCitationLookup
from ._AbstractHeadingSearch import _AbstractHeadingSearch
from ._AbstractNavigator import _AbstractNavigator
from .AnchorDirectories import AnchorDirectories
from .ResolutionPolicy import ResolutionPolicy

logger = logging.getLogger(__name__)


def _no_notify(message: str) -> None:  # noqa: ARG001
    pass


@dataclass(frozen=True)
class LinkContext:
    """Everything link handling needs, built once and passed explicitly.

    Attributes:
        profile: OS backend (separator, escaping, shell commands)
        runner: Executes the shell commands built by ``profile``
        anchors: Root, initial and current-document directories
        policy: Which anchor to use and whether to create directories
        navigator: Opens notebook documents
        headings: Finds headings in the active document
        citations: Maps citation keys to substitute references
        notify: User-visible notice channel
        max_depth: How many citation re-dispatches to follow
    """

    profile: _AbstractImpl
    runner: _AbstractRunner
    anchors: AnchorDirectories
    policy: ResolutionPolicy
    navigator: _AbstractNavigator
    headings: _AbstractHeadingSearch
    citations: _AbstractCitationLookup
    notify: Callable[[str], None] = _no_notify
    max_depth: int = DEFAULT_MAX_DEPTH

    def notice(self, message: str) -> None:
        """Log ``message`` and show it to the user."""
        logger.warning(message)
        self.notify(message)

    def replace(self, **changes: Any) -> "LinkContext":
        return dataclasses.replace(self, **changes)
