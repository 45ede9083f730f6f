"""Classify a reference and route it to the right handler."""

import dataclasses
import logging
import subprocess
from collections.abc import Callable

from ..escape import pattern_escape
from ..osprofile.UnsupportedOSError import UnsupportedOSError
from .classify_reference import classify_reference
from .DispatchResult import (
    ACTION_ERROR,
    ACTION_HEADING,
    ACTION_NAVIGATE,
    ACTION_UNRESOLVED,
    ACTION_UNSUPPORTED,
    DispatchResult,
)
from .LinkContext import LinkContext
from .Opener import Opener
from .PathResolver import PathResolver
from .ReferenceKind import ReferenceKind

logger = logging.getLogger(__name__)


class Dispatcher:
    """Entry point for following a link.

    Failures never propagate: each ends in a notice or a silent stop, and
    the returned :class:`DispatchResult` says which.
    """

    def __init__(self, ctx: LinkContext):
        self.ctx = ctx
        self.resolver = PathResolver(ctx)
        self.opener = Opener(ctx)
        self.handlers: dict[ReferenceKind, Callable[[str, int], DispatchResult]] = {
            ReferenceKind.FILENAME: self._handle_filename,
            ReferenceKind.URL: self._handle_url,
            ReferenceKind.FILE: self._handle_file,
            ReferenceKind.ANCHOR: self._handle_anchor,
            ReferenceKind.CITATION: self._handle_citation,
        }

    def handle_reference(self, reference: str, depth: int = 0) -> DispatchResult:
        """Follow ``reference``.

        Args:
            reference: Link target as written in the document
            depth: Number of citation re-dispatches that led here
        """
        kind = classify_reference(reference)
        logger.debug(f"Dispatching {reference!r} as {kind.value} (depth {depth})")
        try:
            return self.handlers[kind](reference, depth)
        except UnsupportedOSError as e:
            self.ctx.notice(str(e))
            return DispatchResult(reference, kind, ACTION_UNSUPPORTED)
        except (OSError, subprocess.SubprocessError) as e:
            logger.exception(f"Failed to handle {reference!r}")
            self.ctx.notice(f"Could not follow {reference}: {e}")
            return DispatchResult(reference, kind, ACTION_ERROR)

    def _handle_filename(self, reference: str, depth: int) -> DispatchResult:  # noqa: ARG002
        path = self.resolver.resolve_internal(reference)
        self.ctx.navigator.navigate_to(path)
        return DispatchResult(reference, ReferenceKind.FILENAME, ACTION_NAVIGATE, target=path)

    def _handle_url(self, reference: str, depth: int) -> DispatchResult:  # noqa: ARG002
        action = self.opener.open(reference)
        return DispatchResult(reference, ReferenceKind.URL, action, target=reference)

    def _handle_file(self, reference: str, depth: int) -> DispatchResult:  # noqa: ARG002
        target = self.resolver.resolve_external(reference)
        action = self.opener.open(target)
        return DispatchResult(reference, ReferenceKind.FILE, action, target=target)

    def _handle_anchor(self, reference: str, depth: int) -> DispatchResult:  # noqa: ARG002
        line = self.ctx.headings.jump_to_heading(reference)
        return DispatchResult(reference, ReferenceKind.ANCHOR, ACTION_HEADING, target=reference, line=line)

    def _handle_citation(self, reference: str, depth: int) -> DispatchResult:
        substitute = self.ctx.citations.resolve_citation(pattern_escape(reference))
        if substitute is None:
            logger.info(f"No reference found for citation {reference}")
            return DispatchResult(reference, ReferenceKind.CITATION, ACTION_UNRESOLVED)

        if depth >= self.ctx.max_depth:
            self.ctx.notice(f"Stopped following {reference}: more than {self.ctx.max_depth} nested citations")
            return DispatchResult(reference, ReferenceKind.CITATION, ACTION_UNRESOLVED, target=substitute)

        result = self.handle_reference(substitute, depth + 1)
        return dataclasses.replace(result, via=(reference, *result.via))
