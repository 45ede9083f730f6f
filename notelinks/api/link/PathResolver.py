"""Resolve filename and file: references to concrete paths."""

import logging
from urllib.parse import unquote

from ..osprofile.UnsupportedOSError import UnsupportedOSError
from .classify_reference import classify_reference
from .LinkContext import LinkContext
from .path_exists import path_exists
from .ReferenceKind import ReferenceKind
from .ResolutionPolicy import RelativeTo

logger = logging.getLogger(__name__)

FILE_PREFIX = "file:"


class PathResolver:
    """Join references to anchor directories using the context's policy.

    Paths are joined as strings with the OS separator. Nothing is
    normalized: ``..`` segments and symlinks are left alone.
    """

    def __init__(self, ctx: LinkContext):
        self.ctx = ctx
        self.profile = ctx.profile

    def split(self, reference: str) -> tuple[str | None, str]:
        """Split into (directory, filename) on the last separator."""
        return self.profile.split_dir(reference)

    def anchor_dir(self) -> str:
        """Directory that relative references are joined to."""
        anchors = self.ctx.anchors
        relative_to = self.ctx.policy.relative_to

        if relative_to == RelativeTo.ROOT:
            if anchors.root_dir:
                return anchors.root_dir
            logger.warning("Links are relative to the notebook root but no root is set; using initial directory")
            return anchors.initial_dir

        if relative_to == RelativeTo.CURRENT:
            # Re-read every time: the active document changes as the user navigates
            current_dir, _ = self.profile.split_dir(anchors.current_file())
            if current_dir is None:
                return anchors.initial_dir
            return current_dir

        return anchors.initial_dir

    def resolve(self, reference: str) -> str:
        """Resolve a filename or file: reference.

        Raises:
            ValueError: For kinds that are never resolved on the filesystem
        """
        kind = classify_reference(reference)
        if kind == ReferenceKind.FILENAME:
            return self.resolve_internal(reference)
        if kind == ReferenceKind.FILE:
            return self.resolve_external(reference)
        raise ValueError(f"Cannot resolve {kind.value} reference to a path: {reference}")

    def resolve_internal(self, reference: str) -> str:
        """Resolve a notebook document reference, creating its directory if configured."""
        directory, filename = self.split(reference)
        anchor = self.anchor_dir()
        if directory is None:
            return self.profile.join(anchor, reference)

        target_dir = self.profile.join(anchor, directory)
        if self.ctx.policy.create_dirs:
            self._ensure_dir(target_dir)
        return self.profile.join(target_dir, filename)

    def resolve_external(self, reference: str) -> str:
        """Resolve a ``file:`` reference to the path handed to the opener."""
        real_path = reference[len(FILE_PREFIX) :] if reference.startswith(FILE_PREFIX) else reference

        # file:///abs and file://host/abs URI forms
        if real_path.startswith("//"):
            authority_end = real_path.find("/", 2)
            real_path = "/" if authority_end == -1 else unquote(real_path[authority_end:])

        if self.profile.is_absolute(real_path):
            return self.profile.expand_home(real_path, self.ctx.anchors.home_dir)
        return self.profile.join(self.anchor_dir(), real_path)

    def _ensure_dir(self, target_dir: str) -> None:
        """Create ``target_dir`` if the shell reports it missing (best effort)."""
        if path_exists(self.ctx, target_dir, "d"):
            return
        try:
            command = self.profile.mkdir_command(target_dir)
        except UnsupportedOSError:
            logger.warning(f"Cannot create {target_dir}: unsupported OS profile")
            return
        logger.info(f"Creating directory {target_dir}")
        self.ctx.runner.run(command)
