"""Build a LinkContext from configuration for command-line use."""

import os
from collections.abc import Callable

from ..config.normalize_path import normalize_path
from ..config.NotelinksConfig import NotelinksConfig
from ..osprofile._AbstractRunner import _AbstractRunner
from ..osprofile.OSProfile import OSProfile
from ..osprofile.ShellRunner import ShellRunner
from .AnchorDirectories import AnchorDirectories
from .BufferHistory import BufferHistory
from .LinkContext import LinkContext
from .MappingCitationLookup import MappingCitationLookup
from .MarkdownHeadingSearch import MarkdownHeadingSearch


def _build_context(
    config: NotelinksConfig,
    current_file: str | None = None,
    relative_to: str | None = None,
    create_dirs: bool | None = None,
    notify: Callable[[str], None] | None = None,
    runner: _AbstractRunner | None = None,
) -> LinkContext:
    """Assemble the context for one command invocation.

    The document the link was found in (``current_file``) is both the first
    opened file and the active document. Without one, the working directory
    stands in for both.
    """
    profile = OSProfile.get(config.os) if config.os else OSProfile.detect()
    runner = runner or ShellRunner()

    if current_file:
        current = str(normalize_path(current_file))
        initial_dir, _ = profile.split_dir(current)
        if initial_dir is None:
            initial_dir = os.getcwd()
    else:
        initial_dir = os.getcwd()
        current = profile.join(initial_dir, "")

    navigator = BufferHistory(current, runner=runner, profile=profile, editor=config.links.editor)
    anchors = AnchorDirectories(
        initial_dir=initial_dir,
        current_file=navigator.current_file,
        root_dir=config.links.root_dir,
    )

    extra = {"notify": notify} if notify is not None else {}
    return LinkContext(
        profile=profile,
        runner=runner,
        anchors=anchors,
        policy=config.links.policy(relative_to=relative_to, create_dirs=create_dirs),
        navigator=navigator,
        headings=MarkdownHeadingSearch(navigator.current_file),
        citations=MappingCitationLookup(config.citations),
        max_depth=config.links.max_depth,
        **extra,
    )
