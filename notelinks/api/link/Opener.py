"""Open URLs and files with the OS default handler."""

import logging

from ..osprofile.UnsupportedOSError import UnsupportedOSError
from .DispatchResult import ACTION_NOT_FOUND, ACTION_OPEN, ACTION_UNSUPPORTED
from .has_url import has_url
from .LinkContext import LinkContext
from .path_exists import path_exists

logger = logging.getLogger(__name__)


class Opener:
    """Hand a resolved target to ``xdg-open``, ``open`` or ``start``."""

    def __init__(self, ctx: LinkContext):
        self.ctx = ctx

    def open(self, target: str) -> str:
        """Open ``target`` and return the action taken.

        Local targets are checked as a file and as a directory first. The
        existence check and the notice use the raw path; the open command
        escapes it for the shell.

        Returns:
            ACTION_OPEN, ACTION_NOT_FOUND or ACTION_UNSUPPORTED
        """
        try:
            command = self.ctx.profile.open_command(target)
        except UnsupportedOSError as e:
            self.ctx.notice(str(e))
            return ACTION_UNSUPPORTED

        if not has_url(target) and not self.exists(target):
            self.ctx.notice(f"{target} doesn't seem to exist!")
            return ACTION_NOT_FOUND

        logger.info(f"Opening {target}")
        self.ctx.runner.run(command)
        return ACTION_OPEN

    def exists(self, target: str) -> bool:
        return path_exists(self.ctx, target, "f") or path_exists(self.ctx, target, "d")
