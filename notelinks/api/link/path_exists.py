"""Ask the OS shell whether a path exists."""

from ..osprofile.UnsupportedOSError import UnsupportedOSError
from .LinkContext import LinkContext


def path_exists(ctx: LinkContext, path: str, kind: str = "d") -> bool:
    """Return True if ``path`` exists as a file (``kind="f"``) or directory (``"d"``).

    Runs one shell command per call; nothing is cached. On an unsupported OS
    a notice is emitted and False is returned, so callers treat the path as
    missing.
    """
    try:
        command = ctx.profile.exists_command(path, kind)
    except UnsupportedOSError as e:
        ctx.notice(str(e))
        return False
    return ctx.profile.parse_exists(ctx.runner.read_line(command))
