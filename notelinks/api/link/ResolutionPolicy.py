"""Where relative links point and whether missing directories are created."""

from dataclasses import dataclass


class RelativeTo:
    """Recognised anchor names. Anything else behaves like FIRST."""

    ROOT = "root"
    FIRST = "first"
    CURRENT = "current"

    ALL = (ROOT, FIRST, CURRENT)


@dataclass(frozen=True)
class ResolutionPolicy:
    relative_to: str = RelativeTo.FIRST
    create_dirs: bool = True
