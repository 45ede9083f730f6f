"""Shell and pattern escaping helpers."""

from .pattern_escape import pattern_escape
from .shell_escape_posix import shell_escape_posix
from .shell_escape_windows import shell_escape_windows

__all__ = ["pattern_escape", "shell_escape_posix", "shell_escape_windows"]
