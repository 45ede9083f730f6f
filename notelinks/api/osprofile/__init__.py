"""OS profile backends and shell command execution."""

from .OSProfile import OSProfile
from ._AbstractRunner import _AbstractRunner
from .ShellRunner import ShellRunner
from .UnsupportedOSError import UnsupportedOSError

__all__ = ["OSProfile", "ShellRunner", "UnsupportedOSError", "_AbstractRunner"]
