"""Unsupported operating system error."""


class UnsupportedOSError(RuntimeError):
    """Raised when a capability is not implemented for the current OS."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Function unavailable for {system}. Please file an issue.")
