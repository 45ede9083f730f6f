"""OS profile public API - selects the per-OS backend once per process."""

import platform

from ._AbstractImpl import _AbstractImpl

# Registry: add new backends here (ONLY place backend names are enumerated)
_BACKEND_REGISTRY: dict[str, str] = {
    "linux": "notelinks.api.osprofile._linux._Impl",
    "darwin": "notelinks.api.osprofile._darwin._Impl",
    "windows": "notelinks.api.osprofile._windows._Impl",
}

UNSUPPORTED = "unsupported"


class OSProfile:
    """Factory for OS profile backends."""

    @staticmethod
    def supported() -> list[str]:
        """Backend names that implement every capability."""
        return list(_BACKEND_REGISTRY.keys())

    @staticmethod
    def get(name: str) -> _AbstractImpl:
        """Build the backend registered under ``name``.

        Raises:
            ValueError: If ``name`` is neither registered nor "unsupported"
        """
        if name == UNSUPPORTED:
            from ._unsupported._Impl import _Impl as _UnsupportedImpl

            return _UnsupportedImpl()
        module_name = _BACKEND_REGISTRY.get(name)
        if module_name is None:
            raise ValueError(f"Unknown OS profile: {name!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        module = __import__(module_name, fromlist=[""])
        return module._Impl()

    @staticmethod
    def detect(system: str | None = None) -> _AbstractImpl:
        """Select the backend for the running (or given) system.

        Unknown systems get the unsupported backend instead of an error so
        that callers can report the missing capability.
        """
        system = (system or platform.system()).lower()
        if system in _BACKEND_REGISTRY:
            return OSProfile.get(system)

        from ._unsupported._Impl import _Impl as _UnsupportedImpl

        return _UnsupportedImpl(system)
