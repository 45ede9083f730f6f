"""notelinks - link resolution and dispatch for markdown notebooks."""

__version__ = "0.1.0"
