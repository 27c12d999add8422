"""Embed asset directories as Windows resources with a generated C++ registry."""

__version__ = "0.1.0"
__all__ = ["args", "cli", "files", "generators", "runner"]