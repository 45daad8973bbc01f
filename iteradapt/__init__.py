"""Lazy iterator adaptors and sources; import each one from its own submodule."""

__version__ = "0.1.0"