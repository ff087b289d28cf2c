"""Typed, deep-copying array lists driven by type descriptors, with a demo."""

__version__ = "0.1.0"

__all__ = ["calist", "ctype", "demo"]