"""Core interfaces."""

from .protocols import ClipboardPort

__all__ = ["ClipboardPort"]
