"""clipmate - clipboard history daemon."""

__version__ = "0.1.0"
