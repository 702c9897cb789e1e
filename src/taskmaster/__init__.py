"""taskmaster - interactive in-memory task manager."""

__version__ = "0.1.0"
