"""Multi-threaded whole-image filters."""

__version__ = "1.0.0"
