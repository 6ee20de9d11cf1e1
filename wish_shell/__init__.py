"""wish - a small concurrent command interpreter."""

__version__ = "0.1.0"
