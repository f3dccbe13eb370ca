"""Interactive command-line task list."""

__version__ = "0.1.0"
