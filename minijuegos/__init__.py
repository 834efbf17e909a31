"""Console games, a process scheduler and classic container types."""

__version__ = "0.1.0"