"""Split large text files into numbered chunk files."""

__version__ = "0.1.0"
