"""
Exceptions raised while chunking a file.

Every failure is fatal to the run; chunks already written stay on disk.
"""

from pathlib import Path
from typing import Union


class ChunkingError(Exception):
    """Base exception for all chunking errors."""


class ChunkSetupError(ChunkingError):
    """Raised before any chunk is produced (missing input, unusable output directory)."""


class ChunkReadError(ChunkingError):
    """Raised when the source file cannot be opened, read or decoded."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"error reading file {self.path}: {reason}")


class ChunkWriteError(ChunkingError):
    """Raised when a chunk file cannot be created or written."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"error creating chunk file {self.path}: {reason}")
