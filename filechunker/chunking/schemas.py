"""
Pydantic schemas for file chunking.
Used by the chunking strategies and the chunk writer; configuration is immutable.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ChunkStrategy(str, Enum):
    """Supported slicing strategies."""

    LINES = "lines"
    CHARS = "chars"
    TOKENS = "tokens"


class ChunkerConfig(BaseModel):
    """Configuration for one chunking run (source, strategy, chunk_size + overlap)."""

    model_config = ConfigDict(frozen=True)

    input_file: str = Field(..., description="File to split into chunks, kept as given for the Source header")
    output_dir: Path = Field(Path("chunks"), description="Directory receiving the chunk files")
    strategy: ChunkStrategy = Field(ChunkStrategy.LINES, description="lines|chars|tokens")
    chunk_size: int = Field(1000, gt=0, description="Lines, characters or tokens per chunk")
    overlap: int = Field(50, ge=0, description="Units repeated at the start of the next chunk")
    add_metadata: bool = Field(True, description="Write a header block before the chunk content")
    prefix: Optional[str] = Field(
        None,
        description="Output filename prefix. Defaults to the input filename without extension.",
    )
    encoding: str = Field("utf-8", description="Encoding for reading the source and writing chunks")

    @field_validator("input_file", mode="before")
    @classmethod
    def _path_as_given(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @model_validator(mode="after")
    def _check_overlap(self) -> "ChunkerConfig":
        # Only the char/token windows need overlap < chunk_size to advance.
        if self.strategy != ChunkStrategy.LINES and self.overlap >= self.chunk_size:
            raise ValueError(
                f"overlap ({self.overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self

    def get_prefix(self) -> str:
        """Prefix for chunk filenames."""
        return self.prefix or Path(self.input_file).stem


def format_range(strategy: ChunkStrategy, start: int, end: int) -> str:
    """Human-readable range, e.g. "lines 1-1000" or "range 0-4000"."""
    if strategy == ChunkStrategy.LINES:
        return f"lines {start}-{end}"
    return f"range {start}-{end}"


class Chunk(BaseModel):
    """
    One unit of output content with its source range.

    Line chunks report 1-based inclusive line numbers; character and token
    chunks report 0-based half-open offsets into the text or token list.
    """

    number: int = Field(..., ge=1, description="1-based sequence number within the run")
    strategy: ChunkStrategy = Field(..., description="Strategy that produced this chunk")
    start: int = Field(..., ge=0, description="First line (1-based) or start offset")
    end: int = Field(..., ge=0, description="Last line (inclusive) or end offset (exclusive)")
    lines: List[str] = Field(default_factory=list, description="Line payload (lines strategy)")
    text: str = Field("", description="Text payload (chars and tokens strategies)")

    @property
    def is_line_chunk(self) -> bool:
        return self.strategy == ChunkStrategy.LINES

    @property
    def body(self) -> str:
        """Payload as written to disk: newline-terminated lines, or the raw text."""
        if self.is_line_chunk:
            return "".join(f"{line}\n" for line in self.lines)
        return self.text

    @property
    def range_label(self) -> str:
        return format_range(self.strategy, self.start, self.end)


class ChunkFile(BaseModel):
    """Confirmation for one chunk written to disk."""

    number: int = Field(..., ge=1)
    filename: str = Field(..., description="e.g. report_chunk_001.txt")
    path: str = Field(..., description="Full path of the written file")
    strategy: ChunkStrategy
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @property
    def range_label(self) -> str:
        return format_range(self.strategy, self.start, self.end)


class ChunkingResult(BaseModel):
    """A file chunked under one configuration: config + written chunk files."""

    source_path: str = Field(..., description="Path of the chunked source file")
    config: ChunkerConfig = Field(..., description="Configuration used for the run")
    files: List[ChunkFile] = Field(default_factory=list, description="Chunk files in write order")

    @property
    def chunk_count(self) -> int:
        return len(self.files)
