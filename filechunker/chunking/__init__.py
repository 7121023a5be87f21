"""Chunking module: split one file into numbered chunk files by lines, characters or tokens."""

from .chunker import STRATEGY_REGISTRY, Chunker, chunk_file, get_strategy_fn
from .exceptions import ChunkingError, ChunkReadError, ChunkSetupError, ChunkWriteError
from .line_chunker import chunk_by_lines, split_lines
from .schemas import (
    Chunk,
    ChunkerConfig,
    ChunkFile,
    ChunkingResult,
    ChunkStrategy,
)
from .text_chunker import chunk_by_characters, chunk_by_tokens, window_text, window_tokens
from .tokenizer import token_count, tokenize
from .writer import ChunkWriter

__all__ = [
    "Chunk",
    "chunk_by_characters",
    "chunk_by_lines",
    "chunk_by_tokens",
    "chunk_file",
    "Chunker",
    "ChunkerConfig",
    "ChunkFile",
    "ChunkingError",
    "ChunkingResult",
    "ChunkReadError",
    "ChunkSetupError",
    "ChunkStrategy",
    "ChunkWriteError",
    "ChunkWriter",
    "get_strategy_fn",
    "split_lines",
    "STRATEGY_REGISTRY",
    "token_count",
    "tokenize",
    "window_text",
    "window_tokens",
]
