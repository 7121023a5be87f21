"""
Character- and token-based chunking over a fully loaded source.
Both use the same sliding window; character chunks snap back to whitespace
so words are not split.
"""

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

from .exceptions import ChunkReadError
from .schemas import Chunk, ChunkerConfig, ChunkStrategy
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

# Characters a chunk end may snap back to, and how far back to look for one
BOUNDARY_CHARS = frozenset(" \n\t")
BOUNDARY_LOOKBACK = 100


def load_source_text(config: ChunkerConfig) -> str:
    """Read the whole source file. Line endings are kept so offsets match the file."""
    path = Path(config.input_file)
    try:
        with open(path, encoding=config.encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ChunkReadError(path, str(e)) from e


def snap_to_whitespace(text: str, start: int, end: int) -> int:
    """
    Move end back to the nearest whitespace at or before end.
    Looks at most BOUNDARY_LOOKBACK characters back and never reaches start;
    returns end unchanged if no whitespace is found.
    """
    for i in range(end, max(start, end - BOUNDARY_LOOKBACK), -1):
        if text[i] in BOUNDARY_CHARS:
            return i
    return end


def _next_start(start: int, end: int, overlap: int) -> int:
    if overlap <= 0:
        return end
    next_start = end - overlap
    # A snapped-back end can leave no room for the overlap; move on instead of repeating.
    if next_start <= start:
        return end
    return next_start


def iter_windows(
    length: int,
    chunk_size: int,
    overlap: int = 0,
    adjust_end: Optional[Callable[[int, int], int]] = None,
) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) half-open windows covering [0, length).

    adjust_end(start, end) may pull a window's end back (never to or before start);
    it is only called when the window does not reach the end of input.
    """
    start = 0
    while start < length:
        end = min(start + chunk_size, length)
        if end < length and adjust_end is not None:
            end = adjust_end(start, end)
        yield start, end
        if end >= length:
            break
        start = _next_start(start, end, overlap)


def window_text(text: str, chunk_size: int, overlap: int = 0) -> Iterator[Chunk]:
    """Split text into character chunks of at most chunk_size, ending at whitespace where possible."""
    windows = iter_windows(
        len(text),
        chunk_size,
        overlap,
        adjust_end=lambda start, end: snap_to_whitespace(text, start, end),
    )
    for number, (start, end) in enumerate(windows, start=1):
        yield Chunk(
            number=number,
            strategy=ChunkStrategy.CHARS,
            start=start,
            end=end,
            text=text[start:end],
        )


def window_tokens(tokens: List[str], chunk_size: int, overlap: int = 0) -> Iterator[Chunk]:
    """Split a token list into chunks of chunk_size tokens joined by single spaces."""
    for number, (start, end) in enumerate(iter_windows(len(tokens), chunk_size, overlap), start=1):
        yield Chunk(
            number=number,
            strategy=ChunkStrategy.TOKENS,
            start=start,
            end=end,
            text=" ".join(tokens[start:end]),
        )


def chunk_by_characters(config: ChunkerConfig) -> Iterator[Chunk]:
    """Load config.input_file and yield character chunks."""
    text = load_source_text(config)
    logger.debug("Loaded %s characters from %s", len(text), config.input_file)
    yield from window_text(text, config.chunk_size, config.overlap)


def chunk_by_tokens(config: ChunkerConfig) -> Iterator[Chunk]:
    """Load and tokenize config.input_file, then yield token chunks."""
    tokens = tokenize(load_source_text(config))
    logger.debug("Tokenized %s into %s tokens", config.input_file, len(tokens))
    yield from window_tokens(tokens, config.chunk_size, config.overlap)
