"""
Line-based chunking: fixed line counts with trailing lines carried into the next chunk.
Streams the source so only one chunk's lines are held in memory.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from .exceptions import ChunkReadError
from .schemas import Chunk, ChunkerConfig, ChunkStrategy

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    """Drop a trailing \\n or \\r\\n."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _line_chunk(number: int, buffer: List[str], line_number: int) -> Chunk:
    return Chunk(
        number=number,
        strategy=ChunkStrategy.LINES,
        start=line_number - len(buffer) + 1,
        end=line_number,
        lines=buffer,
    )


def split_lines(lines: Iterable[str], chunk_size: int, overlap: int = 0) -> Iterator[Chunk]:
    """
    Group lines into chunks of chunk_size lines.

    After each full chunk, its last `overlap` lines seed the next chunk, so
    chunk i+1 starts with the tail of chunk i. Seeded lines count towards
    chunk_size and are included in the reported line range. Remaining lines
    at the end of input form a final, possibly shorter, chunk.

    Args:
        lines: Lines without terminators.
        chunk_size: Lines per chunk (> 0).
        overlap: Lines repeated from the previous chunk (>= 0).

    Yields:
        Chunks numbered from 1 with 1-based inclusive line ranges.
    """
    buffer: List[str] = []
    carry: List[str] = []
    number = 1
    line_number = 0

    for line in lines:
        line_number += 1
        if not buffer and carry:
            buffer.extend(carry)
        buffer.append(line)

        if len(buffer) >= chunk_size:
            yield _line_chunk(number, buffer, line_number)
            if overlap > 0 and len(buffer) > overlap:
                carry = buffer[-overlap:]
            else:
                carry = []
            buffer = []
            number += 1

    if buffer:
        yield _line_chunk(number, buffer, line_number)


def chunk_by_lines(config: ChunkerConfig) -> Iterator[Chunk]:
    """Stream config.input_file line by line and yield line chunks."""
    path = Path(config.input_file)
    logger.debug("Chunking %s by lines (size=%s, overlap=%s)", path, config.chunk_size, config.overlap)
    try:
        # newline="\n" so a lone \r stays part of the line
        with open(path, encoding=config.encoding, newline="\n") as f:
            yield from split_lines(
                (_strip_terminator(line) for line in f),
                config.chunk_size,
                config.overlap,
            )
    except (OSError, UnicodeDecodeError) as e:
        raise ChunkReadError(path, str(e)) from e
