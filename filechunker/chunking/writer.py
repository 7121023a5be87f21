"""
Chunk writer: one plain-text file per chunk, with an optional metadata header.
"""

import logging
from pathlib import Path

from .exceptions import ChunkWriteError
from .schemas import Chunk, ChunkerConfig, ChunkFile

logger = logging.getLogger(__name__)


class ChunkWriter:
    """Writes chunks to <output_dir>/<prefix>_chunk_<NNN>.txt, overwriting existing files."""

    def __init__(self, config: ChunkerConfig):
        self.config = config
        self.prefix = config.get_prefix()
        self.output_dir = Path(config.output_dir)

    def chunk_filename(self, number: int) -> str:
        return f"{self.prefix}_chunk_{number:03d}.txt"

    def chunk_path(self, number: int) -> Path:
        return self.output_dir / self.chunk_filename(number)

    def render_header(self, chunk: Chunk) -> str:
        lines = [
            f"=== CHUNK {chunk.number} ===",
            f"Source: {self.config.input_file}",
        ]
        if chunk.is_line_chunk:
            lines.append(f"Lines: {chunk.start}-{chunk.end}")
            lines.append(f"Total lines in chunk: {len(chunk.lines)}")
        else:
            lines.append(f"Range: {chunk.start}-{chunk.end}")
        lines.append("=== CONTENT ===")
        return "\n".join(lines) + "\n\n"

    def render(self, chunk: Chunk) -> str:
        """Full file contents for a chunk."""
        if not self.config.add_metadata:
            return chunk.body
        return self.render_header(chunk) + chunk.body

    def write(self, chunk: Chunk) -> ChunkFile:
        """
        Write one chunk to its numbered file.

        Raises:
            ChunkWriteError: if the file cannot be created or written.
        """
        path = self.chunk_path(chunk.number)
        try:
            with open(path, "w", encoding=self.config.encoding, newline="") as f:
                f.write(self.render(chunk))
        except (OSError, UnicodeEncodeError) as e:
            raise ChunkWriteError(path, str(e)) from e

        logger.debug("Wrote chunk %s to %s (%s)", chunk.number, path, chunk.range_label)
        return ChunkFile(
            number=chunk.number,
            filename=path.name,
            path=str(path),
            strategy=chunk.strategy,
            start=chunk.start,
            end=chunk.end,
        )
