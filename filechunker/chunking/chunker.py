"""
Chunking module: split one file into numbered chunk files.
Strategy is selected once from STRATEGY_REGISTRY; chunks are written as they are produced.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional

from .exceptions import ChunkSetupError
from .line_chunker import chunk_by_lines
from .schemas import Chunk, ChunkerConfig, ChunkFile, ChunkingResult, ChunkStrategy
from .text_chunker import chunk_by_characters, chunk_by_tokens
from .writer import ChunkWriter

logger = logging.getLogger(__name__)

StrategyFn = Callable[[ChunkerConfig], Iterator[Chunk]]

STRATEGY_REGISTRY: Dict[ChunkStrategy, StrategyFn] = {
    ChunkStrategy.LINES: chunk_by_lines,
    ChunkStrategy.CHARS: chunk_by_characters,
    ChunkStrategy.TOKENS: chunk_by_tokens,
}

OUTPUT_DIR_MODE = 0o755


def get_strategy_fn(strategy: ChunkStrategy) -> StrategyFn:
    """Return the chunking function for the given strategy."""
    try:
        return STRATEGY_REGISTRY[ChunkStrategy(strategy)]
    except (KeyError, ValueError) as e:
        raise ChunkSetupError(f"unsupported chunk type: {strategy}") from e


class Chunker:
    """Runs one chunking configuration against its input file."""

    def __init__(self, config: ChunkerConfig):
        self.config = config
        self.writer = ChunkWriter(config)

    def validate(self) -> None:
        """
        Check the input file and create the output directory if needed.

        Raises:
            ChunkSetupError: input missing or not a file, or output directory not creatable.
        """
        input_path = Path(self.config.input_file)
        if not input_path.exists():
            raise ChunkSetupError(f"input file does not exist: {input_path}")
        if not input_path.is_file():
            raise ChunkSetupError(f"input path is not a file: {input_path}")

        output_dir = Path(self.config.output_dir)
        try:
            output_dir.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise ChunkSetupError(f"error creating output directory {output_dir}: {e}") from e

    def process(self, on_chunk: Optional[Callable[[ChunkFile], None]] = None) -> ChunkingResult:
        """
        Chunk the input file and write every chunk.

        Args:
            on_chunk: Called with each ChunkFile right after it is written.

        Returns:
            ChunkingResult listing the written files in order.

        Raises:
            ChunkSetupError, ChunkReadError, ChunkWriteError: the run stops at the
            first failure; files already written are left in place.
        """
        self.validate()
        strategy_fn = get_strategy_fn(self.config.strategy)
        result = ChunkingResult(source_path=str(self.config.input_file), config=self.config)

        for chunk in strategy_fn(self.config):
            chunk_file = self.writer.write(chunk)
            result.files.append(chunk_file)
            if on_chunk is not None:
                on_chunk(chunk_file)

        logger.info(
            "Chunked %s [%s size=%s overlap=%s] into %s chunks in %s",
            self.config.input_file,
            self.config.strategy.value,
            self.config.chunk_size,
            self.config.overlap,
            result.chunk_count,
            self.config.output_dir,
        )
        return result


def chunk_file(
    config: ChunkerConfig,
    on_chunk: Optional[Callable[[ChunkFile], None]] = None,
) -> ChunkingResult:
    """Chunk config.input_file into config.output_dir."""
    return Chunker(config).process(on_chunk=on_chunk)
