"""
Command-line entry point: chunk one file into numbered chunk files.

Usage:
  file-chunker large_file.js --type lines --size 500 --overlap 25
  file-chunker document.txt --type chars --size 4000
  file-chunker code.py --type tokens --size 1500 --output ./chunks
  file-chunker document.txt --config chunking.yaml
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from filechunker.chunking import Chunker, ChunkFile, ChunkingError, ChunkStrategy
from filechunker.utils import build_config, load_config_file

logger = logging.getLogger("filechunker")

EXAMPLES = """\
Examples:
  %(prog)s large_file.js --type lines --size 500 --overlap 25
  %(prog)s document.txt --type chars --size 4000
  %(prog)s code.py --type tokens --size 1500 --output ./chunks
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-chunker",
        description="Chunk large files for AI processing.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        type=str,
        nargs="?",
        default=None,
        help="Input file to chunk (may also come from --config as input_file)",
    )
    parser.add_argument(
        "-o",
        "--output",
        "--output-dir",
        dest="output_dir",
        type=Path,
        default=None,
        help="Output directory for chunks (default: chunks)",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="strategy",
        choices=[s.value for s in ChunkStrategy],
        default=None,
        help="Chunk type: lines, chars, or tokens (default: lines)",
    )
    parser.add_argument(
        "-s",
        "--size",
        dest="chunk_size",
        type=int,
        default=None,
        metavar="N",
        help="Size of each chunk in lines, characters or tokens (default: 1000)",
    )
    parser.add_argument(
        "--overlap",
        type=int,
        default=None,
        metavar="N",
        help="Overlap between consecutive chunks; must be smaller than --size for chars and tokens (default: 50)",
    )
    parser.add_argument(
        "--metadata",
        dest="add_metadata",
        action="store_true",
        default=None,
        help="Add a metadata header to each chunk (default)",
    )
    parser.add_argument(
        "--no-metadata",
        dest="add_metadata",
        action="store_false",
        help="Write raw content only",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Prefix for output files (default: input filename without extension)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Text encoding of the input and chunk files (default: utf-8)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with chunker settings (input_file, chunk_size, overlap, ...)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def _print_progress(chunk_file: ChunkFile) -> None:
    print(f"Created chunk {chunk_file.number}: {chunk_file.filename} ({chunk_file.range_label})")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        file_values = load_config_file(args.config) if args.config else {}
        config = build_config(
            file_values,
            input_file=args.input,
            output_dir=args.output_dir,
            strategy=args.strategy,
            chunk_size=args.chunk_size,
            overlap=args.overlap,
            add_metadata=args.add_metadata,
            prefix=args.prefix,
            encoding=args.encoding,
        )
        chunker = Chunker(config)
        chunker.validate()
    except (OSError, yaml.YAMLError, ValueError, ChunkingError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Chunking file: {config.input_file}")
    print(f"Chunk type: {config.strategy.value}")
    print(f"Chunk size: {config.chunk_size}")
    print(f"Overlap: {config.overlap}")
    print(f"Output directory: {config.output_dir}")
    print()

    try:
        result = chunker.process(on_chunk=_print_progress)
    except ChunkingError as e:
        logger.debug("Chunking failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nChunking completed successfully! ({result.chunk_count} chunks)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
