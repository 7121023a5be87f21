"""
Tests for chunk file naming, header rendering and write failures.
"""

import pytest

from filechunker.chunking.exceptions import ChunkWriteError
from filechunker.chunking.schemas import Chunk, ChunkerConfig, ChunkStrategy
from filechunker.chunking.writer import ChunkWriter


def _config(tmp_path, **kwargs) -> ChunkerConfig:
    values = {"input_file": tmp_path / "report.txt", "output_dir": tmp_path / "out"}
    values.update(kwargs)
    return ChunkerConfig(**values)


def _line_chunk() -> Chunk:
    return Chunk(number=2, strategy=ChunkStrategy.LINES, start=951, end=953, lines=["a", "b", "c"])


def _text_chunk() -> Chunk:
    return Chunk(number=1, strategy=ChunkStrategy.CHARS, start=0, end=5, text="a b c")


def test_filename_uses_prefix_and_three_digit_number(tmp_path):
    writer = ChunkWriter(_config(tmp_path))
    assert writer.chunk_filename(1) == "report_chunk_001.txt"
    assert writer.chunk_filename(42) == "report_chunk_042.txt"
    assert writer.chunk_filename(1234) == "report_chunk_1234.txt"

    custom = ChunkWriter(_config(tmp_path, prefix="part"))
    assert custom.chunk_path(7) == tmp_path / "out" / "part_chunk_007.txt"


def test_line_chunk_header(tmp_path):
    config = _config(tmp_path)
    rendered = ChunkWriter(config).render(_line_chunk())
    assert rendered == (
        "=== CHUNK 2 ===\n"
        f"Source: {config.input_file}\n"
        "Lines: 951-953\n"
        "Total lines in chunk: 3\n"
        "=== CONTENT ===\n"
        "\n"
        "a\nb\nc\n"
    )


def test_text_chunk_header(tmp_path):
    config = _config(tmp_path)
    rendered = ChunkWriter(config).render(_text_chunk())
    assert rendered == (
        "=== CHUNK 1 ===\n"
        f"Source: {config.input_file}\n"
        "Range: 0-5\n"
        "=== CONTENT ===\n"
        "\n"
        "a b c"
    )


def test_metadata_disabled_writes_raw_content(tmp_path):
    writer = ChunkWriter(_config(tmp_path, add_metadata=False))
    assert writer.render(_line_chunk()) == "a\nb\nc\n"
    assert writer.render(_text_chunk()) == "a b c"


def test_write_creates_and_overwrites_file(tmp_path):
    config = _config(tmp_path, add_metadata=False)
    (tmp_path / "out").mkdir()
    target = tmp_path / "out" / "report_chunk_001.txt"
    target.write_text("stale content that is longer", encoding="utf-8")

    chunk_file = ChunkWriter(config).write(_text_chunk())

    assert target.read_text(encoding="utf-8") == "a b c"
    assert chunk_file.filename == "report_chunk_001.txt"
    assert chunk_file.path == str(target)
    assert (chunk_file.number, chunk_file.start, chunk_file.end) == (1, 0, 5)
    assert chunk_file.range_label == "range 0-5"


def test_write_to_missing_directory_raises_write_error(tmp_path):
    config = _config(tmp_path, output_dir=tmp_path / "does" / "not" / "exist")
    with pytest.raises(ChunkWriteError) as exc_info:
        ChunkWriter(config).write(_text_chunk())
    assert exc_info.value.path.endswith("report_chunk_001.txt")
