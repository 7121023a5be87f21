"""
Tests for the command-line entry point: exit codes, progress output and setup errors.
"""

import pytest

from filechunker.cli import build_parser, main


def _write_lines(path, n: int) -> None:
    path.write_text("".join(f"line {i}\n" for i in range(1, n + 1)), encoding="utf-8")


def test_parser_defaults_leave_model_defaults_in_charge():
    args = build_parser().parse_args(["input.txt"])
    assert args.chunk_size is None
    assert args.overlap is None
    assert args.add_metadata is None
    assert args.strategy is None


def test_metadata_flags():
    parser = build_parser()
    assert parser.parse_args(["a.txt", "--no-metadata"]).add_metadata is False
    assert parser.parse_args(["a.txt", "--metadata"]).add_metadata is True


def test_invalid_type_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["a.txt", "--type", "paragraphs"])
    assert exc_info.value.code == 2


def test_successful_run_prints_progress(tmp_path, capsys):
    src = tmp_path / "notes.txt"
    _write_lines(src, 25)
    out = tmp_path / "out"

    code = main([str(src), "--output", str(out), "--size", "10", "--overlap", "2"])

    assert code == 0
    stdout = capsys.readouterr().out
    assert f"Chunking file: {src}" in stdout
    assert "Chunk type: lines" in stdout
    assert "Created chunk 1: notes_chunk_001.txt (lines 1-10)" in stdout
    assert "Created chunk 2: notes_chunk_002.txt (lines 9-18)" in stdout
    assert "Chunking completed successfully! (3 chunks)" in stdout
    assert (out / "notes_chunk_003.txt").is_file()


def test_chars_run_reports_ranges(tmp_path, capsys):
    src = tmp_path / "doc.txt"
    src.write_text("a b c d e", encoding="utf-8")
    code = main([str(src), "-o", str(tmp_path / "out"), "--type", "chars", "--size", "5", "--overlap", "0"])
    assert code == 0
    stdout = capsys.readouterr().out
    assert "Created chunk 1: doc_chunk_001.txt (range 0-5)" in stdout
    assert "Created chunk 2: doc_chunk_002.txt (range 5-9)" in stdout


def test_empty_input_still_succeeds(tmp_path, capsys):
    src = tmp_path / "empty.txt"
    src.write_text("", encoding="utf-8")
    assert main([str(src), "-o", str(tmp_path / "out")]) == 0
    assert "Chunking completed successfully! (0 chunks)" in capsys.readouterr().out


def test_missing_input_exits_non_zero(tmp_path, capsys):
    code = main([str(tmp_path / "missing.txt"), "-o", str(tmp_path / "out")])
    assert code == 1
    captured = capsys.readouterr()
    assert "Error: input file does not exist" in captured.err
    assert "Chunking file:" not in captured.out


def test_no_input_exits_non_zero(capsys):
    assert main([]) == 1
    assert "Error:" in capsys.readouterr().err


def test_lines_with_default_overlap_larger_than_size(tmp_path, capsys):
    """Default overlap 50 with --size 20 in lines mode runs without repeating lines."""
    src = tmp_path / "a.txt"
    _write_lines(src, 45)
    out = tmp_path / "out"

    code = main([str(src), "-o", str(out), "--size", "20", "--no-metadata"])

    assert code == 0
    assert "Chunking completed successfully! (3 chunks)" in capsys.readouterr().out
    written = [(out / f"a_chunk_{n:03d}.txt").read_text(encoding="utf-8").splitlines() for n in (1, 2, 3)]
    assert [len(lines) for lines in written] == [20, 20, 5]
    assert [line for lines in written for line in lines] == [f"line {i}" for i in range(1, 46)]


def test_chars_overlap_not_smaller_than_size_is_rejected(tmp_path, capsys):
    src = tmp_path / "a.txt"
    _write_lines(src, 5)
    code = main([str(src), "-o", str(tmp_path / "out"), "--type", "chars", "--size", "10"])
    assert code == 1
    assert "overlap" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_config_file_supplies_settings(tmp_path, capsys):
    src = tmp_path / "code.py"
    src.write_text("a b c d e f g", encoding="utf-8")
    out = tmp_path / "out"
    cfg = tmp_path / "chunking.yaml"
    cfg.write_text(
        f"input_file: {src}\noutput_dir: {out}\nstrategy: tokens\nchunk_size: 3\noverlap: 0\nadd_metadata: false\n",
        encoding="utf-8",
    )

    code = main(["--config", str(cfg), "--prefix", "part"])

    assert code == 0
    assert (out / "part_chunk_001.txt").read_text(encoding="utf-8") == "a b c"
    assert (out / "part_chunk_003.txt").read_text(encoding="utf-8") == "g"


def test_unreadable_config_file_exits_non_zero(tmp_path, capsys):
    code = main(["a.txt", "--config", str(tmp_path / "missing.yaml")])
    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_write_error_exits_non_zero(tmp_path, capsys):
    src = tmp_path / "a.txt"
    _write_lines(src, 15)
    out = tmp_path / "out"
    out.mkdir()
    (out / "a_chunk_001.txt").mkdir()
    code = main([str(src), "-o", str(out), "--size", "10", "--overlap", "0"])
    assert code == 1
    assert "error creating chunk file" in capsys.readouterr().err


def test_source_header_keeps_input_path_as_given(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "doc.txt").write_text("one\ntwo\n", encoding="utf-8")

    assert main(["./doc.txt", "-o", "out", "--size", "10", "--overlap", "0"]) == 0

    content = (tmp_path / "out" / "doc_chunk_001.txt").read_text(encoding="utf-8")
    assert "Source: ./doc.txt\n" in content
    assert "Chunking file: ./doc.txt" in capsys.readouterr().out
