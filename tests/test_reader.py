import pytest

from cdlcompiler.reader import SourceReadError, read_file


def test_reads_lines_with_newlines(tmp_path):
    path = tmp_path / "source.cdl"
    path.write_bytes(b"BEGIN\nPRINT 1;\nEND\n")
    assert read_file(path) == "BEGIN\nPRINT 1;\nEND\n"


def test_adds_newline_to_last_line(tmp_path):
    path = tmp_path / "source.cdl"
    path.write_bytes(b"a\nb")
    assert read_file(path) == "a\nb\n"


def test_drops_carriage_returns(tmp_path):
    path = tmp_path / "source.cdl"
    path.write_bytes(b"a\r\nb\r\n")
    assert read_file(path) == "a\nb\n"


def test_keeps_blank_lines(tmp_path):
    path = tmp_path / "source.cdl"
    path.write_bytes(b"a\n\nb\n")
    assert read_file(path) == "a\n\nb\n"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.cdl"
    path.write_bytes(b"")
    assert read_file(path) == ""


def test_accepts_string_path(tmp_path):
    path = tmp_path / "source.cdl"
    path.write_bytes(b"x = 1;\n")
    assert read_file(str(path)) == "x = 1;\n"


def test_missing_file_raises(tmp_path):
    with pytest.raises(SourceReadError, match="^error opening the file"):
        read_file(tmp_path / "missing.cdl")


def test_error_keeps_cause(tmp_path):
    with pytest.raises(SourceReadError) as info:
        read_file(tmp_path / "missing.cdl")
    assert isinstance(info.value.__cause__, FileNotFoundError)