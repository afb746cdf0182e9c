import pytest

from turbine.filelib import read_lines, read_text, write_lines, write_text


def test_text_round_trip(tmp_path):
    path = str(tmp_path / "a.txt")
    text = "first line\nsecond\r\nthird"
    write_text(path, text)
    assert read_text(path) == text


def test_write_text_overwrites(tmp_path):
    path = str(tmp_path / "a.txt")
    write_text(path, "long old content")
    write_text(path, "new")
    assert read_text(path) == "new"


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"a\nb\nc")
    assert read_lines(str(path)) == ["a\n", "b\n", "c"]


def test_read_lines_without_trailing_partial_line(tmp_path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"x\n\ny\n")
    assert read_lines(str(path)) == ["x\n", "\n", "y\n"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert read_lines(str(path)) == []


def test_lines_round_trip(tmp_path):
    path = str(tmp_path / "lines.txt")
    lines = ["one\n", "two\n", "three"]
    write_lines(path, lines)
    assert read_lines(path) == lines
    assert read_text(path) == "".join(lines)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(str(tmp_path / "missing.txt"))
    with pytest.raises(FileNotFoundError):
        read_lines(str(tmp_path / "missing.txt"))


def test_write_into_missing_directory_raises(tmp_path):
    path = str(tmp_path / "no_dir" / "a.txt")
    with pytest.raises(OSError):
        write_text(path, "x")
    with pytest.raises(OSError):
        write_lines(path, ["x\n"])