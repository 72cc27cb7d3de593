import pytest

from xmlui.filereader import FileReadError, file_size, read_file


def test_read_file_returns_contents(tmp_path):
    path = tmp_path / "page.xml"
    content = b"<main><div></div></main>"
    path.write_bytes(content)
    assert read_file(path) == content


def test_read_file_accepts_string_path(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"hello\r\nworld")
    assert read_file(str(path)) == b"hello\r\nworld"


def test_read_file_keeps_binary_data(tmp_path):
    path = tmp_path / "blob.bin"
    content = bytes(range(256)) * 3
    path.write_bytes(content)
    data = read_file(path)
    assert data == content
    assert len(data) == file_size(path)


def test_file_size_matches_written_length(tmp_path):
    path = tmp_path / "sized.txt"
    content = b"x" * 1000
    path.write_bytes(content)
    assert file_size(path) == len(content)


def test_read_empty_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    with pytest.raises(FileReadError):
        read_file(path)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.xml")


def test_file_size_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        file_size(tmp_path / "missing.xml")


def test_read_error_is_os_error(tmp_path):
    path = tmp_path / "empty.bin"
    path.touch()
    with pytest.raises(OSError):
        read_file(path)