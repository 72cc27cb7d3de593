import pytest

from xmlui.log import Log
from xmlui.utility import number_to_string


def test_write_string_with_line_end(tmp_path):
    path = tmp_path / "out.log"
    with Log(path) as log:
        log.write("hello", True)
    assert path.read_bytes() == b"hello\r\n"


def test_write_int_and_float(tmp_path):
    path = tmp_path / "out.log"
    with Log(path) as log:
        log.write(42)
        log.write(" ")
        log.write(1.5)
    expected = "42 " + number_to_string(1.5, 64, 4)
    assert path.read_text() == expected


def test_var_format(tmp_path):
    path = tmp_path / "out.log"
    with Log(path) as log:
        log.var("count", 5)
    assert path.read_bytes() == b"count: 5\r\n"


def test_new_line_writes_line_feed(tmp_path):
    path = tmp_path / "out.log"
    with Log(path) as log:
        log.write("a")
        log.new_line()
        log.write("b")
    assert path.read_bytes() == b"a\nb"


def test_clear_empties_file(tmp_path):
    path = tmp_path / "out.log"
    with Log(path) as log:
        log.write("something to drop", True)
        log.clear()
        log.write("kept")
    assert path.read_bytes() == b"kept"


def test_open_truncates_existing_file(tmp_path):
    path = tmp_path / "out.log"
    path.write_text("old contents")
    log = Log(path)
    log.close()
    assert path.read_bytes() == b""


def test_writes_after_close_are_ignored(tmp_path):
    path = tmp_path / "out.log"
    log = Log(path)
    log.write("first")
    log.close()
    log.write("second", True)
    assert log.closed
    assert path.read_bytes() == b"first"


def test_log_without_path_is_closed():
    log = Log(None)
    log.write("ignored", True)
    assert log.closed


def test_write_rejects_other_types(tmp_path):
    with Log(tmp_path / "out.log") as log:
        with pytest.raises(TypeError):
            log.write([1, 2])