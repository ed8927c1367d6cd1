import os

import pytest

from libft.lines import LineReader, get_next_line


def _open_file(tmp_path, name, content):
    path = tmp_path / name
    path.write_bytes(content.encode("utf-8"))
    return os.open(path, os.O_RDONLY)


def _read_all(reader, fd):
    lines = []
    while True:
        line = reader.next_line(fd)
        if line is None:
            return lines
        lines.append(line)


def test_lines_with_final_line_unterminated(tmp_path):
    fd = _open_file(tmp_path, "a.txt", "alpha\nbeta\ngamma")
    try:
        assert _read_all(LineReader(), fd) == ["alpha\n", "beta\n", "gamma"]
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 30, 1000])
@pytest.mark.parametrize(
    "content",
    ["", "\n", "one line\n", "a\n\nb\n", "x" * 100 + "\nshort\n" + "y" * 77],
)
def test_lines_rebuild_content(tmp_path, size, content):
    fd = _open_file(tmp_path, "c.txt", content)
    try:
        lines = _read_all(LineReader(size), fd)
    finally:
        os.close(fd)
    assert "".join(lines) == content
    assert lines == content.splitlines(keepends=True)


def test_empty_file_gives_none(tmp_path):
    fd = _open_file(tmp_path, "e.txt", "")
    try:
        reader = LineReader()
        assert reader.next_line(fd) is None
        assert reader.next_line(fd) is None
    finally:
        os.close(fd)


def test_descriptors_are_independent(tmp_path):
    fd1 = _open_file(tmp_path, "one.txt", "1a\n1b\n")
    fd2 = _open_file(tmp_path, "two.txt", "2a\n2b\n")
    try:
        reader = LineReader(2)
        assert reader.next_line(fd1) == "1a\n"
        assert reader.next_line(fd2) == "2a\n"
        assert reader.next_line(fd1) == "1b\n"
        assert reader.next_line(fd2) == "2b\n"
        assert reader.next_line(fd1) is None
        assert reader.next_line(fd2) is None
    finally:
        os.close(fd1)
        os.close(fd2)


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    os.write(write_end, b"first\nsecond\n")
    os.close(write_end)
    try:
        reader = LineReader(4)
        assert reader.next_line(read_end) == "first\n"
        assert reader.next_line(read_end) == "second\n"
        assert reader.next_line(read_end) is None
    finally:
        os.close(read_end)


def test_module_function(tmp_path):
    fd = _open_file(tmp_path, "m.txt", "top\nbottom")
    try:
        assert get_next_line(fd) == "top\n"
        assert get_next_line(fd) == "bottom"
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_negative_fd():
    with pytest.raises(ValueError):
        LineReader().next_line(-1)


def test_fd_beyond_limit():
    with pytest.raises(ValueError):
        LineReader().next_line(1024)


def test_closed_fd_raises(tmp_path):
    fd = _open_file(tmp_path, "closed.txt", "data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().next_line(fd)