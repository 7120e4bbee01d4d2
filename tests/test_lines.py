import io

import pytest

from solong.lines import BUFFER_SIZE, LineReader, iter_lines


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, BUFFER_SIZE])
def test_round_trip_text(buffer_size):
    data = "first\nsecond line\n\nlast without newline"
    lines = list(iter_lines(io.StringIO(data), buffer_size))
    assert "".join(lines) == data
    assert lines == ["first\n", "second line\n", "\n", "last without newline"]


@pytest.mark.parametrize("buffer_size", [1, 4, BUFFER_SIZE])
def test_round_trip_bytes(buffer_size):
    data = b"111\n1P1\n111\n"
    lines = list(iter_lines(io.BytesIO(data), buffer_size))
    assert lines == [b"111\n", b"1P1\n", b"111\n"]


def test_every_line_but_last_ends_with_newline():
    data = "a\nbb\nccc"
    lines = list(iter_lines(io.StringIO(data), 2))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "ccc"


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_none_after_last_line():
    reader = LineReader(io.StringIO("ab\ncd"))
    assert reader.next_line() == "ab\n"
    assert reader.next_line() == "cd"
    assert reader.next_line() is None


def test_reads_only_as_far_as_needed():
    stream = io.BytesIO(b"ab\ncd")
    reader = LineReader(stream, 1)
    assert reader.next_line() == b"ab\n"
    assert stream.tell() == len(b"ab\n")


def test_iterating_reader_yields_all_lines():
    reader = LineReader(io.StringIO("x\ny\n"))
    assert list(reader) == ["x\n", "y\n"]


@pytest.mark.parametrize("buffer_size", [0, -1, 2**31 - 1])
def test_invalid_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("abc"), buffer_size)


def test_read_error_propagates():
    class Broken:
        def read(self, size):
            raise OSError("read failed")

    reader = LineReader(Broken())
    with pytest.raises(OSError, match="read failed"):
        reader.next_line()