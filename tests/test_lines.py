import io

import pytest

from tetrafit.lines import BUFFER_SIZE, LineReader


class _TrickleStream:
    """A stream that hands out at most one character per read."""

    def __init__(self, text):
        self._text = text

    def read(self, size):
        chunk, self._text = self._text[:1], self._text[1:]
        return chunk


class _RecordingStream:
    """A stream that remembers the sizes it was asked to read."""

    def __init__(self, text):
        self._source = io.StringIO(text)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self._source.read(size)


LINES = ["....", "##..", "", ".#.#", "tail end"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, BUFFER_SIZE])
def test_lines_round_trip_with_trailing_newline(size):
    text = "\n".join(LINES) + "\n"
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == LINES


@pytest.mark.parametrize("size", [1, 4, BUFFER_SIZE])
def test_last_line_without_newline_is_returned(size):
    text = "\n".join(LINES)
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == LINES


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_none_repeats_after_end():
    reader = LineReader(io.StringIO("abc\n"))
    assert reader.read_line() == "abc"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_kept():
    reader = LineReader(io.StringIO("\n\nx\n"), 1)
    assert [reader.read_line() for _ in range(4)] == ["", "", "x", None]


def test_trickling_stream():
    text = "\n".join(LINES) + "\n"
    assert list(LineReader(_TrickleStream(text), 100)) == LINES


def test_joined_lines_rebuild_text():
    text = "first\nsecond\n\nthird"
    assert "\n".join(LineReader(io.StringIO(text), 3)) == text


def test_default_buffer_size_is_used_for_reads():
    stream = _RecordingStream("abc\n")
    reader = LineReader(stream)
    assert reader.read_line() == "abc"
    assert stream.sizes
    assert set(stream.sizes) == {BUFFER_SIZE}
    assert BUFFER_SIZE == 5000


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_non_int_buffer_size():
    with pytest.raises(TypeError):
        LineReader(io.StringIO("x"), "10")