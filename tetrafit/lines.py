"""Line-by-line reading from a text stream in fixed-size chunks."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

BUFFER_SIZE = 5000


class LineReader:
    """Read newline-terminated lines from ``stream``.

    The stream is read ``buffer_size`` characters at a time. Lines are
    returned without their trailing newline. A final line that has no newline
    is still returned, and a newline at the very end of the stream does not
    produce an extra empty line.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the stream has nothing more."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if "\n" in self._pending:
            line, _, self._pending = self._pending.partition("\n")
            return line
        if self._pending:
            line, self._pending = self._pending, ""
            return line
        return None

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line