"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

# Number of characters (or bytes) requested from the stream per read.
BUFFER_SIZE = 1024

_INT_MAX = 2**31 - 1


def _check_buffer_size(buffer_size: int) -> None:
    if not 0 < buffer_size < _INT_MAX:
        raise ValueError(
            f"buffer size must be between 1 and {_INT_MAX - 1}, got {buffer_size}"
        )


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its terminating newline; the last line of the stream may
    lack one. Data read past the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return b"\n" if isinstance(data, bytes) else "\n"  # type: ignore[return-value]

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has no more data."""
        pending = self._pending
        while pending is None or self._newline(pending) not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk

        if not pending:
            self._pending = None
            return None

        end = pending.find(self._newline(pending))
        if end == -1:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline if it has one."""
    yield from LineReader(stream, buffer_size)