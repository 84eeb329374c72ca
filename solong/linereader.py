"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Yield lines from a text or binary stream, newline included.

    The stream is read ``buffer_size`` items at a time; whatever follows
    the returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while self._stash is None or self._newline(self._stash) not in self._stash:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        cut = stash.find(self._newline(stash))
        if cut < 0:
            self._stash = None
            return stash
        line, rest = stash[:cut + 1], stash[cut + 1:]
        self._stash = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)