"""Incremental delimiter-based reading over a binary stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from selpg.exceptions import InputSourceError

if TYPE_CHECKING:
    from selpg.typing.protocol import ReadableByteStream

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class Segment:
    """Bytes read up to and including one delimiter.

    `at_eof` is set when the stream ended before another delimiter was
    found; `data` then holds whatever remained, possibly nothing.
    """

    data: bytes
    at_eof: bool


class DelimitedReader:
    """Read a binary stream one delimited segment at a time."""

    def __init__(
        self,
        stream: ReadableByteStream,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        label: str = "input",
    ) -> None:
        if chunk_size < 1:
            message = "chunk_size must be positive"
            raise ValueError(message)
        self._stream = stream
        self._chunk_size = chunk_size
        self._label = label
        self._pending = bytearray()
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """Return whether the underlying stream reported end of stream."""
        return self._exhausted and not self._pending

    def _fill(self) -> bool:
        """Read one chunk into the pending buffer.

        Raises:
            InputSourceError: If the underlying read fails.

        Returns:
            bool: False once the stream is exhausted.
        """
        if self._exhausted:
            return False
        try:
            chunk = self._stream.read(self._chunk_size)
        except OSError as exc:
            raise InputSourceError(source=self._label, exc=exc) from exc
        if not chunk:
            self._exhausted = True
            return False
        self._pending.extend(chunk)
        return True

    def read_through(self, delimiter: bytes) -> Segment:
        """Read up to and including the next delimiter.

        Args:
            delimiter (bytes): Single-byte delimiter.

        Returns:
            Segment: Segment data, flagged `at_eof` when no delimiter was left.
        """
        search_from = 0
        while True:
            index = self._pending.find(delimiter, search_from)
            if index != -1:
                end = index + len(delimiter)
                data = bytes(self._pending[:end])
                del self._pending[:end]
                return Segment(data=data, at_eof=False)
            search_from = len(self._pending)
            if not self._fill():
                data = bytes(self._pending)
                self._pending.clear()
                return Segment(data=data, at_eof=True)

    def drain(self) -> int:
        """Consume and discard everything left in the stream.

        Returns:
            int: Number of bytes discarded.
        """
        discarded = len(self._pending)
        self._pending.clear()
        while self._fill():
            discarded += len(self._pending)
            self._pending.clear()
        return discarded
