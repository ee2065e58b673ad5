"""Stream interfaces."""

from __future__ import annotations

from typing import Protocol


class ReadableByteStream(Protocol):
    """Binary stream consumed by the page scanner."""

    def read(self, size: int = -1, /) -> bytes:
        """Read up to `size` bytes.

        Args:
            size: Maximum number of bytes to return.

        Returns:
            bytes: Data read, empty at end of stream.
        """


class WritableByteStream(Protocol):
    """Binary stream receiving selected pages."""

    def write(self, data: bytes, /) -> int:
        """Write bytes to the stream.

        Args:
            data: Payload to write.

        Returns:
            int: Number of bytes written.
        """

    def flush(self) -> None:
        """Flush buffered output."""
