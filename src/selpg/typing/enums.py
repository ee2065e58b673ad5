"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class DelimiterMode(_EnumMixin):
    """How page boundaries are detected in the input stream."""

    LINES = "lines"
    FORM_FEED = "form_feed"

    @property
    def delimiter(self) -> bytes:
        """Return the byte that terminates one scanned unit."""
        return b"\f" if self is DelimiterMode.FORM_FEED else b"\n"
