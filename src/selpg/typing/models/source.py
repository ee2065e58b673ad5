"""Input source models."""

from __future__ import annotations

import sys
from contextlib import nullcontext
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from selpg.exceptions import InputSourceError

if TYPE_CHECKING:
    from contextlib import AbstractContextManager
    from typing import BinaryIO


class NamedFileSource(BaseModel):
    """Input read from a file on disk."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["file"] = "file"
    path: Path

    @property
    def drain_after_scan(self) -> bool:
        """Files are left unread past the selected range."""
        return False

    @property
    def label(self) -> str:
        """Return a human-readable source label."""
        return str(self.path)

    def open(self, stdin: BinaryIO | None = None) -> AbstractContextManager[BinaryIO]:  # noqa: ARG002
        """Open the file for binary reading.

        Args:
            stdin: Ignored for file sources.

        Raises:
            InputSourceError: If the file cannot be opened.

        Returns:
            AbstractContextManager[BinaryIO]: Context manager closing the file on exit.
        """
        try:
            return self.path.open("rb")
        except OSError as exc:
            raise InputSourceError(source=self.label, exc=exc) from exc


class StandardInputSource(BaseModel):
    """Input read from the process standard input."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["stdin"] = "stdin"

    @property
    def drain_after_scan(self) -> bool:
        """Upstream producers must not be left blocked on a full pipe."""
        return True

    @property
    def label(self) -> str:
        """Return a human-readable source label."""
        return "standard input"

    def open(self, stdin: BinaryIO | None = None) -> AbstractContextManager[BinaryIO]:
        """Return standard input without taking ownership of it.

        Args:
            stdin: Stream to use instead of `sys.stdin.buffer`.

        Returns:
            AbstractContextManager[BinaryIO]: Context manager that leaves the stream open.
        """
        return nullcontext(stdin if stdin is not None else sys.stdin.buffer)


InputSource = Annotated[NamedFileSource | StandardInputSource, Field(discriminator="kind")]
