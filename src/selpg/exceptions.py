"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class DependencyError(PackageError):
    """Raised when an external runtime command is missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


class SelectionError(PackageError):
    """Raised when command-line options do not form a valid selection."""

    message = "Invalid selection"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"selpg: {self.message}"


@dataclass(frozen=True)
class InvalidStartPageError(SelectionError):
    """Raised when the start page is missing or lower than 1."""

    start_page: int
    message: str = "Valid start page number does not exist."


@dataclass(frozen=True)
class InvalidEndPageError(SelectionError):
    """Raised when the end page is missing or lower than 1."""

    end_page: int
    message: str = "Valid end page number does not exist."


@dataclass(frozen=True)
class EndBeforeStartError(SelectionError):
    """Raised when the end page precedes the start page."""

    start_page: int
    end_page: int
    message: str = "The end page number should be not smaller than the start page number."


@dataclass(frozen=True)
class InvalidPageLengthError(SelectionError):
    """Raised when the page length is lower than 1."""

    page_length: int
    message: str = "Invalid page length."


@dataclass(frozen=True)
class ConflictingDelimitersError(SelectionError):
    """Raised when both form-feed and line-count delimiting are requested."""

    message: str = "Only one way of delimiting pages can be chosen."


@dataclass(frozen=True)
class TooManyInputFilesError(SelectionError):
    """Raised when more than one input file is given."""

    paths: tuple[str, ...]
    message: str = "There should be at most one input file."


@dataclass(frozen=True)
class InputSourceError(PackageError):
    """Raised when the input source cannot be opened or read."""

    source: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        base = f"selpg: cannot read {self.source}"
        return f"{base}: {self.exc}" if self.exc else base


@dataclass(frozen=True)
class SpoolerError(PackageError):
    """Raised when the print spooler cannot be fed or fails."""

    message: str
    destination: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        base = f"selpg: {self.message} (destination '{self.destination}')"
        return f"{base}: {self.exc}" if self.exc else base


@dataclass(frozen=True)
class OutputError(PackageError):
    """Raised when selected pages cannot be written to standard output."""

    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        base = "selpg: cannot write to standard output"
        return f"{base}: {self.exc}" if self.exc else base
