"""selpg package."""

from selpg.exceptions import (
    ConflictingDelimitersError,
    DependencyError,
    EndBeforeStartError,
    InputSourceError,
    InvalidEndPageError,
    InvalidPageLengthError,
    InvalidStartPageError,
    OutputError,
    PackageError,
    SelectionError,
    SettingsError,
    SpoolerError,
    TooManyInputFilesError,
)
from selpg.logging import configure_logging, get_logger
from selpg.settings import Settings, get_settings

__version__ = "0.1.0"

# Lazy proxy; nothing is configured until `configure_logging` runs.
logger = get_logger("selpg")

__all__ = [
    "ConflictingDelimitersError",
    "DependencyError",
    "EndBeforeStartError",
    "InputSourceError",
    "InvalidEndPageError",
    "InvalidPageLengthError",
    "InvalidStartPageError",
    "OutputError",
    "PackageError",
    "SelectionError",
    "Settings",
    "SettingsError",
    "SpoolerError",
    "TooManyInputFilesError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
