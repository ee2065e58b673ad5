"""Core domain model exports."""

from selpg.typing.models.selection import DEFAULT_PAGE_LENGTH, UNSET_PAGE, RawOptions, SelectionRequest
from selpg.typing.models.source import InputSource, NamedFileSource, StandardInputSource

__all__ = [
    "DEFAULT_PAGE_LENGTH",
    "UNSET_PAGE",
    "InputSource",
    "NamedFileSource",
    "RawOptions",
    "SelectionRequest",
    "StandardInputSource",
]
