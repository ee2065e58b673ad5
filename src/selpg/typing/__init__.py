"""Typing-centric domain modules."""

from selpg.typing.enums import DelimiterMode
from selpg.typing.models import (
    InputSource,
    NamedFileSource,
    RawOptions,
    SelectionRequest,
    StandardInputSource,
)
from selpg.typing.protocol import ReadableByteStream, WritableByteStream

__all__ = [
    "DelimiterMode",
    "InputSource",
    "NamedFileSource",
    "RawOptions",
    "ReadableByteStream",
    "SelectionRequest",
    "StandardInputSource",
    "WritableByteStream",
]
