"""Single-pass page range selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from selpg import logger
from selpg.typing.enums import DelimiterMode

if TYPE_CHECKING:
    from selpg.processing.segmentation import DelimitedReader
    from selpg.typing.models import SelectionRequest

FORM_FEED = DelimiterMode.FORM_FEED.delimiter
NEWLINE = DelimiterMode.LINES.delimiter


@dataclass
class PageCursor:
    """Page and line counters for one scan, both 1-based."""

    page: int = 1
    line: int = 1

    def in_range(self, start_page: int, end_page: int) -> bool:
        """Return whether the current page lies in `[start_page, end_page)`."""
        return start_page <= self.page < end_page

    def advance_page(self) -> None:
        """Move to the next page."""
        self.page += 1

    def advance_line(self, page_length: int) -> None:
        """Move to the next line, rolling over to a new page after `page_length` lines."""
        self.line += 1
        if self.line > page_length:
            self.line = 1
            self.page += 1


def select_form_feed_pages(reader: DelimitedReader, request: SelectionRequest) -> bytes:
    """Collect pages delimited by form feeds.

    Page `end_page` itself is read but never kept, and scanning stops as soon
    as the counter reaches it.

    Args:
        reader (DelimitedReader): Source reader.
        request (SelectionRequest): Validated request.

    Returns:
        bytes: Selected pages, form feeds included.
    """
    cursor = PageCursor()
    buffer = bytearray()
    while True:
        segment = reader.read_through(FORM_FEED)
        if cursor.in_range(request.start_page, request.end_page):
            buffer.extend(segment.data)
        cursor.advance_page()
        if cursor.page == request.end_page or segment.at_eof:
            break

    logger.debug("Form-feed scan finished", last_page=cursor.page, selected_bytes=len(buffer))
    return bytes(buffer)


def select_line_pages(reader: DelimitedReader, request: SelectionRequest) -> bytes:
    """Collect pages made of `page_length` lines.

    Args:
        reader (DelimitedReader): Source reader.
        request (SelectionRequest): Validated request.

    Returns:
        bytes: Selected lines, terminators included.
    """
    cursor = PageCursor()
    buffer = bytearray()
    while True:
        segment = reader.read_through(NEWLINE)
        if cursor.in_range(request.start_page, request.end_page):
            buffer.extend(segment.data)
        cursor.advance_line(request.page_length)
        if cursor.page == request.end_page or segment.at_eof:
            break

    logger.debug(
        "Line scan finished",
        last_page=cursor.page,
        last_line=cursor.line,
        selected_bytes=len(buffer),
    )
    return bytes(buffer)


def select_pages(reader: DelimitedReader, request: SelectionRequest) -> bytes:
    """Run the scan matching the request delimiter mode."""
    if request.delimited_by_form_feed:
        return select_form_feed_pages(reader, request)
    return select_line_pages(reader, request)
