"""Page scanning helpers."""

from selpg.processing.segmentation import DelimitedReader, Segment
from selpg.processing.selection import PageCursor, select_form_feed_pages, select_line_pages, select_pages

__all__ = [
    "DelimitedReader",
    "PageCursor",
    "Segment",
    "select_form_feed_pages",
    "select_line_pages",
    "select_pages",
]
