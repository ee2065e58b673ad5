"""Validation of raw command-line options into a selection request."""

from __future__ import annotations

from pathlib import Path

from selpg.exceptions import (
    ConflictingDelimitersError,
    EndBeforeStartError,
    InvalidEndPageError,
    InvalidPageLengthError,
    InvalidStartPageError,
    TooManyInputFilesError,
)
from selpg.typing.enums import DelimiterMode
from selpg.typing.models import (
    DEFAULT_PAGE_LENGTH,
    InputSource,
    NamedFileSource,
    RawOptions,
    SelectionRequest,
    StandardInputSource,
)

PAGE_LENGTH_FLAG = "--l"


def _page_length_flag_present(raw_args: list[str]) -> bool:
    """Return whether `--l` appears verbatim or in `--l=N` form."""
    return any(token == PAGE_LENGTH_FLAG or token.startswith(f"{PAGE_LENGTH_FLAG}=") for token in raw_args)


def _resolve_source(positional: list[str]) -> InputSource:
    """Map leftover positional tokens to an input source.

    Args:
        positional (list[str]): Non-flag arguments.

    Raises:
        TooManyInputFilesError: If more than one path was given.

    Returns:
        InputSource: File source for one path, standard input otherwise.
    """
    if len(positional) > 1:
        raise TooManyInputFilesError(paths=tuple(positional))
    if positional:
        return NamedFileSource(path=Path(positional[0]))
    return StandardInputSource()


def validate_options(options: RawOptions, *, default_page_length: int = DEFAULT_PAGE_LENGTH) -> SelectionRequest:
    """Validate raw options and build an immutable selection request.

    Checks run in a fixed order and the first failure is raised. No I/O is
    performed here.

    Args:
        options (RawOptions): Parsed command-line options.
        default_page_length (int): Page length assumed when `--l` is absent.

    Raises:
        InvalidStartPageError: If the start page is lower than 1.
        InvalidEndPageError: If the end page is lower than 1.
        EndBeforeStartError: If the end page precedes the start page.
        InvalidPageLengthError: If the page length is lower than 1.
        ConflictingDelimitersError: If `--f` is combined with a page length.
        TooManyInputFilesError: If more than one input path remains.

    Returns:
        SelectionRequest: Validated request.
    """
    if options.start_page < 1:
        raise InvalidStartPageError(start_page=options.start_page)
    if options.end_page < 1:
        raise InvalidEndPageError(end_page=options.end_page)
    if options.end_page < options.start_page:
        raise EndBeforeStartError(start_page=options.start_page, end_page=options.end_page)
    if options.page_length < 1:
        raise InvalidPageLengthError(page_length=options.page_length)
    if options.form_feed and (
        options.page_length != default_page_length
        or options.page_length_explicit
        or _page_length_flag_present(options.raw_args)
    ):
        raise ConflictingDelimitersError

    source = _resolve_source(options.positional)

    return SelectionRequest(
        start_page=options.start_page,
        end_page=options.end_page,
        page_length=options.page_length,
        mode=DelimiterMode.FORM_FEED if options.form_feed else DelimiterMode.LINES,
        destination=options.destination or None,
        source=source,
    )
