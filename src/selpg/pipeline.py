"""Selection orchestration: read, select, write, spool."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from selpg import logger
from selpg.exceptions import InputSourceError, OutputError
from selpg.logging import configure_logging
from selpg.processing.segmentation import DelimitedReader
from selpg.processing.selection import select_pages
from selpg.spooler import send_to_spooler

if TYPE_CHECKING:
    from typing import BinaryIO

    from selpg.settings import Settings
    from selpg.typing.models import SelectionRequest
    from selpg.typing.protocol import WritableByteStream


def read_selection(
    request: SelectionRequest,
    *,
    chunk_size: int,
    stdin: BinaryIO | None = None,
) -> bytes:
    """Scan the request source once and return the selected pages.

    When the source is standard input, the rest of it is consumed after the
    scan so that an upstream producer never blocks on a full pipe.

    Args:
        request (SelectionRequest): Validated request.
        chunk_size (int): Bytes requested per read.
        stdin (BinaryIO | None): Stream standing in for standard input.

    Raises:
        InputSourceError: If the source cannot be opened or read.

    Returns:
        bytes: Selected pages.
    """
    source = request.source
    with source.open(stdin) as stream:
        reader = DelimitedReader(stream, chunk_size=chunk_size, label=source.label)
        selected = select_pages(reader, request)
        if source.drain_after_scan and not reader.exhausted:
            discarded = reader.drain()
            logger.debug("Drained remaining input", discarded_bytes=discarded)
    return selected


def _silence_stdout() -> None:
    """Point the stdout descriptor at the null device so the exit-time flush cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def write_output(payload: bytes, stdout: WritableByteStream | None = None) -> None:
    """Write selected pages verbatim to standard output.

    Args:
        payload (bytes): Selected pages.
        stdout (WritableByteStream | None): Stream standing in for standard output.

    Raises:
        OutputError: If the write fails, for instance when the reader closed the pipe.
    """
    target = stdout if stdout is not None else sys.stdout.buffer
    try:
        target.write(payload)
        target.flush()
    except BrokenPipeError as exc:
        if stdout is None:
            _silence_stdout()
        raise OutputError(exc=exc) from exc
    except OSError as exc:
        raise OutputError(exc=exc) from exc


def run_selection(
    request: SelectionRequest,
    *,
    settings: Settings,
    stdin: BinaryIO | None = None,
    stdout: WritableByteStream | None = None,
) -> bytes:
    """Run one full selection pass.

    Args:
        request (SelectionRequest): Validated request.
        settings (Settings): Runtime settings.
        stdin (BinaryIO | None): Stream standing in for standard input.
        stdout (WritableByteStream | None): Stream standing in for standard output.

    Raises:
        InputSourceError: If the source cannot be opened or read.
        OutputError: If standard output cannot be written.
        SpoolerError: If forwarding to the spooler fails.

    Returns:
        bytes: Selected pages, as written to standard output.
    """
    configure_logging(settings=settings)
    logger.info(
        "Selecting pages",
        source=request.source.label,
        start_page=request.start_page,
        end_page=request.end_page,
        mode=request.mode.to_str(),
    )
    try:
        selected = read_selection(request, chunk_size=settings.read_chunk_size, stdin=stdin)
    except InputSourceError:
        raise
    except OSError as exc:
        raise InputSourceError(source=request.source.label, exc=exc) from exc

    write_output(selected, stdout)

    if request.destination:
        spooler_output = send_to_spooler(selected, request.destination, command=settings.spooler_command)
        if spooler_output:
            sys.stderr.write(spooler_output)
            sys.stderr.flush()

    return selected
