"""Forwarding of selected pages to a print spooler."""

from __future__ import annotations

import subprocess  # noqa: S404

from selpg import logger
from selpg.exceptions import SpoolerError

DEFAULT_SPOOLER_COMMAND = "lp"


def build_spooler_command(destination: str, *, command: str = DEFAULT_SPOOLER_COMMAND) -> list[str]:
    """Return the spooler argv for a destination printer.

    Args:
        destination (str): Printer or queue name.
        command (str): Spooler executable.

    Returns:
        list[str]: Command line passed to `subprocess`.
    """
    return [command, "-d", destination]


def send_to_spooler(payload: bytes, destination: str, *, command: str = DEFAULT_SPOOLER_COMMAND) -> str:
    """Feed selected pages to the spooler and wait for it to finish.

    The whole payload is written before the spooler output is collected;
    stderr is merged into stdout.

    Args:
        payload (bytes): Selected pages.
        destination (str): Printer or queue name.
        command (str): Spooler executable.

    Raises:
        SpoolerError: If the spooler cannot start, its input breaks, or it exits non-zero.

    Returns:
        str: Combined spooler output.
    """
    argv = build_spooler_command(destination, command=command)
    logger.debug("Starting print spooler", argv=argv, payload_bytes=len(payload))

    try:
        process = subprocess.Popen(  # noqa: S603
            argv,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as exc:
        raise SpoolerError(message="cannot start print spooler", destination=destination, exc=exc) from exc

    try:
        output, _ = process.communicate(input=payload)
    except OSError as exc:
        process.kill()
        process.wait()
        raise SpoolerError(message="print spooler input failed", destination=destination, exc=exc) from exc
    finally:
        if process.stdin is not None and not process.stdin.closed:
            process.stdin.close()

    text = output.decode("utf-8", errors="replace") if output else ""
    if process.returncode != 0:
        raise SpoolerError(
            message=f"print spooler exited with status {process.returncode}",
            destination=destination,
            exc=RuntimeError(text.strip()) if text.strip() else None,
        )

    logger.debug("Print spooler finished", destination=destination)
    return text
