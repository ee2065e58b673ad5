"""CLI entry point for selpg."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING, Any

from selpg import __version__, logger
from selpg.dependencies import ensure_spooler_available
from selpg.exceptions import PackageError
from selpg.logging import configure_logging
from selpg.pipeline import run_selection
from selpg.settings import get_settings
from selpg.typing.models import UNSET_PAGE, RawOptions
from selpg.validation import validate_options

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import BinaryIO

    from selpg.typing.protocol import WritableByteStream

USAGE = "selpg --s startPage --e endPage [ --f | --l pageLength] [--d destination] [inputFile]"


class _PageLengthAction(argparse.Action):
    """Store `--l` and remember that it was given explicitly."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,  # noqa: ARG002
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,  # noqa: ARG002
    ) -> None:
        setattr(namespace, self.dest, values)
        namespace.page_length_explicit = True


def build_parser(*, default_page_length: int = 72) -> argparse.ArgumentParser:
    """Create the command-line parser.

    Args:
        default_page_length (int): Value of `--l` when it is omitted.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="selpg",
        usage=USAGE,
        description="Select a range of pages from a text stream.",
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--s",
        type=int,
        default=UNSET_PAGE,
        dest="start_page",
        metavar="int",
        help="first page to be printed",
    )
    parser.add_argument(
        "--e",
        type=int,
        default=UNSET_PAGE,
        dest="end_page",
        metavar="int",
        help="first page not printed after several continuous printed pages",
    )
    parser.add_argument("--f", action="store_true", dest="form_feed", help="delimit pages by form feeds")
    parser.add_argument(
        "--l",
        type=int,
        default=default_page_length,
        dest="page_length",
        metavar="int",
        action=_PageLengthAction,
        help=f"number of lines per page (default {default_page_length})",
    )
    parser.add_argument("--d", default="", dest="destination", metavar="string", help="destination printer")
    parser.add_argument("positional", nargs="*", metavar="inputFile", help="file to read (default: stdin)")
    parser.set_defaults(page_length_explicit=False)
    return parser


def _build_raw_options(args: argparse.Namespace, raw_args: Sequence[str]) -> RawOptions:
    """Build raw options from parsed CLI arguments.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        raw_args (Sequence[str]): Unparsed argument tokens.

    Returns:
        RawOptions: Flat options record.
    """
    return RawOptions(
        start_page=args.start_page,
        end_page=args.end_page,
        page_length=args.page_length,
        form_feed=args.form_feed,
        page_length_explicit=getattr(args, "page_length_explicit", False),
        destination=args.destination,
        positional=list(args.positional),
        raw_args=list(raw_args),
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: WritableByteStream | None = None,
) -> int:
    """Run the CLI.

    Args:
        argv (Sequence[str] | None): Arguments, `sys.argv[1:]` when omitted.
        stdin (BinaryIO | None): Stream standing in for standard input.
        stdout (WritableByteStream | None): Stream standing in for standard output.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    try:
        settings = get_settings()
    except PackageError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    configure_logging(settings=settings)

    raw_args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser(default_page_length=settings.default_page_length)
    args = parser.parse_intermixed_args(raw_args)

    try:
        request = validate_options(
            _build_raw_options(args, raw_args),
            default_page_length=settings.default_page_length,
        )
        if request.destination:
            ensure_spooler_available(settings.spooler_command)
        run_selection(request, settings=settings, stdin=stdin, stdout=stdout)
    except PackageError as exc:
        logger.error(str(exc), error_type=type(exc).__name__)
        return 1
    except KeyboardInterrupt:
        logger.info("Selection aborted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error during selection")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
