from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from selpg import pipeline
from selpg.exceptions import InputSourceError, OutputError, SpoolerError
from selpg.settings import Settings
from selpg.typing.enums import DelimiterMode
from selpg.typing.models import NamedFileSource, SelectionRequest

if TYPE_CHECKING:
    from pathlib import Path


def test_run_selection_reads_named_file(form_feed_file: Path) -> None:
    request = SelectionRequest(
        start_page=2,
        end_page=4,
        mode=DelimiterMode.FORM_FEED,
        source=NamedFileSource(path=form_feed_file),
    )
    stdout = io.BytesIO()

    selected = pipeline.run_selection(request, settings=Settings(), stdout=stdout)

    assert selected == b"2\f3\f"
    assert stdout.getvalue() == b"2\f3\f"


def test_run_selection_drains_standard_input() -> None:
    stdin = io.BytesIO(b"1\n2\n3\n4\n5\n")
    stdout = io.BytesIO()
    request = SelectionRequest(start_page=1, end_page=2, page_length=2)

    pipeline.run_selection(request, settings=Settings(), stdin=stdin, stdout=stdout)

    assert stdout.getvalue() == b"1\n2\n"
    assert stdin.read() == b""


def test_run_selection_leaves_named_file_unread_past_range(mocker, line_file: Path) -> None:
    drain = mocker.spy(pipeline.DelimitedReader, "drain")
    request = SelectionRequest(start_page=1, end_page=2, source=NamedFileSource(path=line_file))

    pipeline.run_selection(request, settings=Settings(), stdout=io.BytesIO())

    drain.assert_not_called()


def test_run_selection_reports_missing_file(tmp_path: Path) -> None:
    request = SelectionRequest(start_page=1, end_page=2, source=NamedFileSource(path=tmp_path / "nope.txt"))
    stdout = io.BytesIO()

    with pytest.raises(InputSourceError, match="nope.txt"):
        pipeline.run_selection(request, settings=Settings(), stdout=stdout)

    assert stdout.getvalue() == b""


def test_run_selection_forwards_to_spooler(mocker, capsys) -> None:
    spool = mocker.patch("selpg.pipeline.send_to_spooler", return_value="request id is office-7\n")
    request = SelectionRequest(start_page=1, end_page=2, page_length=1, destination="office")
    stdout = io.BytesIO()

    pipeline.run_selection(
        request,
        settings=Settings(spooler_command="lpr"),
        stdin=io.BytesIO(b"a\nb\n"),
        stdout=stdout,
    )

    assert stdout.getvalue() == b"a\n"
    spool.assert_called_once_with(b"a\n", "office", command="lpr")
    assert "office-7" in capsys.readouterr().err


def test_run_selection_writes_output_before_spooler_failure(mocker) -> None:
    mocker.patch(
        "selpg.pipeline.send_to_spooler",
        side_effect=SpoolerError(message="cannot start print spooler", destination="office"),
    )
    request = SelectionRequest(start_page=1, end_page=2, destination="office")
    stdout = io.BytesIO()

    with pytest.raises(SpoolerError):
        pipeline.run_selection(request, settings=Settings(), stdin=io.BytesIO(b"x\n"), stdout=stdout)

    assert stdout.getvalue() == b"x\n"


class _ClosedPipe:
    def __init__(self, error: OSError) -> None:
        self.error = error

    def write(self, data: bytes, /) -> int:
        _ = data
        raise self.error

    def flush(self) -> None:
        return None


@pytest.mark.parametrize("error", [BrokenPipeError(32, "Broken pipe"), OSError(28, "No space left on device")])
def test_write_output_wraps_write_failures(error: OSError) -> None:
    with pytest.raises(OutputError, match="cannot write to standard output"):
        pipeline.write_output(b"page\n", _ClosedPipe(error))


def test_write_output_silences_real_stdout_on_broken_pipe(mocker) -> None:
    silence = mocker.patch("selpg.pipeline._silence_stdout")
    stdout = mocker.patch("selpg.pipeline.sys.stdout")
    stdout.buffer.write.side_effect = BrokenPipeError(32, "Broken pipe")

    with pytest.raises(OutputError):
        pipeline.write_output(b"page\n")

    silence.assert_called_once_with()


def test_run_selection_skips_drain_when_input_already_ended(mocker) -> None:
    drain = mocker.spy(pipeline.DelimitedReader, "drain")
    request = SelectionRequest(start_page=1, end_page=10, page_length=1)

    pipeline.run_selection(request, settings=Settings(), stdin=io.BytesIO(b"a\nb\n"), stdout=io.BytesIO())

    drain.assert_not_called()
