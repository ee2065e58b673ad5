"""Pytest marker auto-assignment by folder and shared input fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from selpg import logger
from selpg.logging import configure_logging
from selpg.settings import Settings


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@pytest.fixture
def line_file(tmp_path: Path) -> Path:
    """150 lines holding the numbers 1 to 150."""
    path = tmp_path / "test-pageLength"
    path.write_bytes(b"".join(f"{number}\n".encode() for number in range(1, 151)))
    return path


@pytest.fixture
def form_feed_file(tmp_path: Path) -> Path:
    """Five form-feed terminated pages holding the numbers 1 to 5."""
    path = tmp_path / "test-formFeed"
    path.write_bytes(b"".join(f"{number}\f".encode() for number in range(1, 6)))
    return path


@pytest.fixture(autouse=True, scope="session")
def _stderr_logging() -> None:
    """Route package logs to stderr before any test logs."""
    configure_logging(settings=Settings(), force=True)
