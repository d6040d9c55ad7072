"""Shared fixtures for packdir tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def proj_dir(tmp_path: Path) -> Path:
    """Source folder ``proj/`` holding ``a.txt`` and ``sub/b.txt``."""
    source_dir = tmp_path / "proj"
    (source_dir / "sub").mkdir(parents=True)
    (source_dir / "a.txt").write_text("alpha", encoding="utf-8")
    (source_dir / "sub" / "b.txt").write_text("bravo", encoding="utf-8")
    return source_dir


@pytest.fixture(autouse=True)
def reset_packdir_logging() -> Iterator[None]:
    """Drop handlers main() attached so they never outlive a captured stream."""
    yield
    app_logger = logging.getLogger("packdir")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
