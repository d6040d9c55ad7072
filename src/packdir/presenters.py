"""User-facing text rendering."""

from __future__ import annotations

from .constants import ERROR_PREFIX
from .models import ArchiveResult


def render_error(message: str) -> str:
    return f"{ERROR_PREFIX} {message}"


def render_created(result: ArchiveResult) -> list[str]:
    return [
        "Archived "
        f"{result.file_count} file(s) and "
        f"{result.empty_directory_count} empty directory(s).",
        f"Created zip: {result.zip_path}",
    ]
