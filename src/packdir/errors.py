"""Typed exceptions for packdir."""

from __future__ import annotations

from .constants import (
    EXIT_GENERIC_ERROR,
    EXIT_MISSING_SOURCE,
    EXIT_OVERWRITE_DECLINED,
    EXIT_SOURCE_NOT_FOUND,
)


class PackdirError(Exception):
    """Base exception for packdir failures."""

    exit_code = EXIT_GENERIC_ERROR


class MissingSourceError(PackdirError):
    """Raised when -s/--source is absent or blank."""

    exit_code = EXIT_MISSING_SOURCE


class SourceNotFoundError(PackdirError):
    """Raised when the source path is not an existing directory."""

    exit_code = EXIT_SOURCE_NOT_FOUND

    def __init__(self, source_dir_abs: object) -> None:
        super().__init__(f"source folder not found: {source_dir_abs}")


class OverwriteDeclinedError(PackdirError):
    """Raised when the user does not confirm replacing an existing archive."""

    exit_code = EXIT_OVERWRITE_DECLINED


class ArchiveError(PackdirError):
    """Raised for filesystem or zip failures while archiving."""
