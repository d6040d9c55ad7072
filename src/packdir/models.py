"""Dataclasses shared across packdir layers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ParsedArgs:
    source_raw: str | None
    output_raw: str | None
    include_root: bool
    force: bool


@dataclass(frozen=True)
class InvocationOptions:
    source_dir_abs: Path
    output_path_abs: Path
    include_root: bool
    force: bool

    @property
    def root_name(self) -> str | None:
        """Top-level entry name in rooted mode, None in flat mode."""
        return self.source_dir_abs.name if self.include_root else None


@dataclass(frozen=True)
class ArchiveInventory:
    files_rel: list[Path]
    empty_directories_rel: list[Path]
    skipped_symlinks_rel: list[Path]


@dataclass(frozen=True)
class ArchiveResult:
    zip_path: Path
    file_count: int
    empty_directory_count: int
