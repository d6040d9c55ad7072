"""Filesystem traversal helpers."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import ArchiveError
from .models import ArchiveInventory


def collect_archive_inventory(
    *,
    source_dir_abs: Path,
    exclude_paths_abs: Iterable[Path] = (),
) -> ArchiveInventory:
    """Walk ``source_dir_abs`` depth-first and list what goes into the archive.

    Files (including symlinks to files) are archived by content. Directories
    without archivable children are listed as empty directories. Symlinks to
    directories and broken symlinks are not followed and are reported back.
    """
    excluded = {path.resolve(strict=False) for path in exclude_paths_abs}
    files_rel: list[Path] = []
    empty_directories_rel: list[Path] = []
    skipped_symlinks_rel: list[Path] = []

    def walk_dir(current_dir_abs: Path, current_rel: Path | None) -> bool:
        has_archivable_entries = False
        try:
            children = sorted(current_dir_abs.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise ArchiveError(f"Failed to read directory: {current_dir_abs}") from exc

        for child_abs in children:
            child_rel = (
                Path(child_abs.name)
                if current_rel is None
                else current_rel / child_abs.name
            )
            if child_abs.resolve(strict=False) in excluded:
                continue
            if child_abs.is_symlink() and not child_abs.is_file():
                skipped_symlinks_rel.append(child_rel)
                continue

            if child_abs.is_file():
                files_rel.append(child_rel)
                has_archivable_entries = True
                continue

            if child_abs.is_dir():
                if not walk_dir(child_abs, child_rel):
                    empty_directories_rel.append(child_rel)
                has_archivable_entries = True

        return has_archivable_entries

    walk_dir(source_dir_abs, current_rel=None)

    files_rel.sort(key=lambda p: p.as_posix())
    empty_directories_rel.sort(key=lambda p: p.as_posix())
    skipped_symlinks_rel.sort(key=lambda p: p.as_posix())

    return ArchiveInventory(
        files_rel=files_rel,
        empty_directories_rel=empty_directories_rel,
        skipped_symlinks_rel=skipped_symlinks_rel,
    )
