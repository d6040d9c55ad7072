"""Archive workflow orchestration."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ArchiveError
from .fs_gateway import collect_archive_inventory
from .models import ArchiveResult, InvocationOptions
from .zip_gateway import write_archive_zip

logger = logging.getLogger(__name__)


def create_archive(options: InvocationOptions) -> ArchiveResult:
    """Pack ``options.source_dir_abs`` into ``options.output_path_abs``.

    Flat mode stores the folder's contents at the archive root. Rooted mode
    nests every entry under ``<source folder name>/``. Any existing file at the
    output path is replaced; a partially written archive is removed on failure.
    """
    zip_path = options.output_path_abs
    inventory = collect_archive_inventory(
        source_dir_abs=options.source_dir_abs,
        exclude_paths_abs=[zip_path],
    )
    for symlink_rel in inventory.skipped_symlinks_rel:
        logger.warning("Skipped symlink: %s", symlink_rel)

    _remove_existing_output(zip_path)
    try:
        file_count, directory_count = write_archive_zip(
            source_dir_abs=options.source_dir_abs,
            zip_path_abs=zip_path,
            files_rel=inventory.files_rel,
            empty_directories_rel=inventory.empty_directories_rel,
            root_name=options.root_name,
        )
    except Exception:
        _discard_partial_output(zip_path)
        raise

    return ArchiveResult(
        zip_path=zip_path,
        file_count=file_count,
        empty_directory_count=directory_count,
    )


def _remove_existing_output(zip_path: Path) -> None:
    try:
        zip_path.unlink(missing_ok=True)
    except OSError as exc:
        raise ArchiveError(f"Failed to remove existing archive: {zip_path}") from exc


def _discard_partial_output(zip_path: Path) -> None:
    # Never raises: the archive failure is what gets reported.
    try:
        zip_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Failed to remove partial archive %s: %s", zip_path, exc)
