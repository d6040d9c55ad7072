"""Zip writing helpers."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Iterable

from .constants import ZIP_COMPRESS_LEVEL, ZIP_COMPRESSION
from .errors import ArchiveError


def build_entry_names(
    *,
    files_rel: Iterable[Path],
    empty_directories_rel: Iterable[Path],
    root_name: str | None = None,
) -> tuple[list[tuple[Path, str]], list[str]]:
    """Map relative paths to zip entry names.

    With ``root_name`` every entry is nested under ``<root_name>/``; an
    otherwise empty rooted archive still gets the ``<root_name>/`` entry.
    """
    prefix = f"{root_name}/" if root_name else ""
    file_entries = [(rel_path, f"{prefix}{rel_path.as_posix()}") for rel_path in files_rel]
    directory_entries = [
        f"{prefix}{rel_path.as_posix().rstrip('/')}/" for rel_path in empty_directories_rel
    ]
    if prefix and not file_entries and not directory_entries:
        directory_entries.append(prefix)

    return file_entries, directory_entries


def write_archive_zip(
    *,
    source_dir_abs: Path,
    zip_path_abs: Path,
    files_rel: Iterable[Path],
    empty_directories_rel: Iterable[Path],
    root_name: str | None = None,
) -> tuple[int, int]:
    """Write a fresh deflate-compressed archive.

    Returns the number of file entries and directory entries written.
    """
    file_entries, directory_entries = build_entry_names(
        files_rel=files_rel,
        empty_directories_rel=empty_directories_rel,
        root_name=root_name,
    )

    try:
        with zipfile.ZipFile(
            zip_path_abs,
            mode="w",
            compression=ZIP_COMPRESSION,
            compresslevel=ZIP_COMPRESS_LEVEL,
            # Pre-1980 mtimes are clamped to 1980-01-01 instead of failing.
            strict_timestamps=False,
        ) as zf:
            for rel_path, entry_name in file_entries:
                file_abs = source_dir_abs / rel_path
                if not file_abs.is_file():
                    raise ArchiveError(f"File disappeared while archiving: {file_abs}")
                zf.write(file_abs, arcname=entry_name)

            for entry_name in directory_entries:
                zf.writestr(entry_name, data=b"")
    except OSError as exc:
        raise ArchiveError(f"Failed to write zip archive: {zip_path_abs}") from exc

    return len(file_entries), len(directory_entries)

