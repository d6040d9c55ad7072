from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from packdir.errors import ArchiveError
from packdir.zip_gateway import build_entry_names, write_archive_zip


def test_build_entry_names_prefixes_root_name() -> None:
    file_entries, directory_entries = build_entry_names(
        files_rel=[Path("a.txt"), Path("sub/b.txt")],
        empty_directories_rel=[Path("empty")],
        root_name="proj",
    )

    assert [name for _, name in file_entries] == ["proj/a.txt", "proj/sub/b.txt"]
    assert directory_entries == ["proj/empty/"]


def test_build_entry_names_empty_rooted_archive_keeps_root_entry() -> None:
    file_entries, directory_entries = build_entry_names(
        files_rel=[],
        empty_directories_rel=[],
        root_name="proj",
    )

    assert file_entries == []
    assert directory_entries == ["proj/"]



def test_write_archive_zip_uses_deflate(proj_dir: Path, tmp_path: Path) -> None:
    zip_path = tmp_path / "out.zip"

    counts = write_archive_zip(
        source_dir_abs=proj_dir,
        zip_path_abs=zip_path,
        files_rel=[Path("a.txt"), Path("sub/b.txt")],
        empty_directories_rel=[],
    )

    assert counts == (2, 0)
    with zipfile.ZipFile(zip_path) as zf:
        assert {info.compress_type for info in zf.infolist()} == {zipfile.ZIP_DEFLATED}
        assert zf.read("sub/b.txt") == b"bravo"


def test_write_archive_zip_reports_vanished_files(tmp_path: Path) -> None:
    source_dir = tmp_path / "source"
    source_dir.mkdir()

    with pytest.raises(ArchiveError, match="File disappeared"):
        write_archive_zip(
            source_dir_abs=source_dir,
            zip_path_abs=tmp_path / "out.zip",
            files_rel=[Path("gone.txt")],
            empty_directories_rel=[],
        )
