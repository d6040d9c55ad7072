"""Literal constants used by packdir."""

import zipfile

APP_NAME = "packdir"

ARCHIVE_SUFFIX = ".zip"
ZIP_COMPRESSION = zipfile.ZIP_DEFLATED
# Balanced speed/size level for deflate (zlib default).
ZIP_COMPRESS_LEVEL = 6

EXIT_OK = 0
EXIT_GENERIC_ERROR = 1
EXIT_MISSING_SOURCE = 2
EXIT_SOURCE_NOT_FOUND = 3
EXIT_OVERWRITE_DECLINED = 4

ERROR_PREFIX = "ERROR:"
WARNING_PREFIX = "WARNING:"
LOG_FORMAT = "%(levelname)s: %(message)s"

OVERWRITE_ACCEPT_KEYS = frozenset({"y", "Y"})
ABORTED_MESSAGE = "Aborted by user."

USAGE_TEXT = """\
packdir - pack a folder into a zip archive

Usage:
  packdir -s <source-folder> [-o <output-zip>] [--include-root] [--force]
  packdir -h | --help

Options:
  -s, --source <path>   Folder to pack. Relative paths resolve against the
                        current directory; ~ expands to the home directory.
  -o, --output <path>   Output zip file path or filename. If it names an
                        existing directory, <folder>.zip is created inside it.
                        If omitted, <folder>.zip in the current directory.
                        .zip is appended when missing.
      --include-root    Nest all entries under a top-level directory named
                        after the source folder (default: off).
      --force           Overwrite an existing output zip without prompting.
  -h, --help            Show this help message and exit.

Options also accept the inline form, e.g. -o=out.zip or --source=assets.

Exit codes:
  0  success (or help shown)
  1  unexpected error
  2  source folder not given
  3  source folder not found
  4  overwrite declined

Examples:
  packdir -s assets/textures
  packdir -s assets/textures -o textures.zip
  packdir -s assets/textures -o ../artifacts/Textures.zip --include-root --force
"""
