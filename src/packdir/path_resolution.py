"""Source/output path derivation and startup validation."""

from __future__ import annotations

import logging
import os
import unicodedata
from pathlib import Path

from .constants import ARCHIVE_SUFFIX
from .errors import PackdirError, SourceNotFoundError
from .models import InvocationOptions, ParsedArgs

logger = logging.getLogger(__name__)


def resolve_invocation_options(
    *,
    parsed_args: ParsedArgs,
    working_dir_abs: Path,
) -> InvocationOptions:
    if not working_dir_abs.is_absolute():
        raise PackdirError("Working directory must be an absolute path.")
    if parsed_args.source_raw is None:
        raise PackdirError("Source path is missing.")

    source_dir_abs = map_path_argument(
        raw_path=parsed_args.source_raw,
        working_dir_abs=working_dir_abs,
    )
    if not source_dir_abs.is_dir():
        raise SourceNotFoundError(source_dir_abs)
    if parsed_args.include_root and not source_dir_abs.name:
        raise PackdirError(
            f"Cannot nest entries under {source_dir_abs}; it has no folder name."
        )

    output_path_abs = derive_output_path(
        output_raw=parsed_args.output_raw,
        source_dir_abs=source_dir_abs,
        working_dir_abs=working_dir_abs,
    )

    return InvocationOptions(
        source_dir_abs=source_dir_abs,
        output_path_abs=output_path_abs,
        include_root=parsed_args.include_root,
        force=parsed_args.force,
    )


def map_path_argument(*, raw_path: str, working_dir_abs: Path) -> Path:
    """Map a raw CLI path to an absolute, normalized path.

    Absolute paths are kept, ``~`` expands to the home directory, and
    everything else is joined onto ``working_dir_abs``.
    """
    normalized_input = unicodedata.normalize("NFC", raw_path.strip())
    if "\0" in normalized_input:
        raise PackdirError(f"Path contains NUL (\\0): {raw_path!r}")

    mapped = Path(normalized_input)
    if normalized_input.startswith("~"):
        try:
            mapped = mapped.expanduser()
        except RuntimeError as exc:
            raise PackdirError(
                f"Failed to expand user home in path: {raw_path}"
            ) from exc

    if not mapped.is_absolute():
        mapped = working_dir_abs / mapped
    # Lexical normalization: a symlinked folder keeps its own name.
    return Path(os.path.normpath(mapped))


def derive_output_path(
    *,
    output_raw: str | None,
    source_dir_abs: Path,
    working_dir_abs: Path,
) -> Path:
    if output_raw is None:
        candidate = working_dir_abs / _default_archive_name(source_dir_abs)
        logger.debug("No output given; defaulting to %s", candidate)
    else:
        if not os.path.dirname(output_raw.strip()):
            # A bare filename is valid and lands in the working directory.
            logger.debug("Output %r has no directory part; using %s", output_raw, working_dir_abs)
        candidate = map_path_argument(raw_path=output_raw, working_dir_abs=working_dir_abs)

    if candidate.is_dir():
        candidate = candidate / _default_archive_name(source_dir_abs)
        logger.debug("Output names a directory; writing %s", candidate)

    return ensure_archive_suffix(Path(os.path.normpath(candidate)))


def ensure_archive_suffix(path: Path) -> Path:
    if path.name.lower().endswith(ARCHIVE_SUFFIX):
        return path
    return path.with_name(f"{path.name}{ARCHIVE_SUFFIX}")


def _default_archive_name(source_dir_abs: Path) -> str:
    if not source_dir_abs.name:
        raise PackdirError(
            f"Cannot derive an archive name from {source_dir_abs}; pass -o/--output."
        )
    return f"{source_dir_abs.name}{ARCHIVE_SUFFIX}"
