"""CLI entry and startup wiring."""

from __future__ import annotations

import sys
from pathlib import Path

from .archiver import create_archive
from .command_parser import parse_args
from .constants import EXIT_GENERIC_ERROR, EXIT_OK
from .errors import OverwriteDeclinedError, PackdirError
from .logging_setup import setup_logging
from .overwrite_guard import KeyReader, ensure_output_writable
from .path_resolution import resolve_invocation_options
from .presenters import render_created, render_error


def main(
    argv: list[str] | None = None,
    *,
    working_dir_abs: Path | None = None,
    read_key: KeyReader | None = None,
) -> int:
    setup_logging()
    args = argv if argv is not None else sys.argv[1:]

    try:
        parsed_args = parse_args(args)
        if parsed_args is None:
            return EXIT_OK

        options = resolve_invocation_options(
            parsed_args=parsed_args,
            working_dir_abs=working_dir_abs if working_dir_abs is not None else Path.cwd(),
        )
        ensure_output_writable(options, read_key=read_key)
        result = create_archive(options)
    except OverwriteDeclinedError as exc:
        return exc.exit_code
    except PackdirError as exc:
        print(render_error(str(exc)), file=sys.stderr)
        return exc.exit_code
    except Exception as exc:
        print(render_error(str(exc) or type(exc).__name__), file=sys.stderr)
        return EXIT_GENERIC_ERROR

    for line in render_created(result):
        print(line)
    return EXIT_OK
