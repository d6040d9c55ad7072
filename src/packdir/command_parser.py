"""Command-line token parsing."""

from __future__ import annotations

from .constants import USAGE_TEXT
from .errors import MissingSourceError
from .models import ParsedArgs

_SOURCE_FLAGS = ("-s", "--source")
_OUTPUT_FLAGS = ("-o", "--output")
_HELP_FLAGS = ("-h", "--help")
_INCLUDE_ROOT_FLAG = "--include-root"
_FORCE_FLAG = "--force"


def parse_args(argv: list[str]) -> ParsedArgs | None:
    """Parse CLI tokens. Returns None if help was printed instead.

    Flag tokens match case-insensitively. Value options take either the next
    token (``-o out.zip``) or an inline value (``-o=out.zip``); the first
    matching token wins. Unrecognized tokens are ignored.
    """
    if not argv or _has_flag(argv, *_HELP_FLAGS):
        print(USAGE_TEXT, end="")
        return None

    source_raw = _get_option(argv, *_SOURCE_FLAGS)
    if source_raw is None or not source_raw.strip():
        raise MissingSourceError(
            "source folder is required. Use -s or --source to specify it."
        )

    output_raw = _get_option(argv, *_OUTPUT_FLAGS)
    if output_raw is not None and not output_raw.strip():
        output_raw = None

    return ParsedArgs(
        source_raw=source_raw,
        output_raw=output_raw,
        include_root=_has_flag(argv, _INCLUDE_ROOT_FLAG),
        force=_has_flag(argv, _FORCE_FLAG),
    )


def _get_option(argv: list[str], short_flag: str, long_flag: str) -> str | None:
    flags = (short_flag.casefold(), long_flag.casefold())
    for index, token in enumerate(argv):
        folded = token.casefold()
        if folded in flags:
            if index + 1 < len(argv):
                return argv[index + 1]
            return None

        name, sep, value = token.partition("=")
        if sep and name.casefold() in flags:
            return value

    return None


def _has_flag(argv: list[str], *flags: str) -> bool:
    wanted = {flag.casefold() for flag in flags}
    return any(token.casefold() in wanted for token in argv)
