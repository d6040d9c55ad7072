from __future__ import annotations

import pytest

from packdir.command_parser import parse_args
from packdir.errors import MissingSourceError
from packdir.models import ParsedArgs


def test_parse_args_reads_next_token_values_and_flags() -> None:
    parsed = parse_args(["-s", "proj", "-o", "out.zip", "--include-root", "--force"])

    assert parsed == ParsedArgs(
        source_raw="proj",
        output_raw="out.zip",
        include_root=True,
        force=True,
    )


def test_parse_args_reads_inline_values() -> None:
    parsed = parse_args(["--source=assets/textures", "-o=../artifacts/t.zip"])

    assert parsed is not None
    assert parsed.source_raw == "assets/textures"
    assert parsed.output_raw == "../artifacts/t.zip"
    assert parsed.include_root is False
    assert parsed.force is False


def test_parse_args_inline_value_keeps_later_equals_signs() -> None:
    parsed = parse_args(["-s=a=b"])

    assert parsed is not None
    assert parsed.source_raw == "a=b"


def test_parse_args_matches_flags_case_insensitively() -> None:
    parsed = parse_args(["-S", "proj", "--OUTPUT", "x.zip", "--Include-Root", "--FORCE"])

    assert parsed == ParsedArgs(
        source_raw="proj",
        output_raw="x.zip",
        include_root=True,
        force=True,
    )


def test_parse_args_ignores_unknown_tokens() -> None:
    parsed = parse_args(["--verbose", "-s", "proj", "extra"])

    assert parsed is not None
    assert parsed.source_raw == "proj"


def test_parse_args_blank_output_means_default() -> None:
    parsed = parse_args(["-s", "proj", "-o", "  "])

    assert parsed is not None
    assert parsed.output_raw is None


@pytest.mark.parametrize(
    "argv",
    [
        ["--force"],
        ["-s"],
        ["-s="],
        ["--source", "   "],
    ],
)
def test_parse_args_requires_source(argv: list[str]) -> None:
    with pytest.raises(MissingSourceError, match="source folder is required"):
        parse_args(argv)


@pytest.mark.parametrize("argv", [[], ["-h"], ["--help"], ["-s", "proj", "-H"]])
def test_parse_args_help_prints_usage_and_returns_none(
    argv: list[str],
    capsys: pytest.CaptureFixture[str],
) -> None:
    result = parse_args(argv)

    assert result is None
    out = capsys.readouterr().out
    assert "packdir -s <source-folder> [-o <output-zip>] [--include-root] [--force]" in out
