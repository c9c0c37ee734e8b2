from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration overrides.
2. Parsing of content lists and color pairs.
3. Rejection of malformed values.
"""

import pytest

from flexlog.domain.models import Color, LogContent, LogLevel
from flexlog.interface.cli.args import args_to_overrides, build_parser, split_message


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_no_flags_produce_no_overrides():
    args = parse_args(["hello"])

    assert args_to_overrides(args) == {}
    assert args.level == "info"
    assert split_message(args.message) == "hello"


def test_sink_flags_mapping():
    args = parse_args(["--no-console", "--bold", "--file", "/tmp/app.log", "msg"])

    overrides = args_to_overrides(args)

    assert overrides["console"] == {"enabled": False, "bold_text": True}
    assert overrides["file"] == {"enabled": True, "path": "/tmp/app.log"}


def test_content_and_level_parsing():
    args = parse_args(["--content", "timestamp, level,message", "--min-level", "WARNING", "-l", "ERROR", "x"])

    assert args.content_order == [LogContent.TIMESTAMP, LogContent.LEVEL, LogContent.MESSAGE]
    assert args.level == "error"

    overrides = args_to_overrides(args)
    assert overrides["content_order"] == ["timestamp", "level", "message"]
    assert overrides["min_level"] == "warning"


def test_repeated_color_pairs():
    args = parse_args(["--color", "info=red", "--color", "FATAL=White", "x"])

    assert args.colors == [(LogLevel.INFO, Color.RED), (LogLevel.FATAL, Color.WHITE)]
    assert args_to_overrides(args)["console"]["colors"] == {"info": "red", "fatal": "white"}


def test_message_words_are_joined():
    args = parse_args(["Warning:", "Low", "memory"])
    assert split_message(args.message) == "Warning: Low memory"


@pytest.mark.parametrize("bad", [
    ["--content", "level,pid", "x"],
    ["--color", "info", "x"],
    ["--color", "info=cyan", "x"],
    ["--level", "verbose", "x"],
])
def test_malformed_values_exit_with_usage_error(bad, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(bad)
    assert exc_info.value.code == 2
