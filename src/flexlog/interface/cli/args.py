from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides expressed in the JSON schema understood by the
configuration validator.
"""

import argparse
from typing import Any, Dict, List, Optional, Tuple

from flexlog.domain.models import Color, LogContent, LogLevel

_LEVEL_CHOICES = [level.name.lower() for level in LogLevel] + ["warning"]

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the flexlog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="flexlog",
        description="Format a message and write it to the console and/or a log file.",
    )

    p.add_argument(
        "message",
        nargs="*",
        help="Message body. Multiple words are joined with spaces.",
    )
    p.add_argument(
        "-l", "--level",
        default="info",
        type=str.lower,
        choices=_LEVEL_CHOICES,
        help="Severity of the message (default: info).",
    )

    # --- Configuration Sources ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore --config and start from the built-in defaults.",
    )

    # --- Content Selection ---
    p.add_argument(
        "--content",
        dest="content_order",
        type=_parse_content_csv,
        default=None,
        help="Comma-separated segments in render order: timestamp,level,location,message.",
    )
    p.add_argument(
        "--min-level",
        dest="min_level",
        type=str.lower,
        choices=_LEVEL_CHOICES,
        default=None,
        help="Discard messages below this severity.",
    )

    # --- Console Sink ---
    p.add_argument(
        "--no-console",
        action="store_true",
        help="Disable console output.",
    )
    p.add_argument(
        "--bold",
        action="store_true",
        help="Render console output in bold.",
    )
    p.add_argument(
        "--color",
        dest="colors",
        action="append",
        type=_parse_color_pair,
        default=None,
        metavar="LEVEL=COLOR",
        help="Override the console color of a level. Repeatable.",
    )

    # --- File Sink ---
    p.add_argument(
        "--file",
        dest="file_path",
        default=None,
        help="Append the message to this file (enables the file sink).",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate diagnostics verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Nested overrides; only explicitly set options appear.
    """
    overrides: Dict[str, Any] = {}
    console: Dict[str, Any] = {}
    file_section: Dict[str, Any] = {}

    if args.content_order is not None:
        overrides["content_order"] = [kind.value for kind in args.content_order]
    if args.min_level:
        overrides["min_level"] = args.min_level

    if args.no_console:
        console["enabled"] = False
    if args.bold:
        console["bold_text"] = True
    if args.colors:
        console["colors"] = {level.name.lower(): color.name.lower() for level, color in args.colors}

    if args.file_path:
        file_section["enabled"] = True
        file_section["path"] = args.file_path

    if console:
        overrides["console"] = console
    if file_section:
        overrides["file"] = file_section

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _parse_content_csv(value: str) -> List[LogContent]:
    """Convert 'level,message' into content kinds."""
    parts = [x.strip().lower() for x in value.split(",") if x.strip()]
    try:
        return [LogContent(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid content list '{value}' "
            f"(choose from {', '.join(k.value for k in LogContent)})"
        ) from None


def _parse_color_pair(value: str) -> Tuple[LogLevel, Color]:
    """Convert 'info=blue' into a (level, color) pair."""
    level_name, sep, color_name = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected LEVEL=COLOR, received '{value}'")
    try:
        return LogLevel.parse(level_name), Color.parse(color_name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def split_message(words: Optional[List[str]]) -> str:
    """Join positional message words."""
    return " ".join(words or [])
