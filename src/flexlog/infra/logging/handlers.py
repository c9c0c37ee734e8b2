from __future__ import annotations

"""
Diagnostics Handlers and Tagging Utilities.

Provides the handler factories used by ``configure_logging`` and the tag
that lets the package tell its own handlers apart from handlers installed
by the host application.
"""

import logging
import os
import sys
from typing import Optional

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_flexlog_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by flexlog."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries the flexlog tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_stream_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Build a tagged stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh


def _create_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
) -> Optional[logging.FileHandler]:
    """
    Build a tagged append-mode file handler.

    Args:
        log_file: Target path for the diagnostics file.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        Optional[logging.FileHandler]: Configured handler or None if I/O fails.
    """
    try:
        _ensure_parent_dir(log_file)
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setLevel(level_int)
        fh.setFormatter(formatter)
        _tag_handler(fh)
        return fh
    except OSError as e:
        sys.stderr.write(f"WARNING: Diagnostics file unavailable at '{log_file}': {e}\n")
        return None


def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
