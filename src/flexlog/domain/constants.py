from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed values shared by the formatter, the dispatcher and
the configuration layer: ANSI control sequences, timestamp layout and the
fallback file destination.
"""

# -----------------------------------------------------------------------------
# ANSI TERMINAL CONTROL
# -----------------------------------------------------------------------------

ANSI_ESCAPE = "\x1b["
ANSI_RESET = "\x1b[0m"
ANSI_BOLD = "1"
ANSI_REGULAR = "0"

# -----------------------------------------------------------------------------
# FORMATTING
# -----------------------------------------------------------------------------

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LINE_TERMINATOR = "\n"

# -----------------------------------------------------------------------------
# FILE SINK
# -----------------------------------------------------------------------------

DEFAULT_LOG_FILE = "log.txt"
FILE_ENCODING = "utf-8"

OPEN_FAILURE_MESSAGE = (
    'Error opening file "{path}" for writing. '
    'Falling back to default "{fallback}".'
)
