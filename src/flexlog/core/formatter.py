from __future__ import annotations

"""
Log Line Formatter.

Renders a LogRecord into the text written by a sink. Segments are composed
in the order given by the configuration; console output is wrapped in an
ANSI color sequence while file output stays plain.
"""

from datetime import datetime
from typing import List, Optional

from flexlog.domain.constants import (
    ANSI_BOLD,
    ANSI_ESCAPE,
    ANSI_REGULAR,
    ANSI_RESET,
    TIMESTAMP_FORMAT,
)
from flexlog.domain.models import (
    CallSite,
    Config,
    LogContent,
    LogLevel,
    LogRecord,
    Output,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_message(
        level: LogLevel,
        message: str,
        call_site: CallSite,
        config: Config,
        target: Output,
        now: Optional[datetime] = None,
) -> str:
    """
    Render a single log line for the given sink target.

    Args:
        level: Severity of the event.
        message: Message body.
        call_site: Origin of the call.
        config: Active configuration (content order, colors, bold flag).
        target: Sink the line is destined for.
        now: Moment to render in the timestamp segment. Defaults to the
            current local time.

    Returns:
        str: The rendered line, without a line terminator.
    """
    record = LogRecord(level=level, message=message, call_site=call_site, timestamp=now)
    return format_record(record, config, target)


def format_record(record: LogRecord, config: Config, target: Output) -> str:
    """
    Render a record for the given sink target.

    Args:
        record: The event to render.
        config: Active configuration.
        target: Sink the line is destined for.

    Returns:
        str: The rendered line, without a line terminator.
    """
    timestamp = record.timestamp or datetime.now()

    parts: List[str] = []
    for kind in config.content_order:
        parts.append(_render_segment(kind, record, timestamp))
    line = "".join(parts)

    if target is Output.CONSOLE:
        return _colorize(line, record.level, config)
    return line

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_segment(kind: LogContent, record: LogRecord, timestamp: datetime) -> str:
    """Render one content kind, including its trailing separator."""
    if kind is LogContent.TIMESTAMP:
        return f"[{timestamp.strftime(TIMESTAMP_FORMAT)}] "
    if kind is LogContent.LEVEL:
        return f"[{_level_label(record.level)}] "
    if kind is LogContent.LOCATION:
        site = record.call_site
        return f"[{site.file}:{site.line} ({site.function})] "
    return f"{record.message} "


def _level_label(level: LogLevel) -> str:
    try:
        return LogLevel(level).label
    except ValueError:
        return "UNKNOWN"


def _colorize(line: str, level: LogLevel, config: Config) -> str:
    """Wrap a line in the SGR sequence for the level's configured color."""
    weight = ANSI_BOLD if config.console.bold_text else ANSI_REGULAR
    color = config.console.colors.color_for(level)
    return f"{ANSI_ESCAPE}{weight};{color.sgr_code}m{line}{ANSI_RESET}"
