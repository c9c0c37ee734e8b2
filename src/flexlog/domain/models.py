from __future__ import annotations

"""
Logging Domain Models.

Defines the closed enumerations (severity, color, content kind, sink target)
and the immutable value objects that travel through a logging call: the
call site, the per-call record and the caller-owned configuration.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional, Tuple

from flexlog.domain.constants import DEFAULT_LOG_FILE

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class LogLevel(IntEnum):
    """Severity classes, ordered from least to most important."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        """Uppercase name rendered in the level segment."""
        return self.name

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """
        Resolve a level from its case-insensitive name.

        Accepts 'warning' and 'critical' as aliases of WARN and FATAL.

        Raises:
            ValueError: If the name matches no level.
        """
        key = str(value).strip().upper()
        key = _LEVEL_ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: '{value}'") from None


_LEVEL_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


class Color(Enum):
    """Supported console colors; the value is the ANSI SGR foreground code."""

    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    WHITE = 37

    @property
    def sgr_code(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, value: str) -> "Color":
        """
        Resolve a color from its case-insensitive name.

        Raises:
            ValueError: If the name matches no supported color.
        """
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unsupported color: '{value}'") from None


class LogContent(Enum):
    """Selectable segments of a rendered log line."""

    TIMESTAMP = "timestamp"
    LEVEL = "level"
    LOCATION = "location"
    MESSAGE = "message"


class Output(Enum):
    """Closed set of sink targets."""

    CONSOLE = "console"
    FILE = "file"

# -----------------------------------------------------------------------------
# PER-CALL VALUE OBJECTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CallSite:
    """
    Source location a log call originates from.

    Attributes:
        file: Path of the calling source file.
        line: Line number of the call.
        function: Name of the enclosing function.
    """
    file: str
    line: int
    function: str


@dataclass(frozen=True)
class LogRecord:
    """
    A single log event.

    Attributes:
        level: Severity of the event.
        message: Message body, rendered verbatim.
        call_site: Origin of the call.
        timestamp: Moment of the event. None defers capture to format time.
    """
    level: LogLevel
    message: str
    call_site: CallSite
    timestamp: Optional[datetime] = None

# -----------------------------------------------------------------------------
# CONFIGURATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LogColors:
    """Level to color table used by the console sink."""
    trace: Color = Color.WHITE
    debug: Color = Color.GREEN
    info: Color = Color.BLUE
    warn: Color = Color.YELLOW
    error: Color = Color.MAGENTA
    fatal: Color = Color.RED

    def color_for(self, level: LogLevel) -> Color:
        """Return the color mapped to ``level``, WHITE when unmapped."""
        name = getattr(level, "name", "")
        color = getattr(self, str(name).lower(), None)
        return color if isinstance(color, Color) else Color.WHITE


@dataclass(frozen=True)
class ConsoleLog:
    """
    Console sink settings.

    Attributes:
        enabled: Write records to standard output.
        colors: Level to color table.
        bold_text: Use the bold SGR attribute instead of regular weight.
    """
    enabled: bool = True
    colors: LogColors = field(default_factory=LogColors)
    bold_text: bool = False


@dataclass(frozen=True)
class FileLog:
    """
    File sink settings.

    Attributes:
        enabled: Append records to ``path``.
        path: Destination file, opened in append mode on every call.
    """
    enabled: bool = False
    path: str = DEFAULT_LOG_FILE


@dataclass(frozen=True)
class Config:
    """
    Caller-owned logging configuration.

    Read-only during a logging call, so one instance can be shared freely
    between threads.

    Attributes:
        content_order: Segments to render, left to right. Absent kinds are
            not rendered.
        console: Console sink settings.
        file: File sink settings.
        min_level: Records below this severity are discarded.
    """
    content_order: Tuple[LogContent, ...] = (LogContent.LEVEL, LogContent.MESSAGE)
    console: ConsoleLog = field(default_factory=ConsoleLog)
    file: FileLog = field(default_factory=FileLog)
    min_level: LogLevel = LogLevel.TRACE
