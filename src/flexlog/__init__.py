from __future__ import annotations

"""
flexlog: configurable console and file logging.

Typical use::

    from flexlog import Config, FileLog, Logger

    log = Logger()
    config = Config(file=FileLog(enabled=True, path="app.log"))
    log.info("Starting application...", config)
"""

from flexlog.core.dispatcher import Logger, capture_call_site
from flexlog.core.formatter import format_message, format_record
from flexlog.core.latch import OneShotLatch
from flexlog.core.queue import QueuedLogger
from flexlog.core.validator import config_to_dict, validate_config
from flexlog.domain.config import get_default_config, load_config, save_config
from flexlog.domain.models import (
    CallSite,
    Color,
    Config,
    ConsoleLog,
    FileLog,
    LogColors,
    LogContent,
    LogLevel,
    LogRecord,
    Output,
)

__version__ = "1.0.0"

__all__ = [
    "CallSite",
    "Color",
    "Config",
    "ConsoleLog",
    "FileLog",
    "LogColors",
    "LogContent",
    "LogLevel",
    "LogRecord",
    "Logger",
    "OneShotLatch",
    "Output",
    "QueuedLogger",
    "capture_call_site",
    "config_to_dict",
    "format_message",
    "format_record",
    "get_default_config",
    "load_config",
    "save_config",
    "validate_config",
]
