from __future__ import annotations

"""
Multi-Sink Dispatcher.

The Logger fans a record out to every sink enabled in the caller's
configuration. Console writes are serialized by a lock owned by the logger
instance; file writes follow an open-append-close cycle per call, serialized
per destination path. A file that cannot be opened is reported once on
standard error and the record is redirected to the fallback file.

A logging call never raises: sink failures degrade to missing or redirected
output and are reported through the package's internal logger.
"""

import logging
import os
import sys
import threading
from dataclasses import replace
from datetime import datetime
from typing import Dict, Optional, TextIO

from flexlog.core.formatter import format_record
from flexlog.core.latch import OneShotLatch
from flexlog.domain.constants import (
    DEFAULT_LOG_FILE,
    FILE_ENCODING,
    LINE_TERMINATOR,
    OPEN_FAILURE_MESSAGE,
)
from flexlog.domain.models import CallSite, Config, LogLevel, LogRecord, Output

logger = logging.getLogger(__name__)

# open() raises ValueError for embedded NUL bytes and TypeError for non-path values
_OPEN_ERRORS = (OSError, ValueError, TypeError)


class Logger:
    """
    Formats records and writes them to the configured sinks.

    Create one instance in the hosting application and pass it to the code
    that logs. All state is instance-scoped: the console lock, the per-path
    file locks and the open-failure latch.
    """

    def __init__(
            self,
            stream: Optional[TextIO] = None,
            error_stream: Optional[TextIO] = None,
            fallback_path: str = DEFAULT_LOG_FILE,
    ) -> None:
        """
        Args:
            stream: Console destination. Defaults to ``sys.stdout`` resolved
                at write time.
            error_stream: Destination of the open-failure diagnostic.
                Defaults to ``sys.stderr`` resolved at write time.
            fallback_path: File used when the configured file cannot be
                opened.
        """
        self._stream = stream
        self._error_stream = error_stream
        self._fallback_path = fallback_path

        self._console_lock = threading.Lock()
        self._file_locks: Dict[str, threading.Lock] = {}
        self._file_locks_guard = threading.Lock()
        self._open_failures = OneShotLatch()

    @property
    def fallback_path(self) -> str:
        return self._fallback_path

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def log(
            self,
            level: LogLevel,
            message: str,
            config: Config,
            call_site: Optional[CallSite] = None,
    ) -> None:
        """
        Log a message at ``level``.

        Args:
            level: Severity of the event.
            message: Message body.
            config: Caller-owned configuration; only read.
            call_site: Origin of the call. Captured from the caller's frame
                when omitted.
        """
        if call_site is None:
            call_site = capture_call_site(1)
        self.dispatch(LogRecord(level=level, message=message, call_site=call_site), config)

    def trace(self, message: str, config: Config) -> None:
        self.log(LogLevel.TRACE, message, config, capture_call_site(1))

    def debug(self, message: str, config: Config) -> None:
        self.log(LogLevel.DEBUG, message, config, capture_call_site(1))

    def info(self, message: str, config: Config) -> None:
        self.log(LogLevel.INFO, message, config, capture_call_site(1))

    def warn(self, message: str, config: Config) -> None:
        self.log(LogLevel.WARN, message, config, capture_call_site(1))

    warning = warn

    def error(self, message: str, config: Config) -> None:
        self.log(LogLevel.ERROR, message, config, capture_call_site(1))

    def fatal(self, message: str, config: Config) -> None:
        self.log(LogLevel.FATAL, message, config, capture_call_site(1))

    def dispatch(self, record: LogRecord, config: Config) -> None:
        """
        Write a record to every sink enabled in ``config``.

        Args:
            record: The event. A missing timestamp is captured once here so
                that all sinks render the same moment.
            config: Caller-owned configuration; only read.
        """
        if record.level < config.min_level:
            return

        if record.timestamp is None:
            record = replace(record, timestamp=datetime.now())

        if config.console.enabled:
            self._write_console(format_record(record, config, Output.CONSOLE))

        if config.file.enabled:
            self._write_file(config.file.path, format_record(record, config, Output.FILE))

    # -------------------------------------------------------------------------
    # CONSOLE SINK
    # -------------------------------------------------------------------------

    def _write_console(self, line: str) -> None:
        stream = sys.stdout if self._stream is None else self._stream
        try:
            with self._console_lock:
                stream.write(line + LINE_TERMINATOR)
                stream.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Console sink write failed: {e}")

    # -------------------------------------------------------------------------
    # FILE SINK
    # -------------------------------------------------------------------------

    def _write_file(self, path: str, line: str) -> None:
        """Append one line to ``path``, or to the fallback file if it cannot be opened."""
        target = path
        try:
            handle = open(path, "a", encoding=FILE_ENCODING)
        except _OPEN_ERRORS as e:
            self._report_open_failure(path, e)
            target = self._fallback_path
            try:
                handle = open(target, "a", encoding=FILE_ENCODING)
            except _OPEN_ERRORS as fallback_error:
                logger.error(f"Fallback log file '{target}' is unavailable: {fallback_error}")
                return

        try:
            with handle:
                with self._lock_for(target):
                    handle.write(line + LINE_TERMINATOR)
                    handle.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"File sink write to '{target}' failed: {e}")

    def _report_open_failure(self, path: str, error: Exception) -> None:
        """Emit the open-failure diagnostic, at most once per path."""
        logger.debug(f"Cannot open log file '{path}': {error}")
        if not self._open_failures.trip(path):
            return

        stream = sys.stderr if self._error_stream is None else self._error_stream
        msg = OPEN_FAILURE_MESSAGE.format(path=path, fallback=self._fallback_path)
        try:
            with self._console_lock:
                stream.write(msg + LINE_TERMINATOR)
                stream.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Diagnostic write failed: {e}")

    def _lock_for(self, path: str) -> threading.Lock:
        key = os.path.abspath(path)
        with self._file_locks_guard:
            lock = self._file_locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._file_locks[key] = lock
            return lock

# -----------------------------------------------------------------------------
# CALL-SITE CAPTURE
# -----------------------------------------------------------------------------

def capture_call_site(depth: int = 0) -> CallSite:
    """
    Describe the frame ``depth`` levels above the caller of this function.

    ``capture_call_site()`` returns the caller's own location;
    ``capture_call_site(1)`` returns the location of the caller's caller.
    """
    frame = sys._getframe(depth + 1)
    code = frame.f_code
    return CallSite(file=code.co_filename, line=frame.f_lineno, function=code.co_name)
