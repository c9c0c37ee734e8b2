from __future__ import annotations

"""
Deferred Logging Queue.

Collects records in memory and hands them to a Logger on demand. Records
keep the call site and timestamp of the moment they were queued, and are
flushed in the order they were queued.
"""

import threading
from collections import deque
from datetime import datetime
from typing import Deque, Optional, Tuple

from flexlog.core.dispatcher import Logger, capture_call_site
from flexlog.domain.models import CallSite, Config, LogLevel, LogRecord

_Entry = Tuple[LogRecord, Config]


class QueuedLogger:
    """
    Buffers records until ``flush`` is called.

    When ``maxsize`` is set, queuing into a full buffer flushes it first, so
    no record is ever dropped.
    """

    def __init__(self, logger: Logger, maxsize: Optional[int] = None) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be a positive integer, received {maxsize}.")
        self._logger = logger
        self._maxsize = maxsize
        self._entries: Deque[_Entry] = deque()
        self._lock = threading.RLock()

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._entries)

    def log(
            self,
            level: LogLevel,
            message: str,
            config: Config,
            call_site: Optional[CallSite] = None,
    ) -> None:
        """Queue a message at ``level``; see ``Logger.log``."""
        if call_site is None:
            call_site = capture_call_site(1)
        record = LogRecord(
            level=level,
            message=message,
            call_site=call_site,
            timestamp=datetime.now(),
        )
        with self._lock:
            if self._maxsize is not None and len(self._entries) >= self._maxsize:
                self._flush_locked()
            self._entries.append((record, config))

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

    def flush(self) -> int:
        """
        Dispatch every pending record in queue order.

        Returns:
            int: Number of records dispatched.
        """
        with self._lock:
            return self._flush_locked()

    def _flush_locked(self) -> int:
        # Records leave the queue one at a time; a failing dispatch keeps the rest pending.
        count = 0
        while self._entries:
            record, config = self._entries.popleft()
            self._logger.dispatch(record, config)
            count += 1
        return count
