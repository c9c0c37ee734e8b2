from __future__ import annotations

"""
Diagnostics Logging Orchestrator.

Maintains the idempotent lifecycle of the handlers that carry flexlog's own
diagnostics. Handlers are attached to the root logger so that the host
application's log level and formatting policy stay in control.
"""

import logging
from typing import List

from flexlog.infra.logging.config import _LEVEL_MAP, LoggingConfig
from flexlog.infra.logging.handlers import (
    _create_file_handler,
    _create_stream_handler,
    _is_our_handler,
)

# Internal state flag for idempotency tracking
_CONFIGURED_FLAG_ATTR: str = "_flexlog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the root logger.

    Args:
        cfg: Structural configuration for the diagnostics logger.
        force: If True, bypass the idempotency check and re-create handlers.

    Returns:
        logging.Logger: The configured root logger.
    """
    root = logging.getLogger()

    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    # Cleanup existing infrastructure to prevent handler leakage
    _remove_our_handlers(root)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(
            _create_stream_handler(level_int, logging.Formatter(cfg.console_fmt))
        )

    if cfg.log_file:
        fh = _create_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
        )
        if fh:
            handlers_list.append(fh)

    for handler in handlers_list:
        root.addHandler(handler)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance.

    Args:
        name: Hierarchical name for the logger (usually __name__).
    """
    return logging.getLogger(name)


def reset_logging() -> None:
    """Detach every flexlog handler and clear the configured flag."""
    root = logging.getLogger()
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close all flexlog-managed handlers."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
