from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a fixed clock, a call site, stream-capturing loggers.
"""

import io
import os
import sys
from datetime import datetime

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from flexlog.core.dispatcher import Logger  # noqa: E402
from flexlog.domain.models import CallSite, Config, ConsoleLog  # noqa: E402
from flexlog.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fixed_now() -> datetime:
    """A deterministic moment used for timestamp assertions."""
    return datetime(2024, 5, 17, 9, 30, 5)


@pytest.fixture
def call_site() -> CallSite:
    return CallSite(file="src/app.py", line=42, function="run")


@pytest.fixture
def file_only_config() -> Config:
    """Default content order with the console sink disabled."""
    return Config(console=ConsoleLog(enabled=False))


@pytest.fixture
def out_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def err_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(out_stream: io.StringIO, err_stream: io.StringIO, tmp_path) -> Logger:
    """
    Logger writing to in-memory streams, with its fallback file inside the
    test's temporary directory.
    """
    return Logger(
        stream=out_stream,
        error_stream=err_stream,
        fallback_path=str(tmp_path / "log.txt"),
    )


@pytest.fixture
def clean_diagnostics():
    """Detach flexlog diagnostics handlers before and after a test."""
    reset_logging()
    yield
    reset_logging()
