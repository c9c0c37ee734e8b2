# tests/test_imports_smoke.py
# -----------------------------------------------------------------------------
# Smoke tests for the public package surface.
# -----------------------------------------------------------------------------

from __future__ import annotations

import flexlog


def test_public_api_contract():
    for name in flexlog.__all__:
        assert hasattr(flexlog, name), f"flexlog missing: {name}"


def test_version_is_declared():
    assert flexlog.__version__ == "1.0.0"
