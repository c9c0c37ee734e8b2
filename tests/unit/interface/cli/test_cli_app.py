from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Verifies configuration resolution (defaults, JSON file, overrides) and the
message dispatch performed by ``main``.
"""

import io
import json

import pytest

from flexlog.core.dispatcher import Logger
from flexlog.domain.config import save_config
from flexlog.domain.models import Config, ConsoleLog, LogContent
from flexlog.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def _reset(clean_diagnostics):
    yield


def test_message_is_logged_with_defaults():
    out = io.StringIO()

    code = main(["--use-defaults", "Starting", "application..."], log=Logger(stream=out))

    assert code == 0
    assert out.getvalue() == "\x1b[0;34m[INFO] Starting application... \x1b[0m\n"


def test_config_file_and_overrides_are_combined(tmp_path):
    cfg_path = tmp_path / "flexlog.json"
    save_config(Config(content_order=(LogContent.LEVEL,), console=ConsoleLog(bold_text=True)), str(cfg_path))
    log_file = tmp_path / "out.log"
    out = io.StringIO()

    code = main(
        ["-c", str(cfg_path), "-l", "warn", "--file", str(log_file), "--color", "warn=red", "msg"],
        log=Logger(stream=out),
    )

    assert code == 0
    assert out.getvalue() == "\x1b[1;31m[WARN] \x1b[0m\n"
    assert log_file.read_text(encoding="utf-8") == "[WARN] \n"


def test_dump_config_prints_resolved_json(capsys):
    code = main(["--use-defaults", "--bold", "--content", "message", "--dump-config"])

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["content_order"] == ["message"]
    assert data["console"]["bold_text"] is True
    assert data["console"]["colors"]["info"] == "blue"


def test_missing_message_is_a_usage_error(capsys):
    assert main(["--use-defaults"]) == 2
    assert "message is required" in capsys.readouterr().err


def test_merge_config_is_one_level_deep_for_sections():
    base = {"console": {"enabled": True, "colors": {"info": "blue", "warn": "yellow"}}, "min_level": "trace"}
    overrides = {"console": {"colors": {"info": "red"}}, "min_level": "error"}

    merged = _merge_config(base, overrides)

    assert merged == {
        "console": {"enabled": True, "colors": {"info": "red", "warn": "yellow"}},
        "min_level": "error",
    }
    assert base["console"]["colors"]["info"] == "blue"


def test_invalid_config_file_values_exit_with_usage_error(tmp_path, capsys):
    cfg_path = tmp_path / "flexlog.json"
    cfg_path.write_text(json.dumps({"console": {"colors": {"info": "cyan"}}}), encoding="utf-8")
    out = io.StringIO()

    code = main(["-c", str(cfg_path), "msg"], log=Logger(stream=out))

    assert code == 2
    assert out.getvalue() == ""
    assert "invalid value" in capsys.readouterr().err


def test_unreadable_config_file_exits_with_usage_error(tmp_path):
    cfg_path = tmp_path / "flexlog.json"
    cfg_path.write_text("{broken", encoding="utf-8")

    assert main(["-c", str(cfg_path), "--dump-config"]) == 2


def test_coerced_config_values_are_accepted(tmp_path):
    cfg_path = tmp_path / "flexlog.json"
    cfg_path.write_text(json.dumps({"console": {"bold_text": "yes"}}), encoding="utf-8")
    out = io.StringIO()

    code = main(["-c", str(cfg_path), "msg"], log=Logger(stream=out))

    assert code == 0
    assert out.getvalue() == "\x1b[1;34m[INFO] msg \x1b[0m\n"
