from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Defaults for missing keys.
2. Lenient coercion with warnings.
3. Strict mode error propagation.
"""

import pytest

from flexlog.core.validator import config_to_dict, validate_config
from flexlog.domain.models import (
    Color,
    Config,
    ConsoleLog,
    FileLog,
    LogColors,
    LogContent,
    LogLevel,
)


def test_empty_dict_yields_defaults():
    config, warnings = validate_config({})
    assert config == Config()
    assert warnings == []


def test_full_document_is_parsed():
    raw = {
        "content_order": ["timestamp", "LEVEL", "location", "message"],
        "min_level": "warning",
        "console": {"enabled": True, "bold_text": True, "colors": {"info": "red", "fatal": "White"}},
        "file": {"enabled": True, "path": "/var/log/app.log"},
    }

    config, warnings = validate_config(raw)

    assert warnings == []
    assert config.content_order == (
        LogContent.TIMESTAMP, LogContent.LEVEL, LogContent.LOCATION, LogContent.MESSAGE
    )
    assert config.min_level is LogLevel.WARN
    assert config.console == ConsoleLog(
        enabled=True, colors=LogColors(info=Color.RED, fatal=Color.WHITE), bold_text=True
    )
    assert config.file == FileLog(enabled=True, path="/var/log/app.log")


def test_explicit_empty_content_order_is_kept():
    config, warnings = validate_config({"content_order": []})
    assert config.content_order == ()
    assert warnings == []


def test_csv_content_order_is_accepted():
    config, _ = validate_config({"content_order": "level, message"})
    assert config.content_order == (LogContent.LEVEL, LogContent.MESSAGE)


def test_unknown_content_kind_is_discarded_with_warning():
    config, warnings = validate_config({"content_order": ["level", "hostname", "message"]})

    assert config.content_order == (LogContent.LEVEL, LogContent.MESSAGE)
    assert any("hostname" in w for w in warnings)


def test_boolean_strings_are_coerced():
    config, warnings = validate_config({"console": {"enabled": "no"}, "file": {"enabled": "yes"}})

    assert config.console.enabled is False
    assert config.file.enabled is True
    assert len(warnings) == 2


def test_invalid_values_fall_back_to_defaults():
    raw = {
        "min_level": "verbose",
        "console": {"colors": {"info": "cyan", "loud": "red"}},
        "file": {"path": 12},
    }

    config, warnings = validate_config(raw)

    assert config.min_level is LogLevel.TRACE
    assert config.console.colors == LogColors()
    assert config.file.path == "log.txt"
    assert len(warnings) == 4


def test_non_dict_input_yields_defaults():
    config, warnings = validate_config(["not", "a", "dict"])
    assert config == Config()
    assert "expected dict" in warnings[0]


def test_strict_mode_raises_on_type_errors():
    with pytest.raises(TypeError):
        validate_config({"console": {"bold_text": "maybe"}}, strict=True)
    with pytest.raises(TypeError):
        validate_config("config", strict=True)


def test_strict_mode_raises_on_unknown_names():
    with pytest.raises(ValueError):
        validate_config({"console": {"colors": {"info": "cyan"}}}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"content_order": ["level", "pid"]}, strict=True)


def test_serialized_config_validates_back_to_itself():
    original = Config(
        content_order=(LogContent.MESSAGE, LogContent.LEVEL),
        console=ConsoleLog(colors=LogColors(debug=Color.YELLOW)),
        file=FileLog(enabled=True, path="out.log"),
        min_level=LogLevel.DEBUG,
    )

    config, warnings = validate_config(config_to_dict(original), strict=True)

    assert config == original
    assert warnings == []
