from __future__ import annotations

"""
Configuration Validation Service.

Converts untrusted configuration data (JSON files, CLI overrides) into an
immutable Config. Missing keys take domain defaults; malformed values are
coerced where the intent is unambiguous and otherwise replaced by their
default with a warning. Strict mode turns every such warning into an error.
"""

import logging
from typing import Any, Dict, List, Tuple

from flexlog.domain.models import (
    Color,
    Config,
    ConsoleLog,
    FileLog,
    LogColors,
    LogContent,
    LogLevel,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Config, List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Args:
        config: Raw configuration data (usually parsed JSON).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Config, List[str]]: The resulting configuration and a list of
                                  warnings describing every fallback taken.

    Raises:
        TypeError: In strict mode, when a value has the wrong type.
        ValueError: In strict mode, when a value names an unknown level,
                    color or content kind.
    """
    warnings: List[str] = []
    defaults = Config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    # 2. Top-level fields
    content_order = _as_content_order(
        config.get("content_order"), defaults.content_order, warnings, strict
    )
    min_level = _as_level(
        config.get("min_level"), defaults.min_level, "min_level", warnings, strict
    )

    # 3. Sink sections
    console_raw = _as_section(config.get("console"), "console", warnings, strict)
    console = ConsoleLog(
        enabled=_as_bool(
            console_raw.get("enabled"), defaults.console.enabled,
            "console.enabled", warnings, strict
        ),
        colors=_as_colors(console_raw.get("colors"), warnings, strict),
        bold_text=_as_bool(
            console_raw.get("bold_text"), defaults.console.bold_text,
            "console.bold_text", warnings, strict
        ),
    )

    file_raw = _as_section(config.get("file"), "file", warnings, strict)
    file_log = FileLog(
        enabled=_as_bool(
            file_raw.get("enabled"), defaults.file.enabled,
            "file.enabled", warnings, strict
        ),
        path=_as_str(
            file_raw.get("path"), defaults.file.path, "file.path", warnings, strict
        ),
    )

    return Config(
        content_order=content_order,
        console=console,
        file=file_log,
        min_level=min_level,
    ), warnings


def config_to_dict(config: Config) -> Dict[str, Any]:
    """
    Serialize a Config into the JSON-compatible schema accepted by
    ``validate_config``.
    """
    colors = config.console.colors
    return {
        "content_order": [kind.value for kind in config.content_order],
        "min_level": config.min_level.name.lower(),
        "console": {
            "enabled": config.console.enabled,
            "bold_text": config.console.bold_text,
            "colors": {
                level.name.lower(): colors.color_for(level).name.lower()
                for level in LogLevel
            },
        },
        "file": {
            "enabled": config.file.enabled,
            "path": config.file.path,
        },
    }


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _fail(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> None:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_section(value: Any, field: str, warnings: List[str], strict: bool) -> Dict[str, Any]:
    """Ensure a nested section is a dictionary."""
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    _fail(
        f"Invalid section '{field}': expected dict, received {type(value).__name__}.",
        warnings, strict
    )
    return {}


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    _fail(
        f"Invalid field '{field}': expected str, received {type(value).__name__}.",
        warnings, strict
    )
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        # Support numeric coercion (0/1)
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        # Support string coercion (human-friendly keywords)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _fail(
        f"Invalid field '{field}': expected bool, received {type(value).__name__}.",
        warnings, strict
    )
    return fallback


def _as_level(value: Any, fallback: LogLevel, field: str, warnings: List[str], strict: bool) -> LogLevel:
    """Resolve a severity name."""
    if value is None:
        return fallback
    if isinstance(value, LogLevel):
        return value
    if not isinstance(value, str):
        _fail(
            f"Invalid field '{field}': expected str, received {type(value).__name__}.",
            warnings, strict
        )
        return fallback
    try:
        return LogLevel.parse(value)
    except ValueError:
        _fail(f"Invalid field '{field}': unknown level '{value}'.", warnings, strict, ValueError)
        return fallback


def _as_content_order(
        value: Any,
        fallback: Tuple[LogContent, ...],
        warnings: List[str],
        strict: bool,
) -> Tuple[LogContent, ...]:
    """
    Resolve the ordered content list.

    An explicitly empty list is kept as-is and renders an empty line. CSV
    strings are accepted for CLI compatibility.
    """
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        value = [x.strip() for x in value.split(",") if x.strip()]

    if not isinstance(value, (list, tuple)):
        _fail(
            f"Invalid field 'content_order': expected list[str], received {type(value).__name__}.",
            warnings, strict
        )
        return fallback

    out: List[LogContent] = []
    for i, item in enumerate(value):
        if isinstance(item, LogContent):
            out.append(item)
            continue
        try:
            out.append(LogContent(str(item).strip().lower()))
        except ValueError:
            msg = f"Invalid item in 'content_order[{i}]': unknown content kind '{item}'."
            if strict:
                raise ValueError(msg) from None
            warnings.append(f"{msg} Item discarded.")
    return tuple(out)


def _as_colors(value: Any, warnings: List[str], strict: bool) -> LogColors:
    """Build a color table from a {level: color} mapping."""
    section = _as_section(value, "console.colors", warnings, strict)
    overrides: Dict[str, Color] = {}

    for raw_level, raw_color in section.items():
        try:
            level = LogLevel.parse(raw_level)
        except ValueError:
            _fail(
                f"Invalid key in 'console.colors': unknown level '{raw_level}'.",
                warnings, strict, ValueError
            )
            continue
        try:
            overrides[level.name.lower()] = (
                raw_color if isinstance(raw_color, Color) else Color.parse(raw_color)
            )
        except ValueError:
            _fail(
                f"Invalid color for 'console.colors.{raw_level}': '{raw_color}'.",
                warnings, strict, ValueError
            )

    return LogColors(**overrides)
