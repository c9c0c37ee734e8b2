from __future__ import annotations

"""
Configuration Persistence.

Loads and stores logging configurations as JSON documents. Loading never
fails hard: a missing or corrupt file yields the default configuration and
a logged warning.
"""

import json
import logging
import os
from typing import Any, Dict, List, Tuple

from flexlog.core.validator import config_to_dict, validate_config
from flexlog.domain.constants import FILE_ENCODING
from flexlog.domain.models import Config

logger = logging.getLogger(__name__)


def get_default_config() -> Config:
    """Return the default configuration: level and message, console only."""
    return Config()


def load_config(path: str) -> Config:
    """
    Load a configuration from a JSON file.

    Args:
        path: Location of the JSON document.

    Returns:
        Config: The parsed configuration, or the defaults if the file is
                missing or unreadable.
    """
    config, warnings = load_config_with_warnings(path)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")
    return config


def load_config_with_warnings(path: str, *, strict: bool = False) -> Tuple[Config, List[str]]:
    """
    Load a configuration and report every fallback taken.

    Args:
        path: Location of the JSON document.
        strict: Forwarded to ``validate_config``.

    Returns:
        Tuple[Config, List[str]]: Configuration and warnings.
    """
    if not os.path.exists(path):
        logger.info(f"Configuration file '{path}' not found. Using defaults.")
        return get_default_config(), []

    try:
        with open(path, "r", encoding=FILE_ENCODING) as f:
            raw: Any = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read configuration '{path}': {e}. Using defaults.")
        return get_default_config(), [f"Unreadable configuration file '{path}'."]

    return validate_config(raw, strict=strict)


def save_config(config: Config, path: str) -> None:
    """
    Persist a configuration as JSON.

    Raises:
        OSError: If the file cannot be written.
    """
    data: Dict[str, Any] = config_to_dict(config)
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding=FILE_ENCODING) as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    logger.debug(f"Configuration saved to '{path}'.")
