from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: diagnostics bootstrap, resolution of the
configuration hierarchy (defaults, JSON file, command-line overrides) and
dispatch of a single message through a Logger.
"""

import json
import sys
from typing import Any, Dict, List, Optional, Tuple

from flexlog.core.dispatcher import Logger
from flexlog.core.validator import config_to_dict, validate_config
from flexlog.domain.config import get_default_config, load_config_with_warnings
from flexlog.domain.models import Config, LogLevel
from flexlog.infra.logging import LoggingConfig, configure_logging, get_logger
from flexlog.interface.cli import args as cli_args

logger = get_logger(__name__)

# Validator warnings with this prefix report an accepted conversion, not a rejected value
_COERCION_PREFIX = "Field '"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, log: Optional[Logger] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        log: Logger used for the message. A new one is created when omitted.

    Returns:
        int: Process exit code (0 for success, 2 for usage errors or invalid
             configuration values).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Diagnostics bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Configuration hierarchy: defaults < JSON file < CLI overrides
    config, rejected = _resolve_config(args)
    if rejected:
        print(
            f"ERROR: configuration file '{args.config_path}' has {len(rejected)} invalid value(s).",
            file=sys.stderr,
        )
        return 2

    if args.dump_config:
        print(json.dumps(config_to_dict(config), ensure_ascii=False, indent=2))
        return 0

    message = cli_args.split_message(args.message)
    if not message:
        print("ERROR: a message is required unless --dump-config is given.", file=sys.stderr)
        return 2

    # 4. Dispatch
    (log or Logger()).log(LogLevel.parse(args.level), message, config)
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _resolve_config(args: Any) -> Tuple[Config, List[str]]:
    """
    Load the base configuration and apply command-line overrides.

    Returns:
        Tuple[Config, List[str]]: The merged configuration and the warnings
                                  of the configuration file that reject a
                                  value. Type coercions are not rejections.
    """
    rejected: List[str] = []
    if args.use_defaults or not args.config_path:
        base = get_default_config()
    else:
        base, warnings = load_config_with_warnings(args.config_path)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
            if not w.startswith(_COERCION_PREFIX):
                rejected.append(w)

    overrides = cli_args.args_to_overrides(args)
    if not overrides:
        return base, rejected

    merged, warnings = validate_config(_merge_config(config_to_dict(base), overrides))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")
    return merged, rejected


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge overrides into the base dictionary, one level deep for sink
    sections.
    """
    out = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            section = dict(out[key])
            for sub_key, sub_value in value.items():
                if isinstance(sub_value, dict) and isinstance(section.get(sub_key), dict):
                    section[sub_key] = {**section[sub_key], **sub_value}
                else:
                    section[sub_key] = sub_value
            out[key] = section
        else:
            out[key] = value
    return out
