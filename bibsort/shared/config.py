"""Configuration loading and validation for bibsort tools."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIG_PATH = Path.home() / ".bibsort" / "config.yaml"

logger = logging.getLogger(__name__)

LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')

# Defaults for the `output` section read by the CLI
OUTPUT_DEFAULTS = {
    'show_keys': False,
    'reverse': False,
    'color': True,
}


def load_config(
    required: bool = False,
    fallback: Optional[Dict[str, Any]] = None
) -> Optional[Dict[str, Any]]:
    """Load ~/.bibsort/config.yaml.

    Args:
        required: If True, exit with error when config is missing or unreadable.
        fallback: Default dict to return when config is missing and not required.

    Returns:
        Parsed config dict, fallback dict, or None if missing/invalid.
    """
    if not CONFIG_PATH.exists():
        if required:
            logger.error("Config file not found at %s", CONFIG_PATH)
            sys.exit(1)
        return fallback

    try:
        with open(CONFIG_PATH, encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        logger.error("Error reading config: %s", e)
        if required:
            sys.exit(1)
        return fallback

    if not isinstance(config, dict):
        logger.error("Config at %s must be a YAML mapping", CONFIG_PATH)
        if required:
            sys.exit(1)
        return fallback

    return config


def _issue(level: str, message: str) -> Dict[str, str]:
    return {'file': CONFIG_PATH.name, 'level': level, 'message': message}


def validate_config(config: Optional[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Check the sections bibsort reads.

    Returns:
        List of issue dicts with 'file', 'level' ('error'|'warning'), and
        'message' keys. Empty list means the config is usable as-is.
    """
    issues: List[Dict[str, str]] = []
    if not config:
        return issues

    log_config = config.get('logging')
    if log_config is not None:
        if not isinstance(log_config, dict):
            issues.append(_issue('error', "'logging' must be a mapping"))
        else:
            enabled = log_config.get('enabled', False)
            if not isinstance(enabled, bool):
                issues.append(_issue('error', "logging.enabled must be a boolean"))
            level = log_config.get('level', 'debug')
            if str(level).lower() not in LOG_LEVELS:
                issues.append(_issue(
                    'warning',
                    f"logging.level '{level}' is not one of {', '.join(LOG_LEVELS)}",
                ))
            log_file = log_config.get('file')
            if log_file is not None and (not isinstance(log_file, str) or not log_file.strip()):
                issues.append(_issue('error', "logging.file must be a non-empty path string"))
            for key in ('max_size_mb', 'backup_count'):
                value = log_config.get(key)
                if value is None:
                    continue
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    issues.append(_issue('error', f"logging.{key} must be an integer >= 0"))

    output = config.get('output')
    if output is not None:
        if not isinstance(output, dict):
            issues.append(_issue('error', "'output' must be a mapping"))
        else:
            for key, value in output.items():
                if key not in OUTPUT_DEFAULTS:
                    issues.append(_issue('warning', f"Unknown output option: {key}"))
                elif not isinstance(value, bool):
                    issues.append(_issue('error', f"output.{key} must be a boolean"))

    return issues


def output_settings(config: Optional[Dict[str, Any]]) -> Dict[str, bool]:
    """Merge the config's `output` section over OUTPUT_DEFAULTS.

    Values of the wrong type are ignored; validate_config() reports them.
    """
    settings = dict(OUTPUT_DEFAULTS)
    output = (config or {}).get('output')
    if isinstance(output, dict):
        for key in OUTPUT_DEFAULTS:
            if isinstance(output.get(key), bool):
                settings[key] = output[key]
    return settings
