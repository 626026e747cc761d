"""Logging configuration for bibsort tools."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from bibsort.shared.colors import Colors

DEFAULT_LOG_FILE = "~/.bibsort/logs/debug.log"

# Names accepted for `logging.level`, case-insensitive
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Set once the root logger has a file handler
_file_logging_configured = False


class ColorFormatter(logging.Formatter):
    """Prefixes each record with a colored level tag."""

    LEVEL_COLORS = {
        logging.DEBUG: ('CYAN', '[DEBUG]'),
        logging.INFO: ('GREEN', '[INFO]'),
        logging.WARNING: ('YELLOW', '[WARN]'),
        logging.ERROR: ('RED', '[ERROR]'),
        logging.CRITICAL: ('RED', '[CRITICAL]'),
    }

    def format(self, record):
        color_name, prefix = self.LEVEL_COLORS.get(record.levelno, ('NC', '[LOG]'))
        color = getattr(Colors, color_name, '')
        return f"{color}{prefix}{Colors.NC} {record.getMessage()}"


def setup_logging(name, verbose=False, quiet=False, config=None):
    """Configure the stderr logger for a tool.

    Args:
        name: Logger name. Use "bibsort" so every module logger under the
              package inherits the handler.
        verbose: Show DEBUG messages.
        quiet: Show only WARNING and above.
        config: Optional config dict; passed on to configure_file_logging().

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorFormatter())
        logger.addHandler(handler)

    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    if config is not None:
        configure_file_logging(config)

    return logger


def _file_settings(log_config):
    """Resolve the `logging` section into handler settings.

    Values of the wrong type fall back to their defaults; validate_config()
    is what reports them.
    """
    def _count(key, default):
        value = log_config.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return default
        return value

    level_name = log_config.get("level")
    if not isinstance(level_name, str) or level_name.upper() not in LEVELS:
        level_name = "debug"

    log_file = log_config.get("file")
    if not isinstance(log_file, str) or not log_file.strip():
        log_file = DEFAULT_LOG_FILE

    return {
        "level": LEVELS[level_name.upper()],
        "file": Path(os.path.expanduser(log_file)),
        "max_bytes": _count("max_size_mb", 5) * 1024 * 1024,
        "backup_count": _count("backup_count", 3),
    }


def configure_file_logging(config):
    """Attach a RotatingFileHandler to the root logger if config enables it.

    Reads the 'logging' section of the config:

        logging:
          enabled: true
          level: debug
          file: ~/.bibsort/logs/debug.log
          max_size_mb: 5
          backup_count: 3

    Only a literal `enabled: true` turns it on. A log file that cannot be
    created is reported as a warning and leaves stderr logging as the only
    output.

    Returns:
        The new handler, or None when file logging is off, failed, or was
        already set up.
    """
    global _file_logging_configured

    if not config:
        return None

    log_config = config.get("logging")
    if not isinstance(log_config, dict) or log_config.get("enabled") is not True:
        return None

    if _file_logging_configured:
        return None

    settings = _file_settings(log_config)
    log_file = settings["file"]
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=settings["max_bytes"],
            backupCount=settings["backup_count"],
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger("bibsort").warning("File logging disabled, cannot open %s: %s", log_file, e)
        return None

    # Plain text, no ANSI codes in the file
    handler.setLevel(settings["level"])
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > settings["level"]:
        root.setLevel(settings["level"])

    _file_logging_configured = True
    logging.getLogger("bibsort").debug(
        "File logging enabled: %s (level=%s)",
        log_file, logging.getLevelName(settings["level"]),
    )

    return handler
