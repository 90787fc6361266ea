"""
Logging for ngxconf.

Modules log through children of the "ngxconf" logger and never install
handlers themselves. Callers that want to see parser diagnostics either
configure the standard logging tree or call setup_logging().
"""

import logging
from dataclasses import dataclass
from typing import TextIO

ROOT_LOGGER_NAME = "ngxconf"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "WARNING"
    stream: TextIO | None = None  # sys.stderr when None
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Handlers left by an earlier call are replaced.

    Args:
        config: Logging configuration (uses defaults if None)

    Returns:
        The configured "ngxconf" logger
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(get_log_level(config.level))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(config.stream)
    handler.setFormatter(logging.Formatter(config.format, config.date_format))
    root_logger.addHandler(handler)
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with ngxconf)

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
