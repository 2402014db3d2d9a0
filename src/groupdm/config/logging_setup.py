"""Logging setup for groupdm tools."""

import logging

from groupdm.config.models import LoggingConfig

logger = logging.getLogger(__name__)


def resolve_level(level: str | int) -> int:
    """Turn a level name or number into a logging level.

    Unknown names fall back to INFO.

    Args:
        level: Level name in any case (e.g. "debug") or a numeric level.

    Returns:
        Numeric logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(level.upper())
    if resolved is None:
        logger.warning("Unknown log level %r, using INFO", level)
        return logging.INFO
    return resolved


def configure_logging(config: LoggingConfig | None) -> None:
    """Apply a LoggingConfig to the root logger and named loggers.

    Existing root handlers get the configured format; no handler is added.

    Args:
        config: Logging configuration. None leaves logging untouched.
    """
    if config is None:
        return

    root = logging.getLogger()
    root.setLevel(resolve_level(config.level))

    formatter = logging.Formatter(config.format)
    for handler in root.handlers:
        handler.setFormatter(formatter)

    for name, level in (config.loggers or {}).items():
        logging.getLogger(name).setLevel(resolve_level(level))
        logger.debug("Logger %s set to %s", name, level)
