# githelper/logging_config.py
"""
Logging helpers for the 'githelper' logger.

As a library, githelper only creates module loggers and never configures
logging on import. Applications (including the bundled CLI) opt in with
setup_logging().
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "githelper"

FORMATS = {
    "simple": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d]: %(message)s",
}

_DEFAULT_LOG_FILE = Path.home() / ".githelper" / "githelper.log"

# Marks handlers created here so repeated setup_logging() calls replace them
_HANDLER_ATTR = "_githelper_handler"


def get_log_file_path() -> Path:
    """Path used when setup_logging(file=True) is called without a filename."""
    return _DEFAULT_LOG_FILE


def setup_logging(
    level: str | int = "INFO",
    *,
    console: bool = True,
    file: bool | str | Path = False,
    format: str = "simple",
    format_string: str | None = None,
    propagate: bool = True,
) -> logging.Logger:
    """
    Configure the 'githelper' logger.

    Args:
        level: Logging level name or number
        console: Log to stderr
        file: True for the default log file, or a path
        format: "simple" or "detailed"; ignored if format_string is given
        format_string: Custom logging format string
        propagate: Whether records also reach the root logger. Set False if
            the root logger has handlers and you see duplicate lines.

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_own_handlers(logger)

    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    logger.propagate = propagate
    logger.disabled = False

    if format_string is None:
        if format not in FORMATS:
            raise ValueError(f"Unknown log format '{format}' (expected one of {sorted(FORMATS)})")
        format_string = FORMATS[format]
    formatter = logging.Formatter(format_string)

    if console:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    if file:
        path = get_log_file_path() if file is True else Path(file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    logger.debug(f"Logging configured (level={logging.getLevelName(logger.level)}, file={file})")
    return logger


def disable_logging() -> None:
    """Silence githelper entirely. Useful in tests."""
    logger = logging.getLogger(LOGGER_NAME)
    _remove_own_handlers(logger)
    logger.disabled = True


def _remove_own_handlers(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        if getattr(h, _HANDLER_ATTR, False):
            logger.removeHandler(h)
            h.close()
