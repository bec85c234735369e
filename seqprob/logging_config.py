"""Centralized logging configuration for seqprob.

Library modules only ask for loggers through ``get_logger``; handlers are
installed by the application that embeds seqprob, by calling
``configure_logging`` once at startup.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False
_log_file: Optional[Path] = None
_log_level: int = logging.INFO


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    force: bool = False,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level as int or name (e.g. "DEBUG")
        log_file: Optional path to a log file. If None, logs go to STDERR
        log_format: Format string for log messages
        date_format: Format string for timestamps
        force: If True, reconfigure even if already configured
    """
    global _configured, _log_file, _log_level

    level = _coerce_level(level)

    if _configured and not force:
        return

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format, datefmt=date_format)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode="a")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    _configured = True
    _log_file = Path(log_file) if log_file else None
    _log_level = level


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (usually ``__name__``)."""
    return logging.getLogger(name)


def is_configured() -> bool:
    """Return True once configure_logging() has run."""
    return _configured


def get_log_file() -> Optional[Path]:
    """Return the current log file, or None when logging to a stream."""
    return _log_file


def get_log_level() -> int:
    """Return the configured logging level."""
    return _log_level


def set_log_level(level: Union[int, str]) -> None:
    """Change the logging level at runtime."""
    global _log_level

    level = _coerce_level(level)
    _log_level = level
    logging.getLogger().setLevel(level)


__all__ = [
    "configure_logging",
    "get_logger",
    "is_configured",
    "get_log_file",
    "get_log_level",
    "set_log_level",
]
