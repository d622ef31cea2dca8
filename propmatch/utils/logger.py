"""
Logging for PropMatch.

The CLI calls ``setup_logging`` once per invocation; library code only
asks for bound loggers and never configures handlers itself.
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from propmatch.utils.config import LoggingSettings, get_settings

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)


def _add_file_handler(path: Path, log_settings: LoggingSettings, level: str, diagnose: bool) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        path,
        format=log_settings.format,
        level=level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )


def setup_logging(level: str | None = None) -> None:
    """
    Replace loguru's handlers with the ones described by ``LoggingSettings``.

    Console output goes to stderr so it never mixes with command output.
    A rotating file handler is added only when ``LOG_FILE_PATH`` is set.

    Args:
        level: Overrides ``LOG_LEVEL`` (the CLI passes "DEBUG" for --verbose)
    """
    settings = get_settings()
    log_settings = settings.logging
    level = (level or log_settings.level).upper()
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()
    logger.configure(extra={"name": "propmatch"})

    if log_settings.console_output:
        logger.add(sys.stderr, format=_CONSOLE_FORMAT, level=level, colorize=True, diagnose=diagnose)

    if log_settings.file_path is not None:
        _add_file_handler(log_settings.file_path, log_settings, level, diagnose)

    logger.debug(f"Logging configured at {level}")


def get_logger(name: str) -> Any:
    """Logger bound to a component name, shown in the console format."""
    return logger.bind(name=name)


class LoggerMixin:
    """Gives a class a ``logger`` bound to its class name."""

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger
