"""
Logging setup for the classifier client.

Streamlit re-executes the entry script on every interaction, so setup has to
be safe to call repeatedly: handlers are attached once per process and later
calls only adjust the level.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import AppConfig

LOGGER_NAME = "classifier_app"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Marks handlers installed here, so reruns can find them
_HANDLER_TAG = "_classifier_app_handler"


def configure_logging(config: AppConfig) -> logging.Logger:
    """Configure the package logger from app config."""
    log_file = Path(config.log_file) if config.log_file else None
    return setup_logger(level=config.log_level, log_file=log_file)


def setup_logger(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    console: bool = True,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Attach console/file handlers to the package logger once per process.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        log_file: Optional file that also receives every record at DEBUG
        console: Whether to log to stdout
        name: Logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    installed = [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]
    if installed:
        for handler in installed:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(numeric_level)
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        _install(logger, file_handler, formatter)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        _install(logger, console_handler, formatter)

    # Streamlit configures the root logger too; avoid printing records twice
    logger.propagate = False
    return logger


def _install(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)
