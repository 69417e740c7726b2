"""
Logging for Recipe Keeper.

All module loggers hang off the "recipe_keeper" root so one call to
setup_logging() routes store, recovery and import messages to the console
and to a rotating log file.
"""

import logging
import logging.handlers
import time
from pathlib import Path
from typing import Optional
import sys

from .config import get_config

ROOT_LOGGER_NAME = "recipe_keeper"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'

MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the recipe_keeper logger.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR; defaults to RECIPE_LOG_LEVEL
        log_file: Rotating log file path; defaults to RECIPE_LOG_FILE

    Returns:
        The configured root logger for the application
    """
    config = get_config()
    level_name = (log_level or config.log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    log_file = log_file or config.log_file

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Streamlit reruns the script on every interaction
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    console_handler.setLevel(logging.DEBUG if config.debug_mode else logging.INFO)
    logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    logging.getLogger("streamlit").setLevel(logging.WARNING)

    logger.info(f"Logging to {log_file} at {level_name}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the recipe_keeper logger, usually called with __name__"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class ContextLogger:
    """
    Logs the start, end and duration of a store operation.
    Messages logged through it are prefixed with the operation name.
    A failure inside the block is logged and re-raised.
    """

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.started = None

    def __enter__(self):
        self.started = time.perf_counter()
        self.logger.log(self.level, f"{self.operation}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed_ms = (time.perf_counter() - self.started) * 1000
        if exc_type is None:
            self.logger.log(self.level, f"{self.operation} done in {elapsed_ms:.1f} ms")
        else:
            self.logger.error(f"{self.operation} failed after {elapsed_ms:.1f} ms: {exc_val}")
        return False

    def _prefixed(self, message: str) -> str:
        return f"[{self.operation}] {message}"

    def info(self, message: str):
        self.logger.info(self._prefixed(message))

    def warning(self, message: str):
        self.logger.warning(self._prefixed(message))

    def error(self, message: str):
        self.logger.error(self._prefixed(message))


def log_operation(logger: logging.Logger, operation: str, level: int = logging.INFO) -> ContextLogger:
    """Create a timed context logger for an operation"""
    return ContextLogger(logger, operation, level)
