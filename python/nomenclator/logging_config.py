"""
Logging configuration for Nomenclator.

The MCP server talks JSON-RPC over stdout, so nothing may ever be logged
there. Logs go to .nomenclator/logs/nomenclator-YYYY-MM-DD.log (new file each
day); stderr logging can be switched on for interactive use.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "nomenclator"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FlushingFileHandler(logging.handlers.TimedRotatingFileHandler):
    """Daily rotating file handler that flushes after every record."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def default_log_dir() -> Path:
    return Path.cwd() / ".nomenclator" / "logs"


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, logging.handlers.TimedRotatingFileHandler) for h in logger.handlers)


def _has_stderr_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
        for h in logger.handlers
    )


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[int, str] = logging.INFO,
    backup_count: int = 14,  # two weeks
    console: bool = False,
) -> logging.Logger:
    """
    Attach the file handler (and optionally a stderr handler) to the
    "nomenclator" logger. Child loggers such as "nomenclator.engine" propagate
    to it.

    Safe to call repeatedly: each handler is only added once.

    Args:
        log_dir: Directory for log files (default: .nomenclator/logs)
        level: Logging level, as int or name (default: INFO)
        backup_count: Number of daily backup files to keep
        console: If True, also log to stderr

    Returns:
        The configured "nomenclator" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    want_file = not _has_file_handler(logger)
    want_console = console and not _has_stderr_handler(logger)
    if not (want_file or want_console):
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if want_file:
        log_dir = log_dir or default_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"nomenclator-{datetime.now():%Y-%m-%d}.log"

        file_handler = FlushingFileHandler(
            log_file,
            when="midnight",
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Logging to {log_file} at {logging.getLevelName(logger.level)}")

    if want_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
