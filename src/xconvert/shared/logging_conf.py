# src/xconvert/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for applications
embedding the converter. It sets up consistent formatting, log levels and
output handlers (stdout and/or a rotating log file).

Files that USE this module:
- Embedding applications (setup_logging function for logging initialization)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- xconvert.config (default log settings)
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler

from xconvert.config import settings


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
    log_to_stdout: Optional[bool] = None,
) -> None:
    """
    Configure application-wide logging settings.

    Any argument left as None falls back to the matching field of
    ``xconvert.config.settings``.

    Args:
        level: Logging level, int or name (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; the file is named xconvert.log
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup log files to keep
        log_to_stdout: Whether to also log to stdout
    """
    level = level if level is not None else settings.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    log_file = log_file or settings.log_file
    log_dir = log_dir or settings.log_dir
    max_bytes = max_bytes if max_bytes is not None else settings.log_max_bytes
    backup_count = backup_count if backup_count is not None else settings.log_backup_count
    if log_to_stdout is None:
        log_to_stdout = settings.log_stdout

    log_format = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = []

    if log_to_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(stdout_handler)

    log_file_path = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "xconvert.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    # If no handlers specified, default to stdout
    if not handlers:
        handlers = [logging.StreamHandler(sys.stdout)]

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.info("Logging configured: stdout, level=%s", level)
