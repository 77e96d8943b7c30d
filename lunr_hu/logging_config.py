"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from .config import get_settings


def setup_logging(
    log_file: Optional[Union[str, Path]] = None,
    console_level: Optional[Union[int, str]] = None,
    file_level: int = logging.DEBUG,
):
    """
    Configure logging for applications embedding lunr-hu.

    Destinations:
    - Console: Brief logs (LOG_LEVEL, INFO by default)
    - File: Detailed logs (DEBUG by default), only when log_file is given.
      Rotates at 10MB, keeps 5 old files.

    Per-token stemming traces are emitted at DEBUG, so they only reach the
    file unless the console level is lowered.

    Args:
        log_file: Path to log file, or None for console only
        console_level: Console logging level (int or name like "DEBUG").
            Defaults to LOG_LEVEL from get_settings()
        file_level: File logging level
    """
    if console_level is None:
        console_level = get_settings().log_level
    if isinstance(console_level, str):
        console_level = getattr(logging, console_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    logging.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={log_file or 'disabled'}"
    )
