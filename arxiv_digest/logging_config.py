"""
Logging setup for arXiv Digest.

Call setup_logging() once, from backend.main or demo_simple, before any
search runs. Library modules only ever do ``logging.getLogger(__name__)``.

Usage:
    >>> from arxiv_digest.config import Config
    >>> from arxiv_digest.logging_config import setup_logging
    >>> setup_logging(Config.from_env().log)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from arxiv_digest.config import LogConfig

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("urllib3", "multipart")


def _file_handler(log_config: LogConfig, formatter: logging.Formatter) -> RotatingFileHandler:
    log_config.log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(log_config.log_dir / log_config.log_file),
        maxBytes=log_config.max_bytes,
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_config: Optional[LogConfig] = None,
    log_level_override: Optional[str] = None,
) -> Path:
    """
    Install the file and console handlers on the root logger.

    Existing root handlers are removed first, so calling this twice does
    not duplicate output.

    Args:
        log_config: LogConfig instance. If None, loads from environment.
        log_level_override: Level name that wins over ``log_config.level``.

    Returns:
        Path of the active log file.
    """
    if log_config is None:
        log_config = LogConfig.from_env()

    level_name = (log_level_override or log_config.level).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(fmt=log_config.format_string, datefmt=log_config.date_format)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    root.addHandler(_file_handler(log_config, formatter))
    if log_config.console_output:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        root.addHandler(console)

    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    log_path = log_config.log_dir / log_config.log_file
    logging.getLogger(__name__).info(f"Logging to {log_path} at {level_name}")
    return log_path


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module name."""
    return logging.getLogger(name)
