"""
Logging configuration for crossword generator.

The console shows progress at the configured level; a rotating log file in
the output directory keeps every placement decision at DEBUG.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler


FILE_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def log_file_path(output_dir: str, prefix: str) -> str:
    """Timestamped log file path inside the output directory."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(output_dir, f"{prefix}_{timestamp}.log")


def close_log_handlers():
    """Close and detach the rotating file handlers on the root logger."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            handler.close()
            root_logger.removeHandler(handler)


def setup_logging(
    output_dir: str,
    log_level: str = "INFO",
    log_file_prefix: str = "crossword_generator",
    enable_console: bool = True,
) -> str:
    """
    Route all crossword logging to a rotating file and, optionally, stdout.

    Calling this again replaces the handlers from the previous call, so one
    process can generate several puzzles into different directories.

    Args:
        output_dir: Directory where log file will be saved
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file_prefix: Prefix for log filename
        enable_console: Whether to enable console logging

    Returns:
        Path to the log file
    """
    os.makedirs(output_dir, exist_ok=True)
    log_path = log_file_path(output_dir, log_file_prefix)
    console_level = getattr(logging, log_level.upper(), logging.INFO)

    close_log_handlers()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    root_logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging to {log_path}")
    logger.debug(
        f"Console level: {logging.getLevelName(console_level)}, "
        f"console enabled: {enable_console}"
    )

    return log_path
