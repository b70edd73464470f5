"""Module: init_logging.py

Author: Michael Economou
Date: 2026-09-03

init_logging.py
Provides a single entry point to initialize the logging system
for applications embedding fskit.
Functions:
init_logging(app_name, log_dir, console): Sets up rotating file handlers
and an optional console handler on the fskit package logger.
Only the fskit logger gets a level here; the root logger stays untouched.
"""

import logging
import os

from fskit.config import APP_NAME, LOG_DATE_FORMAT, LOG_FORMAT
from fskit.utils.logging.logger_factory import get_cached_logger
from fskit.utils.logging.logger_file_helper import add_file_handler
from fskit.utils.logging.logger_helper import DevOnlyFilter, SafeTextFilter


def init_logging(
    app_name: str = APP_NAME,
    log_dir: str = "logs",
    console: bool = False,
    console_level: int = logging.INFO,
) -> logging.Logger:
    """Initializes logging for fskit, adding rotating file handlers
    for activity and error logs under the given app name.

    Args:
        app_name (str): The base name for log files (e.g., 'fskit').
        log_dir (str): Directory that receives the log files.
        console (bool): Also log to stderr, hiding dev-only records and
            escaping text the stream cannot encode.
        console_level (int): Level for the console handler.

    Returns:
        logging.Logger: The fskit package logger.

    """
    logger = get_cached_logger("fskit")
    logger.setLevel(min(logging.INFO, console_level) if console else logging.INFO)

    add_file_handler(logger, os.path.join(log_dir, f"{app_name}_activity.log"), level=logging.INFO)
    add_file_handler(logger, os.path.join(log_dir, f"{app_name}_errors.log"), level=logging.ERROR)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler.addFilter(DevOnlyFilter())
        console_handler.addFilter(SafeTextFilter(getattr(console_handler.stream, "encoding", None)))
        logger.addHandler(console_handler)

    logger.debug("[Logging] Initialized in %s", log_dir, extra={"dev_only": True})
    return logger
