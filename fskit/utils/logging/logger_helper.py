"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-09-03

logger_helper.py
Provides utility functions for working with loggers in a safe and consistent way.
Includes functions to retrieve named loggers and to keep Unicode messages
printable on consoles across platforms (Windows, Linux, macOS). Paths handed to
fskit often carry characters the console encoding cannot represent.
Functions:
get_logger(name): Returns a named logger that defers level and output to its parents.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
SafeTextFilter:
A handler filter that rewrites a record with safe_text when its message
cannot be encoded for the handler's stream. Handlers swallow encoding errors
in emit(), so the rewrite has to happen before the record is formatted.
DevOnlyFilter:
A logging filter that hides dev-only debug messages from the console,
while still allowing them to be stored in file logs.
"""

import logging
import re

from fskit.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "\u2192": "->",  # right arrow
    "\u2014": "--",  # em dash
    "\u2013": "-",  # en dash
    "\u2026": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Characters without a known replacement are escaped with backslashes.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text that encodes as ASCII.
    """
    text = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return text.encode("ascii", "backslashreplace").decode("ascii")


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger with the given name, delegating to parent loggers for output.

    The level is left unset so the effective level comes from the "fskit"
    package logger or the root logger configured by the host application.

    Args:
        name (str): Optional name for the logger (defaults to this module)

    Returns:
        logging.Logger: Logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Handlers live on the package logger (see init_logging)
    logger.propagate = True

    return logger


class SafeTextFilter(logging.Filter):
    """Rewrites records whose message the target stream cannot encode.

    Args:
        encoding (str): Encoding of the handler's stream (defaults to utf-8)
    """

    def __init__(self, encoding: str | None = None):
        super().__init__()
        self.encoding = encoding or "utf-8"

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        try:
            message.encode(self.encoding)
        except UnicodeEncodeError:
            record.msg = safe_text(message)
            record.args = ()
        return True


class DevOnlyFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
