"""Module: fskit.config

Author: Michael Economou
Date: 2026-09-02

Configuration package for fskit.

This package organizes configuration into logical modules:
- app: Application info, logging
- paths: Path separators, time formats, text encoding

All settings are re-exported from this module:
    from fskit.config import APP_NAME, TIME_STRING_FORMAT
"""

from fskit.config.app import *  # noqa: F401, F403
from fskit.config.paths import *  # noqa: F401, F403
