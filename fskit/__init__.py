"""fskit: small filesystem and path utilities.

Author: Michael Economou
Date: 2026-09-02
"""

import logging

from fskit import filesystem as file_system
from fskit.config import APP_VERSION

# Silent unless the host application configures logging or calls init_logging
logging.getLogger("fskit").addHandler(logging.NullHandler())

__version__ = APP_VERSION

__all__ = ["file_system"]
