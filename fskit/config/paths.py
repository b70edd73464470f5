"""Module: fskit.config.paths

Author: Michael Economou
Date: 2026-09-02

Path separators, time formats and text encoding.
"""

# =====================================
# PATH SEPARATORS
# =====================================

UNIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"

# Both separators are honored on every platform
PATH_SEPARATORS = UNIX_SEPARATOR + WINDOWS_SEPARATOR

# =====================================
# FILE METADATA
# =====================================

# ctime()-like layout, but the day of month is zero-padded ("Oct 09", not "Oct  9")
TIME_STRING_FORMAT = "%a %b %d %H:%M:%S %Y"

# =====================================
# FILE CONTENTS
# =====================================

TEXT_FILE_ENCODING = "utf-8"
