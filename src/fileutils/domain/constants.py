from __future__ import annotations

"""
Domain Constants.

Immutable values shared by the walker, serializers, archive layer
and leaf utilities.
"""

# strftime equivalent of "Mon-DD-YYYY_HH-MM-SS-TZ"
TIME_LAYOUT: str = "%b-%d-%Y_%H-%M-%S-%Z"

# Infix used when a path is moved aside: "<path>-Pre-<timestamp>"
RENAME_MARKER: str = "-Pre-"

JSON_INDENT: int = 2

DEFAULT_FILE_MODE: int = 0o644
DEFAULT_DIR_MODE: int = 0o755

# Separator used for relative paths in listings, trees and archive names
REL_SEPARATOR: str = "/"
ZIP_DIR_SUFFIX: str = "/"
