from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Maps raw OSError instances onto the library error taxonomy and provides
the parent-directory helper used by the log file handler.
"""

import errno
import os
from typing import Any, Optional

from fileutils.domain.errors import (
    FileUtilsError,
    IOFailureError,
    NotFoundError,
    PermissionDeniedError,
)

# -----------------------------------------------------------------------------
# ERROR TRANSLATION API
# -----------------------------------------------------------------------------

_NOT_FOUND_ERRNOS = {errno.ENOENT, errno.ENOTDIR}
_PERMISSION_ERRNOS = {errno.EACCES, errno.EPERM}


def translate_os_error(
        exc: OSError,
        path: Optional[str] = None,
        partial: Any = None,
) -> FileUtilsError:
    """
    Build the taxonomy error matching an OSError.

    The caller is expected to ``raise translate_os_error(e, ...) from e``
    so the original exception stays reachable.

    Args:
        exc: The raised OSError.
        path: Path to report; defaults to the exception's filename.
        partial: Aggregate built before the failure.

    Returns:
        FileUtilsError: NotFoundError, PermissionDeniedError or IOFailureError.
    """
    target = path or exc.filename
    target = os.fsdecode(target) if target is not None else None
    reason = exc.strerror or str(exc)

    if isinstance(exc, (FileNotFoundError, NotADirectoryError)) or exc.errno in _NOT_FOUND_ERRNOS:
        return NotFoundError(f"Path not found ({reason})", target, partial)
    if isinstance(exc, PermissionError) or exc.errno in _PERMISSION_ERRNOS:
        return PermissionDeniedError(f"Permission denied ({reason})", target, partial)
    return IOFailureError(f"I/O failure ({reason})", target, partial)

# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of a target file."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.isdir(parent):
        os.makedirs(parent, exist_ok=True)
