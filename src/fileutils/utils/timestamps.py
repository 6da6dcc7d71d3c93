from __future__ import annotations

"""
Timestamp and Working-Directory Helpers.

Sortable-by-eye timestamps for rename-aside backups, plus the current
working directory lookup.
"""

import logging
import os
from datetime import datetime
from typing import Optional

from fileutils.domain.constants import RENAME_MARKER, TIME_LAYOUT
from fileutils.domain.errors import NotFoundError
from fileutils.infra.fs import translate_os_error

logger = logging.getLogger(__name__)


def get_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a moment as 'Mon-DD-YYYY_HH-MM-SS-TZ'.

    Args:
        now: Moment to format; defaults to the current local time.

    Returns:
        str: e.g. 'Jan-02-2006_15-04-05-MST'.
    """
    moment = now if now is not None else datetime.now()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.strftime(TIME_LAYOUT)


def rename_if_exists(path: str) -> Optional[str]:
    """
    Move ``path`` aside to '<path>-Pre-<timestamp>'.

    No existence check is made first: the rename is attempted and a
    missing source is treated as nothing to do.

    Args:
        path: File or directory to move aside.

    Returns:
        Optional[str]: The new path, or None if ``path`` did not exist.

    Raises:
        PermissionDeniedError, IOFailureError: when the rename fails for
        any other reason.
    """
    new_path = f"{path}{RENAME_MARKER}{get_timestamp()}"
    try:
        os.rename(path, new_path)
    except FileNotFoundError:
        logger.warning(f"Nothing to rename at {path}")
        return None
    except OSError as e:
        raise translate_os_error(e, path) from e

    logger.info(f"Renamed {path} -> {new_path}")
    return new_path


def get_cwd() -> str:
    """
    Return the current working directory.

    Raises:
        NotFoundError: when the directory was removed under the process.
    """
    try:
        return os.getcwd()
    except OSError as e:
        raise NotFoundError(f"Could not get working directory ({e})") from e
