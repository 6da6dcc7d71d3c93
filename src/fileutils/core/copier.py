from __future__ import annotations

"""
Recursive Tree Copier.

Duplicates a file or a directory tree, preserving permission bits.
copy_file is fail-fast. copy_dir is best-effort per entry: a failing
file or subdirectory is logged and recorded in the CopyReport while its
siblings are still copied. Partially created destinations are left as is.
"""

import logging
import os
import shutil
import stat

from fileutils.domain.copy_models import CopyError, CopyReport
from fileutils.domain.errors import FileUtilsError
from fileutils.infra.fs import translate_os_error

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def copy_file(src: str, dst: str) -> str:
    """
    Copy one file's bytes and permission bits.

    The destination is created or truncated. The source mode is applied
    only after the content was copied, and a failure doing so is raised.

    Args:
        src: Source file.
        dst: Destination file path.

    Returns:
        str: ``dst``.

    Raises:
        NotFoundError, PermissionDeniedError, IOFailureError
    """
    try:
        with open(src, "rb") as fin:
            with open(dst, "wb") as fout:
                shutil.copyfileobj(fin, fout)
    except OSError as e:
        raise translate_os_error(e) from e

    try:
        mode = stat.S_IMODE(os.stat(src).st_mode)
        os.chmod(dst, mode)
    except OSError as e:
        raise translate_os_error(e) from e

    logger.debug(f"Copied {src} -> {dst} (mode {mode:o})")
    return dst


def copy_dir(src: str, dst: str) -> CopyReport:
    """
    Recursively copy ``src`` into ``dst``.

    The destination directory is created with the source directory's
    mode (missing parents included). Subdirectories recurse, files go
    through copy_file. Entry failures do not stop the walk.

    Args:
        src: Source directory (a single file is copied with copy_file).
        dst: Destination directory.

    Returns:
        CopyReport: Files written and per-entry errors.

    Raises:
        FileUtilsError: only if ``src`` cannot be examined or listed, or
        ``dst`` cannot be created.
    """
    logger.debug(f"Copying tree {src} -> {dst}")
    try:
        src_stat = os.stat(src)
    except OSError as e:
        raise translate_os_error(e, src) from e

    report = CopyReport()

    if not stat.S_ISDIR(src_stat.st_mode):
        report.copied.append(copy_file(src, dst))
        return report

    try:
        os.makedirs(dst, mode=stat.S_IMODE(src_stat.st_mode), exist_ok=True)
        with os.scandir(src) as it:
            entries = sorted(it, key=lambda de: de.name)
    except OSError as e:
        raise translate_os_error(e) from e

    for entry in entries:
        src_path = entry.path
        dst_path = os.path.join(dst, entry.name)
        try:
            if entry.is_dir(follow_symlinks=False):
                report.merge(copy_dir(src_path, dst_path))
            else:
                report.copied.append(copy_file(src_path, dst_path))
        except FileUtilsError as e:
            logger.error(f"Failed to copy {src_path}: {e}")
            report.errors.append(CopyError(src=src_path, dst=dst_path, error=str(e)))

    return report
