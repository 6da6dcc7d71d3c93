from __future__ import annotations

"""
ZIP Archive Operations.

Packs a file or directory into a ZIP archive (directories stored with a
trailing '/', files deflated) and unpacks an archive into a target
directory, re-applying the Unix permission bits stored in each member.
"""

import logging
import os
import shutil
import stat
import zipfile
from typing import List

from fileutils.core.walker import walk_entries
from fileutils.domain.constants import DEFAULT_DIR_MODE, REL_SEPARATOR, ZIP_DIR_SUFFIX
from fileutils.domain.errors import IOFailureError
from fileutils.infra.fs import translate_os_error

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def unzip(archive: str, target: str) -> List[str]:
    """
    Extract every member of ``archive`` below ``target``.

    Args:
        archive: Path of the ZIP file.
        target: Destination directory, created if missing.

    Returns:
        List[str]: Paths of the extracted files.

    Raises:
        NotFoundError, PermissionDeniedError: on filesystem failures.
        IOFailureError: on a corrupt archive or a member escaping ``target``.
    """
    logger.debug(f"Unzipping {archive} into {target}")
    written: List[str] = []
    try:
        with zipfile.ZipFile(archive, "r") as zf:
            os.makedirs(target, mode=DEFAULT_DIR_MODE, exist_ok=True)
            target_root = os.path.realpath(target)

            for info in zf.infolist():
                path = _safe_member_path(target_root, info.filename)
                mode = _stored_mode(info)

                if info.is_dir():
                    os.makedirs(path, mode=mode or DEFAULT_DIR_MODE, exist_ok=True)
                    continue

                os.makedirs(os.path.dirname(path), exist_ok=True)
                with zf.open(info, "r") as fin, open(path, "wb") as fout:
                    shutil.copyfileobj(fin, fout)
                if mode:
                    os.chmod(path, mode)
                written.append(path)

    except zipfile.BadZipFile as e:
        raise IOFailureError(f"Invalid zip archive ({e})", archive) from e
    except OSError as e:
        raise translate_os_error(e) from e

    return written


def zipit(source: str, target: str) -> str:
    """
    Pack ``source`` (a directory or a single file) into ``target``.

    For a directory, member names are prefixed with the directory's base
    name and the directory itself is recorded as '<base>/'. A single file
    is stored under its base name.

    Args:
        source: File or directory to archive.
        target: Path of the ZIP file to create (overwritten).

    Returns:
        str: ``target``.

    Raises:
        NotFoundError: if ``source`` does not exist; no archive is created.
        PermissionDeniedError, IOFailureError: on read/write failures.
    """
    logger.debug(f"Zipping {source} into {target}")
    try:
        source_is_dir = stat.S_ISDIR(os.stat(source).st_mode)
    except OSError as e:
        raise translate_os_error(e, source) from e

    base_dir = os.path.basename(os.path.normpath(source)) if source_is_dir else ""

    try:
        with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for entry in walk_entries(source):
                if base_dir:
                    arcname = base_dir + REL_SEPARATOR + entry.rel_path if entry.rel_path else base_dir
                else:
                    arcname = entry.name

                info = zipfile.ZipInfo.from_file(entry.path, arcname)
                if entry.is_dir:
                    if not info.filename.endswith(ZIP_DIR_SUFFIX):
                        info.filename += ZIP_DIR_SUFFIX
                    info.compress_type = zipfile.ZIP_STORED
                    zf.writestr(info, b"")
                    continue

                info.compress_type = zipfile.ZIP_DEFLATED
                with open(entry.path, "rb") as fin, zf.open(info, "w") as fout:
                    shutil.copyfileobj(fin, fout)
    except OSError as e:
        raise translate_os_error(e) from e

    return target

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _stored_mode(info: zipfile.ZipInfo) -> int:
    """Unix permission bits recorded in a member, 0 when absent."""
    return stat.S_IMODE(info.external_attr >> 16)


def _safe_member_path(target_root: str, member: str) -> str:
    """Resolve a member name below ``target_root``, rejecting escapes."""
    path = os.path.realpath(os.path.join(target_root, member))
    if path != target_root and not path.startswith(target_root + os.sep):
        raise IOFailureError("Archive member escapes the target directory", member)
    return path
