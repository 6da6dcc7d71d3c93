from __future__ import annotations

"""
Directory Tree Walker.

Depth-first traversal of a directory with four result shapes: the
concatenated bytes of matching files, the concatenated bytes of every
file, a flat list of relative paths filtered by extension, and a nested
FileNode tree. Entries of a directory are visited sorted by name.

All variants are fail-fast: the first OSError aborts the walk and is
raised as a FileUtilsError whose ``partial`` holds the aggregate built
so far.
"""

import logging
import os
import stat
from dataclasses import dataclass
from typing import Callable, Iterator, List, Set, Tuple

from fileutils.domain.errors import FileUtilsError, NotFoundError
from fileutils.domain.tree_models import FileNode
from fileutils.infra.fs import translate_os_error
from fileutils.paths import file_extension, join_relative, strip_first_occurrence

logger = logging.getLogger(__name__)

_DirKey = Tuple[int, int]


@dataclass(frozen=True)
class WalkEntry:
    """
    A classified directory entry.

    Attributes:
        name: Entry name.
        path: Filesystem path (root joined with the entry's parents).
        rel_path: Path relative to the walk root, joined with '/'.
        is_dir: Classification made once at listing time.
    """
    name: str
    path: str
    rel_path: str
    is_dir: bool

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def concatenate_matching_files(root: str, suffix: str, follow_symlinks: bool = False) -> bytes:
    """
    Read every file whose name ends with ``suffix`` and join the bytes.

    Args:
        root: Directory (or single file) to walk.
        suffix: Plain name suffix, e.g. '.js'.
        follow_symlinks: Descend into symlinked directories.

    Returns:
        bytes: Contents in traversal order.

    Raises:
        FileUtilsError: on the first failure; ``partial`` holds the bytes read.
    """
    logger.debug(f"Concatenating files ending with '{suffix}' under {root}")
    return _concatenate(root, lambda name: name.endswith(suffix), follow_symlinks)


def concatenate_all_files(root: str, follow_symlinks: bool = False) -> bytes:
    """Read every file under ``root`` and join the bytes in traversal order."""
    logger.debug(f"Concatenating all files under {root}")
    return _concatenate(root, lambda name: True, follow_symlinks)


def list_files_by_suffix(
        root: str,
        suffix: str,
        strip_suffix: bool = False,
        follow_symlinks: bool = False,
) -> List[str]:
    """
    List the relative paths of files whose extension equals ``suffix``.

    The comparison is exact and case-sensitive against the extension
    including its dot ('.txt'). With ``strip_suffix`` the first occurrence
    of ``suffix`` inside the file name is removed, wherever it appears:
    'a.txt.txt' is listed as 'a.txt'.

    Args:
        root: Directory to walk.
        suffix: Extension to keep, dot included.
        strip_suffix: Remove the suffix text from each listed name.
        follow_symlinks: Descend into symlinked directories.

    Returns:
        List[str]: '/'-joined paths relative to ``root``.

    Raises:
        NotFoundError: when ``root`` is missing or is not a directory.
        FileUtilsError: on the first failure; ``partial`` holds the list so far.
    """
    logger.debug(f"Listing '{suffix}' files under {root}")
    result: List[str] = []
    try:
        for entry in walk_entries(root, follow_symlinks, include_root=False):
            if not entry.rel_path:
                raise NotFoundError("Not a directory", root)
            if entry.is_dir or file_extension(entry.name) != suffix:
                continue
            name = strip_first_occurrence(entry.name, suffix) if strip_suffix else entry.name
            parent = entry.rel_path.rpartition("/")[0]
            result.append(join_relative(parent, name))
    except FileUtilsError as e:
        e.partial = result
        raise
    return result


def build_file_info_tree(root: str, follow_symlinks: bool = False) -> List[FileNode]:
    """
    Build a FileNode tree mirroring the directory hierarchy under ``root``.

    Args:
        root: Directory to walk.
        follow_symlinks: Descend into symlinked directories.

    Returns:
        List[FileNode]: Top-level entries; directories carry their children.

    Raises:
        FileUtilsError: on the first failure; ``partial`` holds the top-level
        nodes completed before it.
    """
    logger.debug(f"Building file info tree for {root}")
    visited: Set[_DirKey] = set()
    _mark_visited(root, visited, follow_symlinks)
    nodes: List[FileNode] = []
    try:
        _collect_nodes(root, "", follow_symlinks, visited, nodes)
    except FileUtilsError as e:
        e.partial = nodes
        raise
    return nodes


def walk_entries(
        root: str,
        follow_symlinks: bool = False,
        include_root: bool = True,
) -> Iterator[WalkEntry]:
    """
    Yield every entry under ``root`` in depth-first pre-order.

    With ``include_root`` the root itself is yielded first (rel_path '').
    A root that is not a directory yields only itself. The root is always
    resolved through symlinks; entries below it follow ``follow_symlinks``.

    Args:
        root: Path to walk.
        follow_symlinks: Classify and descend through symlinked directories;
            a directory already entered is skipped.
        include_root: Yield the root entry before its descendants.

    Raises:
        FileUtilsError: if the root or any directory cannot be listed.
    """
    try:
        root_is_dir = stat.S_ISDIR(os.stat(root).st_mode)
    except OSError as e:
        raise translate_os_error(e, root) from e

    if include_root or not root_is_dir:
        yield WalkEntry(os.path.basename(os.path.normpath(root)), root, "", root_is_dir)
    if not root_is_dir:
        return

    visited: Set[_DirKey] = set()
    _mark_visited(root, visited, follow_symlinks)
    yield from _walk_dir(root, "", follow_symlinks, visited)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (TRAVERSAL)
# -----------------------------------------------------------------------------

def _list_dir(path: str, rel_dir: str, follow_symlinks: bool) -> List[WalkEntry]:
    """Read and classify one directory level, sorted by name."""
    try:
        with os.scandir(path) as it:
            entries = [
                WalkEntry(
                    name=de.name,
                    path=de.path,
                    rel_path=join_relative(rel_dir, de.name),
                    is_dir=de.is_dir(follow_symlinks=follow_symlinks),
                )
                for de in it
            ]
    except OSError as e:
        raise translate_os_error(e, path) from e
    entries.sort(key=lambda en: en.name)
    return entries


def _walk_dir(
        path: str,
        rel_dir: str,
        follow_symlinks: bool,
        visited: Set[_DirKey],
) -> Iterator[WalkEntry]:
    for entry in _list_dir(path, rel_dir, follow_symlinks):
        if entry.is_dir and not _mark_visited(entry.path, visited, follow_symlinks):
            continue
        yield entry
        if entry.is_dir:
            yield from _walk_dir(entry.path, entry.rel_path, follow_symlinks, visited)


def _collect_nodes(
        path: str,
        rel_dir: str,
        follow_symlinks: bool,
        visited: Set[_DirKey],
        out: List[FileNode],
) -> None:
    """Append one FileNode per entry of ``path`` to ``out``, children first."""
    for entry in _list_dir(path, rel_dir, follow_symlinks):
        if entry.is_dir:
            if not _mark_visited(entry.path, visited, follow_symlinks):
                continue
            children: List[FileNode] = []
            _collect_nodes(entry.path, entry.rel_path, follow_symlinks, visited, children)
            out.append(FileNode(
                name=entry.name,
                path=entry.rel_path,
                absolute_path=os.path.abspath(entry.path),
                extension="",
                is_dir=True,
                children=tuple(children),
            ))
        else:
            out.append(FileNode(
                name=entry.name,
                path=entry.rel_path,
                absolute_path=os.path.abspath(entry.path),
                extension=file_extension(entry.name).lstrip("."),
                is_dir=False,
            ))


def _concatenate(root: str, accept: Callable[[str], bool], follow_symlinks: bool) -> bytes:
    buf = bytearray()
    try:
        for entry in walk_entries(root, follow_symlinks, include_root=False):
            if entry.is_dir or not accept(entry.name):
                continue
            buf.extend(_read_bytes(entry.path))
    except FileUtilsError as e:
        e.partial = bytes(buf)
        raise
    return bytes(buf)


def _read_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise translate_os_error(e, path) from e

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SYMLINK CYCLES)
# -----------------------------------------------------------------------------

def _mark_visited(path: str, visited: Set[_DirKey], follow_symlinks: bool) -> bool:
    """
    Record a directory as entered.

    Only tracked when links are followed; without that, a link is never
    classified as a directory and no cycle can form.

    Returns:
        bool: False if the directory was already entered.
    """
    if not follow_symlinks:
        return True
    try:
        st = os.stat(path)
    except OSError as e:
        raise translate_os_error(e, path) from e
    key = (st.st_dev, st.st_ino)
    if key in visited:
        logger.warning(f"Skipping already visited directory (symlink cycle): {path}")
        return False
    visited.add(key)
    return True

