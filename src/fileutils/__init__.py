from __future__ import annotations

"""
fileutils: filesystem traversal, structured file persistence, ZIP
archives and tree copying.
"""

from fileutils.core.archive import unzip, zipit
from fileutils.core.copier import copy_dir, copy_file
from fileutils.core.serialization import load_json, load_yaml, save_json, save_yaml
from fileutils.core.walker import (
    build_file_info_tree,
    concatenate_all_files,
    concatenate_matching_files,
    list_files_by_suffix,
    walk_entries,
)
from fileutils.domain.copy_models import CopyError, CopyReport
from fileutils.domain.errors import (
    DecodeFailureError,
    EncodeFailureError,
    FileUtilsError,
    IOFailureError,
    NotFoundError,
    PermissionDeniedError,
)
from fileutils.domain.tree_models import FileNode
from fileutils.utils.collections import remove_duplicates
from fileutils.utils.timestamps import get_cwd, get_timestamp, rename_if_exists

__version__ = "1.0.0"

__all__ = [
    "build_file_info_tree",
    "concatenate_all_files",
    "concatenate_matching_files",
    "copy_dir",
    "copy_file",
    "get_cwd",
    "get_timestamp",
    "list_files_by_suffix",
    "load_json",
    "load_yaml",
    "remove_duplicates",
    "rename_if_exists",
    "save_json",
    "save_yaml",
    "unzip",
    "walk_entries",
    "zipit",
    "CopyError",
    "CopyReport",
    "FileNode",
    "FileUtilsError",
    "NotFoundError",
    "PermissionDeniedError",
    "IOFailureError",
    "DecodeFailureError",
    "EncodeFailureError",
]
