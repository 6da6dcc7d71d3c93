from __future__ import annotations

"""
Path string helpers.

Pure string manipulation used by the tree walker: extension extraction,
suffix stripping and relative path joining.
"""

import os

from fileutils.domain.constants import REL_SEPARATOR


def file_extension(name: str) -> str:
    """
    Return the extension of the final path element, leading dot included.

    The extension starts at the last '.' of the final element. Unlike
    os.path.splitext, a leading dot counts ('.bashrc' -> '.bashrc').
    Returns '' when there is no dot.

    Args:
        name: File name or path.

    Returns:
        str: The extension, or an empty string.
    """
    base = os.path.basename(name)
    idx = base.rfind(".")
    if idx < 0:
        return ""
    return base[idx:]


def strip_first_occurrence(name: str, suffix: str) -> str:
    """
    Remove the first occurrence of ``suffix`` anywhere in ``name``.

    This is a substring replacement, not a trailing trim:
    'v.js.map' with '.js' gives 'v.map'.
    """
    if not suffix:
        return name
    return name.replace(suffix, "", 1)


def join_relative(parent: str, name: str) -> str:
    """Join a relative parent path and an entry name with '/'."""
    if not parent:
        return name
    return f"{parent}{REL_SEPARATOR}{name}"
