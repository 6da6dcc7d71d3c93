from __future__ import annotations

"""
Unit tests for the path string helpers.
"""

import pytest

from fileutils.paths import file_extension, join_relative, strip_first_occurrence


@pytest.mark.parametrize(
    "name, expected",
    [
        ("notes.txt", ".txt"),
        ("archive.tar.gz", ".gz"),
        ("Makefile", ""),
        (".bashrc", ".bashrc"),
        ("dir.d/file", ""),
        ("trailing.", "."),
    ],
)
def test_file_extension(name: str, expected: str) -> None:
    """TC-01: Extension starts at the last dot of the final element."""
    assert file_extension(name) == expected


def test_strip_first_occurrence_is_not_a_suffix_trim() -> None:
    """TC-02: The earliest occurrence is removed, wherever it is."""
    assert strip_first_occurrence("v.js.map", ".js") == "v.map"
    assert strip_first_occurrence("a.txt.txt", ".txt") == "a.txt"
    assert strip_first_occurrence("plain", ".txt") == "plain"
    assert strip_first_occurrence("keep.txt", "") == "keep.txt"


def test_join_relative() -> None:
    """TC-03: Parent and name are joined with '/'."""
    assert join_relative("", "a") == "a"
    assert join_relative("x/y", "a") == "x/y/a"
