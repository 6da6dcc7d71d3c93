from __future__ import annotations

"""
Unit tests for list_files_by_suffix.

Covers exact extension matching, relative path construction and the
first-occurrence stripping rule.
"""

from pathlib import Path

import pytest

from fileutils.core.walker import list_files_by_suffix
from fileutils.domain.errors import NotFoundError


def test_list_txt_files(sample_tree: Path) -> None:
    """TC-01: Only files whose extension is exactly '.txt' are listed."""
    result = list_files_by_suffix(str(sample_tree), ".txt")
    assert result == ["a.txt.txt", "docs/deep/notes.txt", "docs/guide.txt"]


def test_list_strip_removes_first_occurrence(sample_tree: Path) -> None:
    """TC-02: 'a.txt.txt' becomes 'a.txt', not 'a'."""
    result = list_files_by_suffix(str(sample_tree), ".txt", strip_suffix=True)
    assert result == ["a.txt", "docs/deep/notes", "docs/guide"]


def test_list_strip_only_touches_file_name(tmp_path: Path) -> None:
    """TC-03: Directory names containing the suffix text are kept intact."""
    d = tmp_path / "x.txt.d"
    d.mkdir()
    (d / "y.txt").write_text("y")

    assert list_files_by_suffix(str(tmp_path), ".txt", strip_suffix=True) == ["x.txt.d/y"]


def test_list_is_case_sensitive(tmp_path: Path) -> None:
    """TC-04: '.TXT' does not match '.txt'."""
    (tmp_path / "upper.TXT").write_text("u")
    (tmp_path / "lower.txt").write_text("l")

    assert list_files_by_suffix(str(tmp_path), ".txt") == ["lower.txt"]


def test_list_empty_suffix_matches_files_without_extension(sample_tree: Path) -> None:
    """TC-05: An entry with no extension has the empty extension."""
    assert list_files_by_suffix(str(sample_tree), "") == ["docs/deep/raw"]


def test_list_missing_root(tmp_path: Path) -> None:
    """TC-06: Missing roots fail with NotFoundError and an empty partial."""
    with pytest.raises(NotFoundError) as exc_info:
        list_files_by_suffix(str(tmp_path / "nope"), ".txt")
    assert exc_info.value.partial == []


def test_list_file_root_is_rejected(sample_tree: Path) -> None:
    """TC-07: A regular file is not a directory to list."""
    with pytest.raises(NotFoundError) as exc_info:
        list_files_by_suffix(str(sample_tree / "docs" / "guide.txt"), ".txt")
    assert exc_info.value.partial == []
