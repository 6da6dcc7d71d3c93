from __future__ import annotations

"""
Unit tests for the leaf utilities.

Covers order-preserving deduplication, timestamp formatting, the
rename-aside helper and the working directory lookup.
"""

import logging
import os
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from fileutils.domain.errors import NotFoundError, PermissionDeniedError
from fileutils.utils.collections import remove_duplicates
from fileutils.utils.timestamps import get_cwd, get_timestamp, rename_if_exists

_STAMP_RX = re.compile(r"^[A-Z][a-z]{2}-\d{2}-\d{4}_\d{2}-\d{2}-\d{2}-.+$")


def test_remove_duplicates_preserves_first_occurrence() -> None:
    """TC-01: Order is kept and later repeats are dropped."""
    assert remove_duplicates(["a", "b", "a", "c", "b"]) == ["a", "b", "c"]


def test_remove_duplicates_returns_new_list() -> None:
    """TC-02: The input is not modified."""
    items = ["x", "x"]
    result = remove_duplicates(items)
    assert result == ["x"]
    assert items == ["x", "x"]
    assert remove_duplicates([]) == []


def test_get_timestamp_layout() -> None:
    """TC-03: Layout is Mon-DD-YYYY_HH-MM-SS-TZ."""
    moment = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=-7), "MST"))
    assert get_timestamp(moment) == "Jan-02-2006_15-04-05-MST"


def test_get_timestamp_now_has_zone() -> None:
    """TC-04: The current local time carries a zone name."""
    assert _STAMP_RX.match(get_timestamp())


def test_rename_if_exists_moves_path(tmp_path: Path) -> None:
    """TC-05: An existing path is moved to '<path>-Pre-<timestamp>'."""
    target = tmp_path / "config.yaml"
    target.write_text("v1")

    new_path = rename_if_exists(str(target))

    assert new_path is not None
    assert new_path.startswith(str(target) + "-Pre-")
    assert not target.exists()
    assert Path(new_path).read_text() == "v1"


def test_rename_if_exists_missing_path_is_noop(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """TC-06: A missing path is skipped and the discarded rename is logged at WARNING."""
    with caplog.at_level(logging.WARNING, logger="fileutils.utils.timestamps"):
        assert rename_if_exists(str(tmp_path / "missing")) is None

    records = [r for r in caplog.records if r.name == "fileutils.utils.timestamps"]
    assert [r.levelno for r in records] == [logging.WARNING]
    assert "Nothing to rename" in records[0].getMessage()


def test_rename_if_exists_other_errors_propagate(tmp_path: Path) -> None:
    """TC-07: Failures other than a missing source are raised."""
    with patch("os.rename", side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(PermissionDeniedError):
            rename_if_exists(str(tmp_path / "locked"))


def test_get_cwd(tmp_path: Path) -> None:
    """TC-08: The working directory is returned; failures are NotFoundError."""
    assert get_cwd() == os.getcwd()
    with patch("os.getcwd", side_effect=FileNotFoundError(2, "No such file or directory")):
        with pytest.raises(NotFoundError):
            get_cwd()
