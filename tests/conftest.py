from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Makes the 'src' directory importable without installation.
2. Provides small on-disk directory trees shared by the walker, copier
   and archive tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small project tree.

    Structure:
    /project
      a.txt.txt       "AAA"
      b.json          '{"k": 1}'
      /docs
        guide.txt     "guide"
        /deep
          notes.txt   "notes"
          raw         "no-ext"
      /empty
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt.txt").write_bytes(b"AAA")
    (root / "b.json").write_bytes(b'{"k": 1}')

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.txt").write_bytes(b"guide")

    deep = docs / "deep"
    deep.mkdir()
    (deep / "notes.txt").write_bytes(b"notes")
    (deep / "raw").write_bytes(b"no-ext")

    (root / "empty").mkdir()
    return root
