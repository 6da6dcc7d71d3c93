from __future__ import annotations

"""
Copy Domain Data Models.

Result objects returned by the recursive directory copier. Per-entry
failures are recorded here instead of aborting the copy.
"""

from dataclasses import dataclass, field
from typing import List

# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CopyError:
    """
    Failure details for a single entry.

    Attributes:
        src: Source path of the entry.
        dst: Intended destination path.
        error: Descriptive error message.
    """
    src: str
    dst: str
    error: str


@dataclass
class CopyReport:
    """
    Outcome of a copy_dir call.

    Attributes:
        copied: Destination paths of files written successfully.
        errors: Entries that could not be copied.
    """
    copied: List[str] = field(default_factory=list)
    errors: List[CopyError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def merge(self, other: "CopyReport") -> None:
        """Fold a nested directory's report into this one."""
        self.copied.extend(other.copied)
        self.errors.extend(other.errors)
