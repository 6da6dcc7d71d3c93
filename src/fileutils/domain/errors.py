from __future__ import annotations

"""
Error Taxonomy.

Every failure raised by the library is a FileUtilsError subclass. The
originating OSError / codec exception is chained as ``__cause__``.
Operations that aggregate results (the tree walker) attach whatever they
had built before the failure in ``partial``.
"""

from typing import Any, Optional


class FileUtilsError(Exception):
    """
    Base class for all library failures.

    Attributes:
        message: Human readable description.
        path: Filesystem path involved, when known.
        partial: Aggregate built before the failure (bytes, list or None).
    """

    def __init__(self, message: str, path: Optional[str] = None, partial: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.partial = partial

    def __str__(self) -> str:
        if self.path:
            return f"{self.message}: {self.path}"
        return self.message


class NotFoundError(FileUtilsError):
    """The path (or one of its parents) does not exist."""


class PermissionDeniedError(FileUtilsError):
    """The process lacks the rights to read or write the path."""


class IOFailureError(FileUtilsError):
    """Read, write, copy or archive failure not covered by the above."""


class DecodeFailureError(FileUtilsError):
    """Malformed JSON or YAML content."""


class EncodeFailureError(FileUtilsError):
    """A value could not be serialized."""
