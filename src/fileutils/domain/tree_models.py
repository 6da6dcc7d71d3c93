from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type returned by the info-tree walker.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    One entry (file or directory) of a walked tree.

    Attributes:
        name: Entry name.
        path: Path relative to the walked root, joined with '/'.
        absolute_path: Absolute filesystem path resolved at visit time.
        extension: Extension without the leading dot ('' for directories).
        is_dir: True for directories.
        children: Nested entries; always empty for files.
    """
    name: str
    path: str
    absolute_path: str
    extension: str = ""
    is_dir: bool = False
    children: Tuple["FileNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.children and not self.is_dir:
            raise ValueError(f"File node '{self.path}' cannot have children")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the node and its subtree into JSON-ready primitives."""
        data: Dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "absolutePath": self.absolute_path,
            "extension": self.extension,
            "isDir": self.is_dir,
        }
        if self.is_dir:
            data["children"] = [c.to_dict() for c in self.children]
        return data


def tree_to_dicts(nodes: List[FileNode]) -> List[Dict[str, Any]]:
    """Serialize a top-level node list."""
    return [n.to_dict() for n in nodes]
