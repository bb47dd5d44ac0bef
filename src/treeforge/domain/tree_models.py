from __future__ import annotations

"""
Structure Tree Data Models.

Provides the node and parse-state types shared by the text parser, the
preview renderer and the filesystem materializer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Type of entry a parsed line stands for."""
    FILE = "file"
    FOLDER = "folder"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassifiedLine:
    """
    Result of classifying a single raw input line.

    Attributes:
        depth: Leading whitespace/glyph count, used as a relative nesting key.
        name: Cleaned display label.
        kind: Inferred entry type.
    """
    depth: int
    name: str
    kind: NodeKind


@dataclass
class Node:
    """
    One file or folder entry of a parsed structure.

    Attributes:
        name: Cleaned display label.
        kind: Entry type.
        path: Relative path from the structure root, joined with '/'.
        children: Ordered child nodes for folders, None for files.
    """
    name: str
    kind: NodeKind
    path: str
    children: Optional[List["Node"]] = None

    def __post_init__(self) -> None:
        if self.kind is NodeKind.FOLDER:
            if self.children is None:
                self.children = []
        elif self.children is not None:
            raise ValueError(f"File node '{self.path}' cannot carry children.")

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping of this node and its subtree."""
        data: Dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "path": self.path,
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class ParseFrame:
    """
    Open ancestor folder tracked by the tree builder stack.

    The sentinel frame (depth -1, empty path) holds the root forest.
    """
    depth: int
    path: str
    children: List[Node] = field(default_factory=list)


Forest = List[Node]


def forest_to_dicts(forest: Forest) -> List[Dict[str, Any]]:
    """Serialize a forest into plain nested dictionaries."""
    return [node.to_dict() for node in forest]
