from __future__ import annotations

"""
Materialization Data Models.

DTOs describing the outcome of turning a forest into filesystem entries,
either for real (MaterializeStats) or as a dry-run plan (PlannedAction).
"""

from dataclasses import dataclass
from typing import Any, Dict

from treeforge.domain.tree_models import NodeKind


@dataclass(frozen=True)
class MaterializeStats:
    """
    Counters collected during one materialization run.

    Attributes:
        created_dirs: Folders created by this run.
        created_files: Empty files created by this run.
        existing: Entries that were already present and left untouched.
    """
    created_dirs: int = 0
    created_files: int = 0
    existing: int = 0

    @property
    def total(self) -> int:
        return self.created_dirs + self.created_files + self.existing

    def merge(self, other: MaterializeStats) -> MaterializeStats:
        """Return the sum of two counter sets."""
        return MaterializeStats(
            created_dirs=self.created_dirs + other.created_dirs,
            created_files=self.created_files + other.created_files,
            existing=self.existing + other.existing,
        )


@dataclass(frozen=True)
class PlannedAction:
    """
    One entry of a dry-run plan.

    Attributes:
        kind: Entry type that would be created.
        path: Absolute target path.
        exists: Whether the target is already present.
    """
    kind: NodeKind
    path: str
    exists: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "path": self.path, "exists": self.exists}
