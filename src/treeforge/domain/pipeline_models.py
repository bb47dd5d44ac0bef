from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the pipeline engine to the interface
layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from treeforge.domain.materialize_models import MaterializeStats, PlannedAction

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StructureResult:
    """
    Unified result of a parse-and-create run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Message to show the user in case of failure.
        base_path: Normalized target directory ("" if none was given).
        dry_run: Whether the filesystem was left untouched.
        node_count: Number of parsed files and folders.
        forest: Parsed structure as nested dictionaries.
        preview_lines: Tree-glyph rendering of the structure.
        planned: Dry-run actions (kind, path, exists).
        created_dirs: Folders created.
        created_files: Empty files created.
        existing: Entries that were already present.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str

    base_path: str
    dry_run: bool = False

    node_count: int = 0
    forest: List[Dict[str, Any]] = field(default_factory=list)
    preview_lines: List[str] = field(default_factory=list)
    planned: List[Dict[str, Any]] = field(default_factory=list)

    created_dirs: int = 0
    created_files: int = 0
    existing: int = 0

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        base_path: str = "",
        *,
        dry_run: bool = False,
        node_count: int = 0,
        forest: Optional[List[Dict[str, Any]]] = None,
        preview_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> StructureResult:
    """
    Create a failed result instance.

    Args:
        error: Detailed error description, shown verbatim.
        base_path: The target directory, if known.
        dry_run: Whether the run was a simulation.
        node_count: Number of parsed entries, if parsing succeeded.
        forest: Serialized forest, if parsing succeeded.
        preview_lines: Rendered preview, if available.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        StructureResult: An immutable error result object.
    """
    return StructureResult(
        ok=False,
        error=error,
        base_path=base_path,
        dry_run=dry_run,
        node_count=node_count,
        forest=forest or [],
        preview_lines=preview_lines or [],
        summary=summary_extra or {},
    )


def create_success_result(
        base_path: str,
        forest: List[Dict[str, Any]],
        preview_lines: List[str],
        node_count: int,
        *,
        dry_run: bool = False,
        stats: Optional[MaterializeStats] = None,
        planned: Optional[List[PlannedAction]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> StructureResult:
    """
    Create a successful result instance.

    Args:
        base_path: Normalized target directory.
        forest: Serialized forest.
        preview_lines: Rendered preview.
        node_count: Number of parsed entries.
        dry_run: Whether the run was a simulation.
        stats: Materialization counters (real runs).
        planned: Planned actions (dry runs).
        summary_extra: Final execution metrics.

    Returns:
        StructureResult: An immutable success result object.
    """
    stats = stats or MaterializeStats()
    return StructureResult(
        ok=True,
        error="",
        base_path=base_path,
        dry_run=dry_run,
        node_count=node_count,
        forest=forest,
        preview_lines=preview_lines,
        planned=[action.to_dict() for action in planned or []],
        created_dirs=stats.created_dirs,
        created_files=stats.created_files,
        existing=stats.existing,
        summary=summary_extra or {},
    )
