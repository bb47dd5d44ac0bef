from __future__ import annotations

"""
Filesystem Materializer.

Creates the folders and empty files described by a parsed forest under a
caller-supplied base directory. Every operation is create-if-absent: existing
entries are never opened for writing, so repeated runs leave the filesystem
unchanged. The first failure halts the run and nothing is rolled back.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from treeforge.core.analysis.tree_builder import iter_nodes
from treeforge.domain.constants import PATH_SEPARATOR
from treeforge.domain.errors import FilesystemAccessError, MissingBasePathError
from treeforge.domain.materialize_models import MaterializeStats, PlannedAction
from treeforge.domain.tree_models import Forest, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        forest: Forest,
        base_path: Optional[str],
        *,
        parallel: bool = False,
        max_workers: Optional[int] = None,
) -> MaterializeStats:
    """
    Create the filesystem entries of a forest under a base directory.

    Folders are created with any missing intermediate segments before their
    children are visited. Files get their parent directory ensured and are
    created empty.

    Args:
        forest: Root-level nodes to materialize.
        base_path: Existing, writable directory the node paths are relative to.
        parallel: Materialize each top-level subtree in its own worker thread.
        max_workers: Upper bound for worker threads when parallel is set.

    Returns:
        MaterializeStats: Counters of created and pre-existing entries.

    Raises:
        MissingBasePathError: If the base directory is absent or unusable.
        FilesystemAccessError: On the first entry that cannot be created.
    """
    base = resolve_base_path(base_path)

    if not forest:
        logger.info("Empty structure: nothing to materialize.")
        return MaterializeStats()

    logger.info(f"Materializing structure under: {base}")

    if parallel and len(forest) > 1:
        stats = _materialize_parallel(forest, base, max_workers)
    else:
        stats = _materialize_nodes(forest, base)

    logger.info(
        f"Materialization finished: {stats.created_dirs} folders and "
        f"{stats.created_files} files created, {stats.existing} already present."
    )
    return stats


def plan_materialization(forest: Forest, base_path: Optional[str]) -> List[PlannedAction]:
    """
    Describe what materialize() would do without touching the filesystem.

    Args:
        forest: Root-level nodes to inspect.
        base_path: Target base directory.

    Returns:
        List[PlannedAction]: One action per node in creation order.
    """
    base = resolve_base_path(base_path)
    actions: List[PlannedAction] = []
    for node in iter_nodes(forest):
        full = target_path(base, node)
        actions.append(PlannedAction(kind=node.kind, path=full, exists=os.path.exists(full)))
    return actions


def resolve_base_path(base_path: Optional[str]) -> str:
    """
    Validate the base directory and return its absolute form.

    Raises:
        MissingBasePathError: If the path is empty, missing, not a directory
                              or not writable.
    """
    raw = base_path.strip() if isinstance(base_path, str) else ""
    if not raw:
        raise MissingBasePathError("No base directory was provided.")

    base = os.path.abspath(raw)
    if not os.path.isdir(base):
        raise MissingBasePathError(f"Base directory does not exist or is not a directory: {base}", base)
    if not os.access(base, os.W_OK):
        raise MissingBasePathError(f"Base directory is not writable: {base}", base)
    return base


def target_path(base: str, node: Node) -> str:
    """
    Compute the absolute target of a node under the base directory.

    Raises:
        FilesystemAccessError: If the node path resolves outside the base.
    """
    full = os.path.normpath(os.path.join(base, *node.path.split(PATH_SEPARATOR)))
    try:
        inside = full != base and os.path.commonpath([base, full]) == base
    except ValueError:
        # Different drives on Windows
        inside = False
    if not inside:
        raise FilesystemAccessError(f"Path '{node.path}' resolves outside the base directory.", full)
    return full

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (TRAVERSAL)
# -----------------------------------------------------------------------------

def _materialize_nodes(nodes: Forest, base: str) -> MaterializeStats:
    """Depth-first, create-if-absent walk over a list of sibling nodes."""
    stats = MaterializeStats()
    for node in nodes:
        full = target_path(base, node)
        if node.is_folder:
            stats = stats.merge(_ensure_directory(full))
            if node.children:
                stats = stats.merge(_materialize_nodes(node.children, base))
        else:
            stats = stats.merge(_ensure_file(full))
    return stats


def _materialize_parallel(forest: Forest, base: str, max_workers: Optional[int]) -> MaterializeStats:
    """
    Run one subtree per top-level node on a thread pool.

    Results are collected in input order; the first failure cancels the
    tasks that have not started and is re-raised.
    """
    stats = MaterializeStats()
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="Materializer") as executor:
        futures = [executor.submit(_materialize_nodes, [node], base) for node in forest]
        try:
            for future in futures:
                stats = stats.merge(future.result())
        except Exception:
            for future in futures:
                future.cancel()
            raise
    return stats

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (FILESYSTEM OPERATIONS)
# -----------------------------------------------------------------------------

def _ensure_directory(full: str) -> MaterializeStats:
    """Create a directory (and missing parents) unless it already exists."""
    if os.path.isdir(full):
        logger.debug(f"Folder already present: {full}")
        return MaterializeStats(existing=1)
    if os.path.exists(full):
        raise FilesystemAccessError(f"Cannot create folder '{full}': a file with that name already exists.", full)

    try:
        os.makedirs(full, exist_ok=True)
    except OSError as e:
        raise FilesystemAccessError(f"Failed to create folder '{full}': {e}", full) from e

    logger.debug(f"Folder created: {full}")
    return MaterializeStats(created_dirs=1)


def _ensure_file(full: str) -> MaterializeStats:
    """Create an empty file unless it already exists. Never truncates."""
    if os.path.isfile(full):
        logger.debug(f"File already present: {full}")
        return MaterializeStats(existing=1)
    if os.path.exists(full):
        raise FilesystemAccessError(f"Cannot create file '{full}': a folder with that name already exists.", full)

    parent = os.path.dirname(full)
    if not os.path.isdir(parent):
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as e:
            raise FilesystemAccessError(f"Failed to create folder '{parent}': {e}", parent) from e

    try:
        # Exclusive mode: an entry appearing concurrently is left untouched
        with open(full, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        # Created by another worker in the meantime
        if os.path.isdir(full):
            raise FilesystemAccessError(
                f"Cannot create file '{full}': a folder with that name already exists.", full
            )
        return MaterializeStats(existing=1)
    except OSError as e:
        raise FilesystemAccessError(f"Failed to create file '{full}': {e}", full) from e

    logger.debug(f"File created: {full}")
    return MaterializeStats(created_files=1)
