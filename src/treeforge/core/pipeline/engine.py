from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete run:
1. Validates the configuration.
2. Parses the structure text into a forest.
3. Renders the preview.
4. Plans (dry run) or materializes the forest under the base directory.
"""

import logging
from typing import Any, Dict, Optional

from treeforge.core.analysis.tree_builder import count_nodes, parse_structure
from treeforge.core.analysis.tree_renderer import render_forest
from treeforge.core.pipeline.validator import validate_config
from treeforge.core.services.materializer import materialize, plan_materialization
from treeforge.domain.errors import TreeforgeError
from treeforge.domain.pipeline_models import (
    StructureResult,
    create_error_result,
    create_success_result,
)
from treeforge.domain.tree_models import forest_to_dicts
from treeforge.infra.fs import normalize_path

logger = logging.getLogger(__name__)

EMPTY_STRUCTURE_MSG = "No valid structure found."


def run_pipeline(
        structure_text: str,
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> StructureResult:
    """
    Parse a structure description and create it on disk.

    An input without classifiable lines is reported as a failed result with
    summary['empty'] set, so the caller can ask for new input. Filesystem
    failures are returned with their message verbatim; whatever was created
    before the failure stays in place.

    Args:
        structure_text: Raw pasted structure description.
        config: The configuration dictionary (raw or partial).
        dry_run: If True, plan the operations without touching the filesystem.

    Returns:
        StructureResult: Object containing status, preview and counters.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config Validation
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg["base_dir"])

    # -------------------------------------------------------------------------
    # 2) Parsing & Preview
    # -------------------------------------------------------------------------
    forest = parse_structure(structure_text)
    if not forest:
        logger.warning(EMPTY_STRUCTURE_MSG)
        return create_error_result(
            EMPTY_STRUCTURE_MSG, base_path, dry_run=dry_run, summary_extra={"empty": True}
        )

    node_count = count_nodes(forest)
    serialized = forest_to_dicts(forest)
    preview_lines = render_forest(forest, show_icons=cfg["show_icons"])
    logger.debug("Structure preview:\n" + "\n".join(preview_lines))

    summary: Dict[str, Any] = {
        "empty": False,
        "root_nodes": len(forest),
        "parallel": cfg["parallel"],
    }

    # -------------------------------------------------------------------------
    # 3) Dry Run Planning
    # -------------------------------------------------------------------------
    if dry_run:
        planned = []
        if base_path:
            try:
                planned = plan_materialization(forest, base_path)
            except TreeforgeError as e:
                logger.error(str(e))
                return create_error_result(
                    str(e), base_path, dry_run=True, node_count=node_count,
                    forest=serialized, preview_lines=preview_lines, summary_extra=summary,
                )
        summary["will_create"] = sum(1 for action in planned if not action.exists)
        logger.info(f"Dry run complete: {node_count} entries parsed.")
        return create_success_result(
            base_path, serialized, preview_lines, node_count,
            dry_run=True, planned=planned, summary_extra=summary,
        )

    # -------------------------------------------------------------------------
    # 4) Materialization
    # -------------------------------------------------------------------------
    try:
        stats = materialize(
            forest,
            base_path,
            parallel=cfg["parallel"],
            max_workers=cfg["max_workers"],
        )
    except TreeforgeError as e:
        logger.error(f"Materialization aborted: {e}")
        return create_error_result(
            str(e), base_path, node_count=node_count,
            forest=serialized, preview_lines=preview_lines, summary_extra=summary,
        )

    logger.info("Pipeline execution finished.")
    return create_success_result(
        base_path, serialized, preview_lines, node_count,
        stats=stats, summary_extra=summary,
    )
