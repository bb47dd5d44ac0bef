from __future__ import annotations

"""
Tree Renderer.

Converts a parsed forest back into tree-glyph text for previews. Folders are
written with a trailing separator so the output parses back to the same
forest.
"""

from typing import List

from treeforge.domain.constants import (
    CONNECTOR_BRANCH,
    CONNECTOR_LAST,
    ICON_FILE,
    ICON_FOLDER,
    PATH_SEPARATOR,
    PREFIX_PIPE,
    PREFIX_SPACE,
)
from treeforge.domain.tree_models import Forest

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_forest(forest: Forest, show_icons: bool = False) -> List[str]:
    """
    Render a forest as a list of tree-glyph lines.

    Args:
        forest: Root-level nodes to render.
        show_icons: Prefix entries with folder/file icons. Icon output is
                    meant for display only and does not parse back cleanly.

    Returns:
        List[str]: One line per node, in input order.
    """
    lines: List[str] = []
    render_tree_structure(forest, lines, prefix="", show_icons=show_icons)
    return lines


def render_tree_structure(
        nodes: Forest,
        lines: List[str],
        prefix: str = "",
        show_icons: bool = False,
) -> None:
    """
    Recursively append the rendering of the given nodes to an accumulator.

    Uses the standard connectors (├──, └──) and keeps the input order of
    siblings.

    Args:
        nodes: Sibling nodes at the current level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_icons: Prefix entries with folder/file icons.
    """
    total = len(nodes)

    for i, node in enumerate(nodes):
        is_last = (i == total - 1)
        connector = CONNECTOR_LAST if is_last else CONNECTOR_BRANCH

        label = node.name
        if node.is_folder:
            label += PATH_SEPARATOR
        if show_icons:
            icon = ICON_FOLDER if node.is_folder else ICON_FILE
            label = f"{icon} {label}"

        lines.append(f"{prefix}{connector}{label}")

        if node.children:
            new_prefix = prefix + (PREFIX_SPACE if is_last else PREFIX_PIPE)
            render_tree_structure(node.children, lines, prefix=new_prefix, show_icons=show_icons)
