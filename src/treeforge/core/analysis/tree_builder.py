from __future__ import annotations

"""
Structure Tree Builder.

Reconstructs the folder hierarchy of a pasted listing from its flat, ordered
lines. Nesting is recovered with an explicit stack of open ancestor folders
keyed by the depth measured by the line classifier.
"""

import logging
from typing import Iterable, Iterator, List

from treeforge.core.analysis.line_classifier import classify_line
from treeforge.domain.constants import PATH_SEPARATOR
from treeforge.domain.tree_models import Forest, Node, NodeKind, ParseFrame

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_structure(text: str) -> Forest:
    """
    Parse a multi-line structure description into a forest.

    The text is not trimmed as a whole, so the first line keeps its depth.

    Args:
        text: Raw pasted text (any newline convention).

    Returns:
        Forest: Root-level nodes; empty when nothing was classifiable.
    """
    return build_forest((text or "").splitlines())


def build_forest(lines: Iterable[str]) -> Forest:
    """
    Build the node forest from an ordered sequence of raw lines.

    A frame is popped when the incoming line is at the same depth or
    shallower, so equal depth means sibling. The sentinel frame at depth -1
    is never popped and collects the root-level nodes.

    Args:
        lines: Raw input lines in display order.

    Returns:
        Forest: Root-level nodes in input order.
    """
    forest: Forest = []
    stack: List[ParseFrame] = [ParseFrame(depth=-1, path="", children=forest)]

    for raw_line in lines:
        classified = classify_line(raw_line)
        if classified is None:
            continue

        # Unwind every frame that cannot parent this line
        while len(stack) > 1 and stack[-1].depth >= classified.depth:
            stack.pop()

        parent = stack[-1]
        if parent.path:
            path = f"{parent.path}{PATH_SEPARATOR}{classified.name}"
        else:
            path = classified.name

        node = Node(name=classified.name, kind=classified.kind, path=path)
        parent.children.append(node)

        if node.kind is NodeKind.FOLDER and node.children is not None:
            stack.append(ParseFrame(depth=classified.depth, path=path, children=node.children))

    logger.debug(f"Parsed {count_nodes(forest)} entries into {len(forest)} root nodes.")
    return forest


def iter_nodes(forest: Forest) -> Iterator[Node]:
    """Yield every node of the forest in depth-first pre-order."""
    for node in forest:
        yield node
        if node.children:
            yield from iter_nodes(node.children)


def count_nodes(forest: Forest) -> int:
    """Count all files and folders of the forest."""
    return sum(1 for _ in iter_nodes(forest))
