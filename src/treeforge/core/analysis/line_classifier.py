from __future__ import annotations

"""
Line Classifier.

Turns one raw line of a pasted directory listing into its nesting depth,
a cleaned display name and an inferred entry type.

Type inference is a fixed heuristic. Without a trailing slash, a slash in
the line or the word 'directory', an extension-less name is classified as
a file: 'notes' and 'Makefile' are files, 'src/README' is a folder.
"""

import logging
from typing import Optional

from treeforge.domain.constants import FOLDER_KEYWORD, PATH_SEPARATOR, TREE_GLYPHS
from treeforge.domain.tree_models import ClassifiedLine, NodeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_line(raw_line: str) -> Optional[ClassifiedLine]:
    """
    Classify a single raw input line.

    Args:
        raw_line: Untrimmed line as it appears in the pasted text.

    Returns:
        Optional[ClassifiedLine]: The classification, or None when the line
                                  is blank or holds only tree glyphs.
    """
    trimmed = raw_line.strip()
    if not trimmed:
        return None

    name = clean_name(trimmed)
    if not name:
        return None

    return ClassifiedLine(
        depth=measure_depth(raw_line),
        name=name,
        kind=infer_kind(name, trimmed),
    )


def measure_depth(line: str) -> int:
    """
    Count the leading whitespace and tree-drawing characters of a line.

    The count is only meaningful relative to other lines of the same input;
    tabs and glyphs each count as one character.
    """
    depth = 0
    for ch in line:
        if ch.isspace() or ch in TREE_GLYPHS:
            depth += 1
            continue
        break
    return depth


def clean_name(trimmed_line: str) -> str:
    """
    Derive the display name from a trimmed line.

    Removes every tree glyph, then a single trailing path separator.
    """
    name = "".join(ch for ch in trimmed_line if ch not in TREE_GLYPHS)
    if name.endswith(PATH_SEPARATOR):
        name = name[:-1]
    return name.strip()


def infer_kind(name: str, trimmed_line: str) -> NodeKind:
    """
    Decide whether a line denotes a folder or a file.

    Rules are applied in order, first match wins:
    1. Line ends with '/'                                -> folder
    2. Line contains '/' and the name has no '.'         -> folder
    3. Name contains '.'                                 -> file
    4. Line contains 'directory' (any case)              -> folder
    5. Anything else                                     -> file

    Args:
        name: Cleaned name (see clean_name).
        trimmed_line: Original line with surrounding whitespace removed.

    Returns:
        NodeKind: The inferred kind; never undecided.
    """
    if trimmed_line.endswith(PATH_SEPARATOR):
        return NodeKind.FOLDER
    if PATH_SEPARATOR in trimmed_line and "." not in name:
        return NodeKind.FOLDER
    if "." in name:
        return NodeKind.FILE
    if FOLDER_KEYWORD in trimmed_line.lower():
        return NodeKind.FOLDER

    logger.debug(f"No type marker for '{name}', defaulting to file.")
    return NodeKind.FILE
