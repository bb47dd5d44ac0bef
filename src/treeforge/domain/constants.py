from __future__ import annotations

"""
Domain Constants.

Centralizes the glyph vocabulary of text-art directory listings, the
rendering connectors and application-wide versioning.
"""

from typing import FrozenSet

CURRENT_CONFIG_VERSION = "1.0.0"

# Separator used both in input lines and in Node.path values
PATH_SEPARATOR = "/"

# Keyword that marks a line as a folder when nothing else decides
FOLDER_KEYWORD = "directory"

# -----------------------------------------------------------------------------
# TREE-DRAWING GLYPHS
# -----------------------------------------------------------------------------
# Vertical bar, branch connector, corner connector, horizontal dash
TREE_GLYPHS: FrozenSet[str] = frozenset("│├└─")

# -----------------------------------------------------------------------------
# RENDERING CONNECTORS
# -----------------------------------------------------------------------------
CONNECTOR_BRANCH = "├── "
CONNECTOR_LAST = "└── "
PREFIX_PIPE = "│   "
PREFIX_SPACE = "    "

ICON_FOLDER = "📁"
ICON_FILE = "📄"
