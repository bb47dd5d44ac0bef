from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution, directory helpers and reading of
structure description files. Acts as an abstraction over the 'os' module to
ensure uniform behavior across Windows and Unix-like systems.
"""

import os
from typing import Optional, TextIO, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Treeforge"
UNIX_APP_DIR_NAME = ".treeforge"

# Decoded form of the UTF-8 byte order mark
BOM = "\ufeff"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/Treeforge
    - Linux/Mac: ~/.treeforge

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    # Idempotent directory creation; an unwritable home must not block startup
    safe_mkdir(path)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty; an empty
    fallback yields an empty string so callers can detect a missing path.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path, or "" when neither value is set.
    """
    p = (path or "").strip()
    if not p:
        p = (fallback or "").strip()
    if not p:
        return ""
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def read_structure_text(path: str) -> str:
    """
    Read a structure description file as UTF-8 text.

    A leading byte order mark (common in files saved by Windows editors) is
    dropped so it does not end up in the first entry name.

    Args:
        path: File to read.

    Returns:
        str: File contents.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


def read_structure_stream(stream: TextIO) -> str:
    """
    Read a structure description from an open text stream (usually stdin).

    Applies the same byte order mark handling as read_structure_text().
    """
    text = stream.read()
    if text.startswith(BOM):
        text = text[len(BOM):]
    return text
