from __future__ import annotations

"""
Domain Exceptions.

Failures raised by the materialization layer and reported verbatim by the
interface layer.
"""

from typing import Optional


class TreeforgeError(Exception):
    """Base class for all application-level failures."""


class MissingBasePathError(TreeforgeError):
    """Raised when the target base directory is absent or unusable."""

    def __init__(self, message: str, base_path: Optional[str] = None):
        super().__init__(message)
        self.base_path = base_path


class FilesystemAccessError(TreeforgeError):
    """
    Raised when a directory or file cannot be created.

    Attributes:
        path: Absolute target path that failed.
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
