from __future__ import annotations

"""
Logging Handler Factories.

Builds the handlers driven by the queue listener (stderr console and rotating
file) and the QueueHandler type that marks the root-logger entry point as
ours.
"""

import logging
import os
import sys
from logging.handlers import QueueHandler, RotatingFileHandler
from typing import Optional

from treeforge.infra.fs import safe_mkdir
from treeforge.infra.logging.config import CONSOLE_FORMAT, DATE_FORMAT, FILE_FORMAT


class TreeforgeQueueHandler(QueueHandler):
    """Root logger handler feeding the treeforge listener thread."""


def build_console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def build_file_handler(
        path: str,
        level: int,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open a rotating log file, creating its folder first.

    A file that cannot be opened is reported on stderr and skipped, so the run
    continues with console output only.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None on I/O failure.
    """
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(path)))
    if not ok:
        sys.stderr.write(f"treeforge: cannot create log folder for '{path}': {err}\n")
        return None

    try:
        handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"treeforge: cannot open log file '{path}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler
