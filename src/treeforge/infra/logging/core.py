from __future__ import annotations

"""
Logging Bootstrap.

Routes every record through a single QueueHandler on the root logger. A
QueueListener thread owns the console and file handlers, so materializer
workers never wait on log I/O. Configuring again with different settings
replaces the running listener.
"""

import atexit
import logging
import os
import queue
from dataclasses import dataclass
from logging.handlers import QueueListener
from typing import List, Optional

from treeforge.infra.fs import get_user_data_dir
from treeforge.infra.logging.config import LoggingConfig
from treeforge.infra.logging.handlers import (
    TreeforgeQueueHandler,
    build_console_handler,
    build_file_handler,
)

LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "treeforge.log"


@dataclass
class _ActiveLogging:
    config: LoggingConfig
    queue_handler: TreeforgeQueueHandler
    listener: QueueListener


_active: Optional[_ActiveLogging] = None


def get_default_log_path() -> str:
    """Return <user data dir>/logs/treeforge.log."""
    return os.path.join(get_user_data_dir(), LOG_DIR_NAME, LOG_FILE_NAME)


def is_configured() -> bool:
    return _active is not None


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Install the queue-based logging setup for this process.

    Calling it again with an equal config is a no-op. A different config
    shuts the previous listener down first.

    Args:
        cfg: Requested settings.

    Returns:
        logging.Logger: The root logger.
    """
    global _active
    root = logging.getLogger()

    if _active is not None and _active.config == cfg:
        return root
    shutdown_logging()

    level = cfg.level_number
    root.setLevel(level)

    targets: List[logging.Handler] = []
    if cfg.console:
        targets.append(build_console_handler(level))
    if cfg.log_file:
        file_handler = build_file_handler(cfg.log_file, level, cfg.max_bytes, cfg.backup_count)
        if file_handler is not None:
            targets.append(file_handler)

    if not targets:
        return root

    log_queue: queue.Queue = queue.Queue()
    queue_handler = TreeforgeQueueHandler(log_queue)
    listener = QueueListener(log_queue, *targets, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    _active = _ActiveLogging(config=cfg, queue_handler=queue_handler, listener=listener)
    return root


def shutdown_logging() -> None:
    """Flush pending records and detach everything configure_logging() installed."""
    global _active
    root = logging.getLogger()

    for handler in list(root.handlers):
        if isinstance(handler, TreeforgeQueueHandler):
            root.removeHandler(handler)
            handler.close()

    if _active is None:
        return
    active, _active = _active, None

    active.listener.stop()
    for handler in active.listener.handlers:
        handler.close()


atexit.register(shutdown_logging)
