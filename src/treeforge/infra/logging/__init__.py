from __future__ import annotations

from .config import LoggingConfig
from .core import (
    configure_logging,
    get_default_log_path,
    is_configured,
    shutdown_logging,
)
from .handlers import TreeforgeQueueHandler

__all__ = [
    "LoggingConfig",
    "TreeforgeQueueHandler",
    "configure_logging",
    "get_default_log_path",
    "is_configured",
    "shutdown_logging",
]
