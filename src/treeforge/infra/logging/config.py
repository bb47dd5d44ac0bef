from __future__ import annotations

"""
Logging Settings.

Describes the log output a CLI run asks for: console verbosity on stderr and
an optional rotating file. File records carry the thread name so lines from
parallel materializer workers can be told apart.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "treeforge: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(threadName)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# A run writes about one debug line per entry; 512 KiB holds many runs
LOG_FILE_MAX_BYTES = 512 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Requested logging setup. Equal configs are applied only once.

    Attributes:
        level: Level name ('DEBUG', 'INFO', ...). Unknown names mean INFO.
        console: Write records to stderr.
        log_file: Path of the rotating log file, or None for console only.
        max_bytes: Size that triggers a rollover of the log file.
        backup_count: Archived log files to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = LOG_FILE_MAX_BYTES
    backup_count: int = LOG_FILE_BACKUPS

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """Settings for one CLI invocation: INFO, or DEBUG with --debug."""
        return cls(level="DEBUG" if debug else "INFO", log_file=log_file)

    @property
    def level_number(self) -> int:
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
