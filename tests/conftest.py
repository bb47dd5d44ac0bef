from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared structure samples used across unit and integration tests.
3. Isolation helpers for the user data directory and the logging subsystem.
"""

import os
import sys
from pathlib import Path
from typing import Iterator
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treeforge.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def indented_structure() -> str:
    """Return the canonical indentation-based sample structure."""
    return (
        "src/\n"
        "  index.js\n"
        "  utils/\n"
        "    helper.js\n"
        "README.md\n"
    )


@pytest.fixture
def glyph_structure() -> str:
    """Return a structure written with tree-drawing characters."""
    return (
        "my-app/\n"
        "├── app/\n"
        "│   ├── main.py\n"
        "│   └── templates/\n"
        "│       └── base.html\n"
        "├── requirements.txt\n"
        "└── run.sh\n"
    )


@pytest.fixture
def user_data_dir(tmp_path: Path) -> Iterator[Path]:
    """
    Redirect the application data directory to a temporary folder.

    Prevents tests from reading or writing the real user configuration.
    """
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    with patch("treeforge.domain.config.get_user_data_dir", return_value=str(data_dir)):
        with patch("treeforge.infra.logging.core.get_user_data_dir", return_value=str(data_dir)):
            yield data_dir


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Stop the log listener and detach its handler before and after a test."""
    shutdown_logging()
    yield
    shutdown_logging()
