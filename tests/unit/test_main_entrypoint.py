from __future__ import annotations

"""
Unit tests for the Entry Point Supervisor.

Verifies that the console script target installs the global exception hook
and forwards arguments to the CLI controller.
"""

import importlib
import os
import sys
from unittest.mock import patch

import pytest

SETUP_PY = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "setup.py")


@pytest.fixture
def entry_module():
    """Import treeforge.main fresh and restore the interpreter hook afterwards."""
    previous = sys.excepthook
    module = importlib.reload(importlib.import_module("treeforge.main"))
    yield module
    sys.excepthook = previous


def test_console_script_targets_supervised_entry_point() -> None:
    with open(SETUP_PY, "r", encoding="utf-8") as f:
        content = f.read()

    assert "'treeforge=treeforge.main:main'" in content


def test_entry_point_installs_exception_hook(entry_module) -> None:
    assert sys.excepthook is entry_module.global_exception_handler


def test_entry_point_forwards_arguments(entry_module) -> None:
    with patch("treeforge.interface.cli.app.main", return_value=0) as cli_main:
        code = entry_module.main(["--dry-run"])

    assert code == 0
    cli_main.assert_called_once_with(["--dry-run"])


def test_exception_hook_reports_and_exits(entry_module, capsys) -> None:
    error = RuntimeError("disk on fire")

    with pytest.raises(SystemExit) as exc_info:
        entry_module.global_exception_handler(RuntimeError, error, None)

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "CRITICAL ERROR (TREEFORGE)" in err
    assert "disk on fire" in err
