from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, cross-platform data directory resolution
and reading of structure description files.
"""

import io
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from treeforge.infra.fs import (
    get_user_data_dir,
    normalize_path,
    read_structure_stream,
    read_structure_text,
    safe_mkdir,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            # Avoid physical side effects during OS-spoofing
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "Treeforge" in path
                assert path.lower().startswith(os.path.abspath(mock_appdata).lower())


def test_get_user_data_dir_unix() -> None:
    """Verify resolution of ~/.treeforge on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.treeforge")


def test_get_user_data_dir_survives_unwritable_home() -> None:
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/home/readonly"):
            with patch("os.makedirs", side_effect=PermissionError("denied")):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/.treeforge")


def test_normalize_path_expansion() -> None:
    """Verify expansion of environment variables and user shortcuts."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

        with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
            path = normalize_path("~/code")
            assert "code" in Path(path).parts


def test_normalize_path_empty_and_fallback(tmp_path: Path) -> None:
    assert normalize_path("") == ""
    assert normalize_path("   ") == ""
    assert normalize_path(None) == ""
    assert normalize_path("", fallback=str(tmp_path)) == str(tmp_path)

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS TESTS
# -----------------------------------------------------------------------------

def test_safe_mkdir_success(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "nested" / "dir"
    success, err = safe_mkdir(str(target))

    assert success is True
    assert err is None
    assert target.exists()


def test_safe_mkdir_permission_error() -> None:
    with patch("os.makedirs", side_effect=OSError("Permission Denied")):
        success, err = safe_mkdir("/root/forbidden")
        assert success is False
        assert "Permission Denied" in err


def test_read_structure_text_drops_bom(tmp_path: Path) -> None:
    layout = tmp_path / "layout.txt"
    layout.write_bytes("\ufeffsrc/\n  main.py\n".encode("utf-8"))

    assert read_structure_text(str(layout)) == "src/\n  main.py\n"


def test_read_structure_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_structure_text(str(tmp_path / "missing.txt"))


def test_read_structure_text_rejects_invalid_utf8(tmp_path: Path) -> None:
    layout = tmp_path / "layout.txt"
    layout.write_bytes(b"caf\xe9.py\n")

    with pytest.raises(UnicodeDecodeError):
        read_structure_text(str(layout))


def test_read_structure_stream_drops_bom() -> None:
    assert read_structure_stream(io.StringIO("\ufeffsrc/\n")) == "src/\n"
    assert read_structure_stream(io.StringIO("src/\n\ufeff")) == "src/\n\ufeff"
