from __future__ import annotations

"""
Unit tests for the Line Classifier.

Verifies:
1. Depth measurement over whitespace and tree glyphs.
2. Name cleaning (glyph removal, single trailing separator).
3. The ordered folder/file inference rules, including the default-to-file policy.
"""

import pytest

from treeforge.core.analysis.line_classifier import (
    classify_line,
    clean_name,
    infer_kind,
    measure_depth,
)
from treeforge.domain.tree_models import NodeKind

# -----------------------------------------------------------------------------
# SKIPPED LINES
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("line", ["", "   ", "\t", "│", "│   ", "├──", "└── /"])
def test_blank_or_glyph_only_lines_are_skipped(line: str) -> None:
    """Lines with nothing left after cleaning contribute no node."""
    assert classify_line(line) is None

# -----------------------------------------------------------------------------
# DEPTH
# -----------------------------------------------------------------------------

def test_depth_counts_leading_spaces() -> None:
    assert measure_depth("src/") == 0
    assert measure_depth("  index.js") == 2
    assert measure_depth("    helper.js") == 4


def test_depth_counts_glyphs_and_tabs_as_single_characters() -> None:
    assert measure_depth("├── src/") == 4
    assert measure_depth("│   └── main.py") == 8
    assert measure_depth("\t  │ x") == 5


def test_depth_stops_at_first_name_character() -> None:
    """Glyphs inside the name do not add to the depth."""
    assert measure_depth("a │ b") == 0


def test_glyph_child_is_deeper_than_glyph_parent() -> None:
    """A '│   └──' line must nest under the preceding '├──' line."""
    parent = classify_line("├── src/")
    child = classify_line("│   └── main.py")

    assert parent is not None and child is not None
    assert child.depth > parent.depth

# -----------------------------------------------------------------------------
# NAME CLEANING
# -----------------------------------------------------------------------------

def test_clean_name_strips_glyphs_anywhere() -> None:
    assert clean_name("├── src/") == "src"
    assert clean_name("└──main.py") == "main.py"
    assert clean_name("foo│bar.txt") == "foobar.txt"


def test_clean_name_removes_only_one_trailing_separator() -> None:
    assert clean_name("assets//") == "assets/"


def test_clean_name_keeps_inner_separators_and_ascii_dashes() -> None:
    assert clean_name("src/utils/") == "src/utils"
    assert clean_name("my-app/") == "my-app"

# -----------------------------------------------------------------------------
# KIND INFERENCE
# -----------------------------------------------------------------------------

def test_trailing_separator_marks_folder() -> None:
    result = classify_line("src/")

    assert result is not None
    assert result.name == "src"
    assert result.kind is NodeKind.FOLDER


def test_trailing_separator_wins_over_extension() -> None:
    """Rule 1 is checked before the extension rule: 'v1.2/' is a folder."""
    assert infer_kind("v1.2", "v1.2/") is NodeKind.FOLDER
    assert classify_line("├── .github/").kind is NodeKind.FOLDER


def test_inner_separator_without_dot_marks_folder() -> None:
    """Inherited ambiguity: 'src/README' is taken as a folder."""
    result = classify_line("src/README")

    assert result is not None
    assert result.name == "src/README"
    assert result.kind is NodeKind.FOLDER


def test_inner_separator_with_dot_is_a_file() -> None:
    result = classify_line("src/index.js")

    assert result is not None
    assert result.kind is NodeKind.FILE


@pytest.mark.parametrize("line", ["index.js", "  README.md", ".env", "└── Directory.md"])
def test_names_with_dot_are_files(line: str) -> None:
    assert classify_line(line).kind is NodeKind.FILE


@pytest.mark.parametrize("line", ["My Directory", "docs DIRECTORY", "│   └── directory_of_things"])
def test_directory_keyword_marks_folder(line: str) -> None:
    assert classify_line(line).kind is NodeKind.FOLDER


@pytest.mark.parametrize("line", ["notes", "Makefile", "  LICENSE"])
def test_extensionless_names_default_to_file(line: str) -> None:
    """Documented limitation: without any marker the entry is a file."""
    assert classify_line(line).kind is NodeKind.FILE


def test_classified_line_carries_depth_name_and_kind() -> None:
    result = classify_line("    helper.js  ")

    assert result is not None
    assert result.depth == 4
    assert result.name == "helper.js"
    assert result.kind is NodeKind.FILE
