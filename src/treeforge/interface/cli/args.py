from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeforge.utils.i18n import i18n

# Marker for '--log-file' given without a path
DEFAULT_LOG_FILE = "__default__"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeforge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeforge",
        description=i18n.t("app.description"),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_file",
        help=i18n.t("cli.args.input"),
        default=None,
    )
    p.add_argument(
        "-o", "--output-base",
        dest="base_dir",
        help=i18n.t("cli.args.output_base"),
        default=None,
    )

    # --- Preview ---
    p.add_argument("--icons", action="store_true", help=i18n.t("cli.args.icons"))
    p.add_argument("--no-preview", action="store_true", help=i18n.t("cli.args.no_preview"))

    # --- Materialization ---
    p.add_argument("--parallel", action="store_true", help=i18n.t("cli.args.parallel"))
    p.add_argument(
        "--workers",
        dest="max_workers",
        type=int,
        default=None,
        help=i18n.t("cli.args.workers"),
    )
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))

    # --- Configuration and Diagnostic Tools ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))
    p.add_argument(
        "--log-file",
        nargs="?",
        const=DEFAULT_LOG_FILE,
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset options map to None (or are left out) so the merge keeps the
    base configuration value.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_file"] = args.input_file
    overrides["base_dir"] = args.base_dir
    overrides["max_workers"] = args.max_workers

    if args.icons:
        overrides["show_icons"] = True
    if args.no_preview:
        overrides["print_preview"] = False
    if args.parallel:
        overrides["parallel"] = True

    return overrides
