from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and merging
of configuration sources (defaults, saved session and CLI overrides), reading
the structure description, pipeline execution and result rendering.
"""

import json
import logging
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treeforge.core.pipeline.engine import run_pipeline
from treeforge.core.pipeline.validator import validate_config
from treeforge.domain.config import get_default_config, load_config, save_config
from treeforge.domain.pipeline_models import StructureResult
from treeforge.infra.fs import read_structure_stream, read_structure_text
from treeforge.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from treeforge.interface.cli import args as cli_args
from treeforge.utils.i18n import i18n

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

_STDIN_MARKERS = ("", "-")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 unusable input).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    log_file = args.log_file
    if log_file == cli_args.DEFAULT_LOG_FILE:
        log_file = get_default_log_path()
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides), strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        if save_config(clean_conf):
            print(i18n.t("cli.status.config_saved"), file=sys.stderr)
        else:
            logger.warning(i18n.t("cli.errors.config_not_saved"))

    # 5. Structure acquisition
    input_file = clean_conf["input_file"]
    from_stdin = input_file in _STDIN_MARKERS
    if not from_stdin and not os.path.isfile(input_file):
        msg = i18n.t("cli.errors.input_not_exist", path=input_file)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        if from_stdin:
            structure_text = read_structure_stream(sys.stdin)
        else:
            structure_text = read_structure_text(input_file)
    except (OSError, UnicodeDecodeError) as e:
        # Undecodable bytes are unusable input, like an unreadable file
        source = "<stdin>" if from_stdin else input_file
        msg = i18n.t("cli.errors.input_unreadable", path=source, error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 6. Pipeline execution phase
    try:
        result = run_pipeline(structure_text, clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, show_preview=clean_conf["print_preview"])

    if result.ok:
        return EXIT_OK
    if result.summary.get("empty"):
        return EXIT_BAD_INPUT
    return EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: StructureResult, show_preview: bool = True) -> None:
    """
    Format and print the execution result.

    The preview goes to stdout even when creation failed, so the user can
    see what was attempted; errors go to stderr verbatim.
    """
    if show_preview and result.preview_lines:
        print(i18n.t("cli.status.preview"))
        for line in result.preview_lines:
            print(line)
        print()

    if not result.ok:
        msg = i18n.t("cli.errors.empty") if result.summary.get("empty") else result.error
        print(f"ERROR: {msg}", file=sys.stderr)
        return

    print(i18n.t("cli.status.counts", count=result.node_count))

    if result.dry_run:
        print(i18n.t("cli.status.dry_run"))
        if result.base_path:
            print(i18n.t("cli.status.base_dir", path=result.base_path))
            print(i18n.t("cli.status.planned", count=result.summary.get("will_create", 0)))
            for action in result.planned:
                marker = "=" if action["exists"] else "+"
                print(f"  {marker} [{action['kind']}] {action['path']}")
        return

    print(i18n.t("cli.status.success"))
    print(i18n.t("cli.status.base_dir", path=result.base_path))
    print(i18n.t(
        "cli.status.created",
        dirs=result.created_dirs,
        files=result.created_files,
        existing=result.existing,
    ))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
