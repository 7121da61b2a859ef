#!/usr/bin/env python3
"""
toast CLI
=========

Entry point for the toast build tool.

Usage:
    toast incremental [--debug] INPUT_DIR [--output-dir DIR]
    toast --version

Sequence: crash reporter -> logging -> node version gate -> npm bin
discovery -> import map + output dir -> CompileConfig -> engine.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from toast.core.commands import CommandRunner, run_command
from toast.core.config import CompileConfig, Settings, build_compile_config
from toast.core.engine import Engine, load_engine, run_incremental
from toast.core.errors import ToastError
from toast.core.version import VERSION
from toast.scripts import crash_reporter
from toast.scripts.cli_output import CLIOutput
from toast.scripts.node_check import check_node_version, get_npm_bin_dir

_logger = logging.getLogger("toast")

INCREMENTAL = "incremental"


# ============================================================
# LOGGING
# ============================================================


def setup_logging(level: str) -> logging.Logger:
    """
    Attach a stderr handler to the "toast" logger.

    Args:
        level: Level name ("debug", "info", "warning", ...); unknown names
            fall back to WARNING

    Returns:
        Configured logger instance
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    _logger.setLevel(numeric_level)
    if not _logger.handlers:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        _logger.addHandler(stderr_handler)
    return _logger


# ============================================================
# ARGUMENTS
# ============================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toast", description="Incremental web module compiler")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    incremental = subparsers.add_parser(INCREMENTAL, help="Incrementally compile a project")
    incremental.add_argument("--debug", action="store_true", help="Enable debug output")
    incremental.add_argument("input_dir", type=Path, metavar="INPUT_DIR", help="Project root directory")
    incremental.add_argument(
        "--output-dir", "-o", dest="output_dir", type=Path, metavar="DIR",
        help="Output directory (default: INPUT_DIR/public)",
    )
    return parser


# ============================================================
# PIPELINE
# ============================================================


def run(
    args: argparse.Namespace,
    settings: Settings,
    runner: CommandRunner = run_command,
    engine: Optional[Engine] = None,
) -> Any:
    """
    Gate, discover, assemble and delegate.

    Returns:
        The engine's result, unchanged
    """
    node_version = check_node_version(runner)
    _logger.info(f"Using node {node_version}")

    npm_bin_dir = get_npm_bin_dir(runner)

    # Resolved before build_compile_config, which creates the output directory
    if engine is None:
        engine = load_engine(settings)

    config: CompileConfig = build_compile_config(
        debug=args.debug,
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        npm_bin_dir=npm_bin_dir,
    )
    return run_incremental(config, engine)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit code: 0 on success, 1 when a ToastError was reported,
        or the engine's own integer result
    """
    crash_reporter.install()

    settings = Settings.from_env()
    args = build_parser().parse_args(argv)
    setup_logging("debug" if args.debug else settings.log_level)

    try:
        result = run(args, settings)
    except ToastError as e:
        _logger.debug("Command failed", exc_info=True)
        CLIOutput.detect(no_color=settings.no_color).error_report(e)
        return 1

    if isinstance(result, int) and not isinstance(result, bool):
        return result
    return 0


if __name__ == "__main__":
    sys.exit(main())
