#!/usr/bin/env python3
"""CLI entry point for the tgaction GitHub Action.

Usage:
    python -m tgaction [run] [--working-directory DIR] [--verbose]

Commands:
    run     Install tools, run Terragrunt and publish the result (default)

Inputs are read from INPUT_* and GITHUB_* environment variables, as set by
the GitHub Actions runner.
"""

from __future__ import annotations

import argparse
import logging
import sys

from tgaction.commands import cmd_run_action
from tgaction.infrastructure.logs import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tgaction",
        description="Run Terragrunt in GitHub Actions and report the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  INPUT_TF_VERSION, INPUT_TG_VERSION, INPUT_TG_COMMAND  (required)
  INPUT_TG_DIR, INPUT_TG_COMMENT, INPUT_TG_PLAN_FILE, INPUT_TG_REDIRECT_OUTPUT
  INPUT_PRE_EXEC_<N>  YAML hook definitions (set_env / write_file)

Examples:
  INPUT_TF_VERSION=1.5.7 INPUT_TG_VERSION=0.50.0 INPUT_TG_COMMAND=plan python -m tgaction
  python -m tgaction run --working-directory infra/prod
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    parser_run = subparsers.add_parser(
        "run",
        help="Install tools, run Terragrunt and publish the result",
    )
    # Options are accepted before and after "run"; the subcommand only
    # overrides what it was given
    for p, default_dir, default_verbose in (
        (parser, None, False),
        (parser_run, argparse.SUPPRESS, argparse.SUPPRESS),
    ):
        p.add_argument(
            "--working-directory",
            default=default_dir,
            help="Directory to run Terragrunt in (overrides INPUT_TG_DIR)",
        )
        p.add_argument(
            "--verbose",
            action="store_true",
            default=default_verbose,
            help="Enable debug logging",
        )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.command in (None, "run"):
        return cmd_run_action(working_directory=args.working_directory)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
