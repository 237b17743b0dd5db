#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for wpreadme.

Usage::

    wpreadme parse readme.txt --format yaml
    wpreadme generate fields.toml -o readme.txt
    wpreadme generate --stdout
    wpreadme normalize readme.txt -o readme.txt

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from wpreadme.cli.commands import cmd_generate, cmd_normalize, cmd_parse
from wpreadme.cli.config import find_config_in_parents, load_config_file, options_from_config
from wpreadme.constants import EXIT_CONFIG_ERROR, EXIT_ERROR, EXIT_INPUT_ERROR
from wpreadme.exceptions import FileError, InvalidInputError, WpReadmeError
from wpreadme.logging_utils import configure_logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WPREADME_CONFIG"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    from wpreadme import __version__

    parser = argparse.ArgumentParser(
        prog="wpreadme",
        description="Parse and generate WordPress plugin readme.txt files.",
    )
    parser.add_argument("--version", action="version", version=f"wpreadme {__version__}")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .yml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    parse_cmd = subparsers.add_parser("parse", help="Parse a readme.txt file into structured data")
    parse_cmd.add_argument("input", help="Readme file to parse (.txt)")
    parse_cmd.add_argument("--format", choices=["json", "yaml", "toml"], default="json", help="Output format")
    parse_cmd.add_argument("-o", "--output", help="Write to this file instead of stdout")

    generate_cmd = subparsers.add_parser("generate", help="Generate a readme.txt from field values")
    generate_cmd.add_argument("fields", nargs="?", help="Field values (.json, .toml or .yaml); omit for defaults")
    generate_cmd.add_argument("-o", "--output", help="Output file (default: readme.txt)")
    mode = generate_cmd.add_mutually_exclusive_group()
    mode.add_argument("--stdout", action="store_true", help="Print the readme instead of writing a file")
    mode.add_argument("--preview", action="store_true", help="Emit an HTML-escaped preview")

    normalize_cmd = subparsers.add_parser("normalize", help="Rewrite a readme.txt in canonical form")
    normalize_cmd.add_argument("input", help="Readme file to normalize (.txt)")
    normalize_cmd.add_argument("-o", "--output", help="Write to this file instead of stdout")

    return parser


def _resolve_config_path(args: argparse.Namespace) -> Path | None:
    if args.no_config:
        return None
    if args.config:
        return Path(args.config)
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return find_config_in_parents()


def main(args: list[str] | None = None) -> int:
    """Execute the wpreadme command-line interface.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; defaults to sys.argv[1:]

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    try:
        configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)
    except OSError as e:
        print(f"Configuration error: cannot open log file {parsed_args.log_file}: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        config_path = _resolve_config_path(parsed_args)
        config = load_config_file(config_path) if config_path else {}
        if config_path:
            logger.debug(f"Loaded configuration from {config_path}")
        parser_options, renderer_options = options_from_config(config)
    except argparse.ArgumentTypeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        if parsed_args.command == "parse":
            return cmd_parse(parsed_args, parser_options)
        if parsed_args.command == "generate":
            return cmd_generate(parsed_args, renderer_options)
        return cmd_normalize(parsed_args, parser_options, renderer_options)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except (InvalidInputError, FileError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except WpReadmeError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


__all__ = ["create_parser", "main"]
