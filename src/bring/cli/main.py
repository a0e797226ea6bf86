# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Bring command-line interface."""

import argparse
import json
import sys
from pathlib import Path

from bring.config import CONFIG_FILE_NAME, OUTPUT_FORMATS, BringConfig, ConfigError, load_config
from bring.convert import extract_attributes, to_json_text, to_yaml_text
from bring.model import Document
from bring.parser import BringFileError, ParseError, parse_file

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Bring CLI."""
    parser = argparse.ArgumentParser(
        prog="bring",
        description="Bring - configuration file parser",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that Bring files parse",
        description="Parse each file and report syntax errors with their location.",
    )
    check_parser.add_argument("files", nargs="+", type=Path, help="Bring files to check")

    # convert subcommand
    convert_parser = subparsers.add_parser(
        "convert",
        help="Print the data of a Bring file as JSON or YAML",
        description="Convert a Bring file to plain JSON or YAML. Attributes and schemas are dropped.",
    )
    convert_parser.add_argument("file", type=Path, help="Bring file to convert")
    convert_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from the configuration, else json)",
    )
    convert_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation width (default: from the configuration, else 2)",
    )

    # attributes subcommand
    attributes_parser = subparsers.add_parser(
        "attributes",
        help="Print the attributes of a Bring file as flat paths",
        description="Print every attribute as a JSON mapping from dotted path to value.",
    )
    attributes_parser.add_argument("file", type=Path, help="Bring file to inspect")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _load_cli_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "check":
        return _cmd_check(args, config)
    if args.command == "convert":
        return _cmd_convert(args, config)
    if args.command == "attributes":
        return _cmd_attributes(args, config)
    return 0


def _load_cli_config(path: Path | None) -> BringConfig:
    """Load the explicit config file, else ./.bring.yaml if it exists, else defaults."""
    if path is not None:
        return load_config(path)
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_config(default_path)
    return BringConfig()


def _read_document(path: Path, config: BringConfig) -> Document | None:
    """Parse *path*, printing the error and returning None on failure."""
    try:
        return parse_file(path, config.parser_options())
    except BringFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    except ParseError as exc:
        print(f"Error: {path}: {exc}", file=sys.stderr)
    return None


def _cmd_check(args: argparse.Namespace, config: BringConfig) -> int:
    """Handle the check subcommand."""
    has_errors = False
    for path in args.files:
        if _read_document(path, config) is None:
            has_errors = True
        else:
            print(f"OK: {path}")
    return 1 if has_errors else 0


def _cmd_convert(args: argparse.Namespace, config: BringConfig) -> int:
    """Handle the convert subcommand."""
    document = _read_document(args.file, config)
    if document is None:
        return 1

    output_format = args.format or config.output_format
    if output_format == "yaml":
        sys.stdout.write(to_yaml_text(document))
        return 0

    indent = args.indent if args.indent is not None else config.indent
    if indent < 0:
        print("Error: --indent must not be negative.", file=sys.stderr)
        return 1
    print(to_json_text(document, indent=indent))
    return 0


def _cmd_attributes(args: argparse.Namespace, config: BringConfig) -> int:
    """Handle the attributes subcommand."""
    document = _read_document(args.file, config)
    if document is None:
        return 1
    print(json.dumps(extract_attributes(document), indent=config.indent, ensure_ascii=False))
    return 0
