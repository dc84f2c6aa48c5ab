"""
EasyArgs CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

import yaml
from pydantic import ValidationError
from rich import box
from rich.table import Table

from easyargs.config import find_declaration_file, load_config
from easyargs.console import console, err_console
from easyargs.exceptions import DeclarationError
from easyargs.parser import EasyArgsParser
from easyargs.parser.diagnostics import report_error
from easyargs.utils import setup_logging


def get_parsers() -> ArgumentParser:
    root_parser = ArgumentParser(
        prog="easyargs",
        description="EasyArgs CLI - Inspect and exercise argument declaration files.",
        epilog="Tip: Use 'easyargs parse FILE -- TOKENS' to try a command line.",
    )
    root_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    root_parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Log output format."
    )
    subparsers = root_parser.add_subparsers(dest="command", required=True)

    help_parser = subparsers.add_parser(
        "help", help="Print the help text generated from a declaration file"
    )
    help_parser.add_argument("file", nargs="?", type=Path, help="Declaration file")
    help_parser.add_argument("--program", help="Program name shown in the usage line")

    describe_parser = subparsers.add_parser(
        "describe", help="Show the declarations of a file as a table"
    )
    describe_parser.add_argument("file", nargs="?", type=Path, help="Declaration file")

    parse_parser = subparsers.add_parser(
        "parse", help="Parse tokens against a declaration file"
    )
    parse_parser.add_argument("file", type=Path, help="Declaration file")
    parse_parser.add_argument(
        "tokens", nargs=REMAINDER, help="Tokens to parse (after the program name)"
    )
    return root_parser


def _resolve_file(path: Path | None) -> Path | None:
    if path is not None:
        return path
    found = find_declaration_file()
    if found is None:
        err_console.print(
            "[error]No declaration file given and none found "
            "(easyargs.yaml, easyargs.toml, $EASYARGS_CONFIG).[/]"
        )
    return found


def describe(parser: EasyArgsParser) -> Table:
    table = Table(
        title=str(parser.declarations),
        box=box.SIMPLE,
        header_style="heading",
        expand=False,
    )
    for column in ("kind", "name", "type", "flag", "label", "default", "description"):
        table.add_column(column, style="flag" if column == "flag" else None)
    for definition in parser.declarations.to_definition_list():
        table.add_row(
            definition["kind"],
            definition["name"],
            definition["type"],
            definition.get("flag", ""),
            definition.get("label", ""),
            repr(definition["default"]) if "default" in definition else "",
            definition["description"],
        )
    return table


def results_table(container: object) -> Table:
    table = Table(box=box.SIMPLE, header_style="heading", expand=False)
    table.add_column("field")
    table.add_column("value", style="value")
    table.add_column("type", style="muted")
    for name, value in vars(container).items():
        table.add_row(name, repr(value), type(value).__name__)
    return table


def _load_parser(file: Path, program: str | None) -> EasyArgsParser | None:
    try:
        config = load_config(file)
        declarations = config.to_declarations()
    except (
        OSError,
        ValueError,
        ValidationError,
        yaml.YAMLError,
        DeclarationError,
    ) as error:
        report_error(f"{file}: {error}")
        return None
    return EasyArgsParser(
        declarations, program=program or config.program or file.stem
    )


def run(args: Namespace) -> int:
    file = _resolve_file(args.file)
    if file is None:
        return 1
    parser = _load_parser(file, getattr(args, "program", None))
    if parser is None:
        return 1
    program = parser.program

    if args.command == "help":
        parser.render_help()
        return 0
    if args.command == "describe":
        console.print(describe(parser))
        return 0

    tokens = list(args.tokens)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]
    result = parser.parse([program, *tokens])
    if not result:
        return 1
    console.print(results_table(result.args))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = get_parsers().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
