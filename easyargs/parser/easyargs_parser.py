# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `EasyArgsParser`, the facade that bundles the three
artifacts EasyArgs derives from one `DeclarationSet`: the result container,
the parser and the help text.

Key Features:
- Table-style declaration of required, optional and boolean arguments
- Typed result container generated from the declarations
- Single-pass parsing with C-style scalar conversion
- Lenient (warn) or strict (error) handling of unknown tokens
- Help rendering that always matches the parsing rules
- Optional `--help` switch

Public Interface:
- `container_type`: The generated dataclass type.
- `make_defaults()`: A container populated with defaults.
- `parse(argv)`: Non-raising parse returning a `ParseResult`.
- `parse_args(argv)`: Raising parse returning the container.
- `format_help()` / `render_help()`: Help text as a string / on stdout.

Example Usage:
    parser = EasyArgsParser(
        DeclarationSet(
            required=[RequiredArgument("int", "count", "count", "Number of items")],
            optional=[
                OptionalArgument("string", "name", "anon", "--name", "name", "Who")
            ],
            boolean=[BooleanArgument("verbose", "--verbose", "Print progress")],
        ),
        program="greet",
    )

    result = parser.parse(["greet", "5", "--name", "Ada"])
    if not result:
        parser.render_help()
        sys.exit(1)
    result.args.count  # 5
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console

from easyargs.console import console as default_console
from easyargs.logger import logger
from easyargs.parser.argument import ArgumentKind, BooleanArgument
from easyargs.parser.declarations import DeclarationSet
from easyargs.parser.engine import ParseResult, parse
from easyargs.parser.help import format_help, get_usage, render_help
from easyargs.signals import HelpSignal
from easyargs.utils import get_program_invocation

HELP_FLAG = "--help"


class EasyArgsParser:
    """
    Declaration-driven command-line parser.

    Features:
    - Positional required arguments, consumed in declared order.
    - Flagged optional arguments with typed defaults.
    - Boolean switches.
    - Help rendering consistent with the declarations.
    - Configurable handling of unknown tokens via the declaration set.
    """

    def __init__(
        self,
        declarations: DeclarationSet,
        program: str | None = None,
        add_help: bool = False,
        console: Console | None = None,
    ) -> None:
        """
        Initialize the EasyArgsParser.

        Args:
            declarations (DeclarationSet): The argument table.
            program (str | None): Name shown in usage; defaults to argv[0] at parse
                time or the current program invocation.
            add_help (bool): Declare a `--help` switch that renders help instead of
                parsing.
            console (Console | None): Console used for help output.
        """
        if add_help and HELP_FLAG not in declarations.flag_map:
            declarations = declarations.with_arguments(
                BooleanArgument("help", HELP_FLAG, "Show this help message.")
            )
        self.declarations: DeclarationSet = declarations
        self.program: str | None = program
        self.add_help: bool = add_help
        self.console: Console = console or default_console

    @property
    def container_type(self) -> type:
        return self.declarations.container_type

    def make_defaults(self) -> Any:
        """Return a new container populated with declared defaults."""
        return self.declarations.build_defaults()

    def _requests_help(self, argv: Sequence[str]) -> bool:
        """True if `--help` appears where a flag is expected, not as a value."""
        flag_map = self.declarations.flag_map
        index = 1 + self.declarations.required_count
        while index < len(argv):
            argument = flag_map.get(argv[index])
            if argument is not None and argument.kind == ArgumentKind.OPTIONAL:
                index += 2
                continue
            if argv[index] == HELP_FLAG:
                return True
            index += 1
        return False

    def _get_program(self, argv: Sequence[str] | None = None) -> str:
        if self.program:
            return self.program
        if argv:
            return argv[0]
        return get_program_invocation()

    def parse(
        self, argv: Sequence[str] | None = None, container: Any = None
    ) -> ParseResult:
        """
        Parse an argv-style list without raising.

        Args:
            argv (Sequence[str] | None): Tokens with the program name first;
                defaults to `sys.argv`.
            container (Any): Container to fill; defaults to `make_defaults()`.

        Returns:
            ParseResult: Truthy on success. When `--help` was given (and help is
            enabled) help is rendered and the result has `help_requested` set.
        """
        if argv is None:
            argv = sys.argv
        if container is None:
            container = self.make_defaults()
        if self.add_help and self._requests_help(argv):
            logger.debug("Help requested for '%s'", self._get_program(argv))
            setattr(container, self.declarations.flag_map[HELP_FLAG].name, True)
            self.render_help(argv)
            return ParseResult(ok=False, args=container, help_requested=True)
        return parse(argv, self.declarations, container)

    def parse_args(self, argv: Sequence[str] | None = None) -> Any:
        """
        Parse an argv-style list and return the filled container.

        Raises:
            ParseError: If parsing fails (diagnostics are already reported).
            HelpSignal: If `--help` was given and help has been rendered.
        """
        result = self.parse(argv)
        if result.help_requested:
            raise HelpSignal()
        return result.unwrap()

    def get_usage(self, argv: Sequence[str] | None = None) -> str:
        return get_usage(self.declarations, self._get_program(argv))

    def format_help(self, argv: Sequence[str] | None = None) -> str:
        """Return the help text as a string."""
        return format_help(self.declarations, self._get_program(argv))

    def render_help(self, argv: Sequence[str] | None = None) -> None:
        """Print the help text to the parser's console."""
        render_help(self.declarations, self._get_program(argv), self.console)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EasyArgsParser):
            return False
        return self.declarations == other.declarations

    def __hash__(self) -> int:
        return hash(self.declarations)

    def __str__(self) -> str:
        return (
            f"EasyArgsParser(required={self.declarations.required_count}, "
            f"optional={self.declarations.optional_count}, "
            f"boolean={self.declarations.boolean_count})"
        )

    def __repr__(self) -> str:
        return str(self)
