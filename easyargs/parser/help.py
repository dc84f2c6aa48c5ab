# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text rendering for EasyArgs declaration sets.

The help text reflects exactly the declarations the parser enforces:

    USAGE:
        prog <count> [--name <name>] [--verbose]

    ARGUMENTS:
        <count>          Number of items

    OPTIONS:
        --name <name>    Who to greet (default: anon)
        --verbose        Print progress

The usage line lists required placeholders when there are at most three of
them (otherwise `<ARGUMENTS>`), and optional/boolean placeholders when there
are at most three of those combined (otherwise `[OPTIONS]`). Descriptions in
both reference sections are aligned on one shared column computed over every
descriptor.
"""
from __future__ import annotations

from rich.console import Console

from easyargs.console import console as default_console
from easyargs.parser.declarations import DeclarationSet

USAGE_INLINE_LIMIT = 3
INDENT = "    "


def get_column_width(declarations: DeclarationSet) -> int:
    """Return the widest placeholder column over all descriptors."""
    return max(
        (argument.get_column_width() for argument in declarations.arguments),
        default=0,
    )


def get_usage(declarations: DeclarationSet, program: str) -> str:
    """
    Render the usage line for `program`.

    Returns:
        str: Program name followed by required and flagged placeholders.
    """
    parts = [program]
    if declarations.required:
        if declarations.required_count <= USAGE_INLINE_LIMIT:
            parts.extend(arg.get_usage_text() for arg in declarations.required)
        else:
            parts.append("<ARGUMENTS>")
    keywords = declarations.keyword_arguments
    if keywords:
        if len(keywords) <= USAGE_INLINE_LIMIT:
            parts.extend(arg.get_usage_text() for arg in keywords)
        else:
            parts.append("[OPTIONS]")
    return " ".join(parts)


def _line(placeholder: str, width: int, description: str) -> str:
    padding = " " * (width - len(placeholder))
    return f"{INDENT}{placeholder}{padding}{INDENT}{description}".rstrip()


def format_help(declarations: DeclarationSet, program: str) -> str:
    """
    Render the full help text: usage, then ARGUMENTS and OPTIONS when non-empty.

    Args:
        declarations (DeclarationSet): The declarations to describe.
        program (str): Program name or alias shown on the usage line.

    Returns:
        str: Help text without a trailing newline.
    """
    width = get_column_width(declarations)
    lines = ["USAGE:", f"{INDENT}{get_usage(declarations, program)}"]

    if declarations.required:
        lines += ["", "ARGUMENTS:"]
        for required in declarations.required:
            lines.append(
                _line(required.get_usage_text(), width, required.description)
            )

    if declarations.keyword_arguments:
        lines += ["", "OPTIONS:"]
        for optional in declarations.optional:
            lines.append(
                _line(
                    f"{optional.flag} <{optional.label}>",
                    width,
                    f"{optional.description} (default: {optional.format_default()})",
                )
            )
        for boolean in declarations.boolean:
            lines.append(_line(boolean.flag, width, boolean.description))

    return "\n".join(lines)


def render_help(
    declarations: DeclarationSet, program: str, console: Console | None = None
) -> None:
    """Print the help text to the standard output console."""
    console = console or default_console
    console.print(
        format_help(declarations, program),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
