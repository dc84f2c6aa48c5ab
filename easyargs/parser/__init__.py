"""
EasyArgs CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentKind, BooleanArgument, OptionalArgument, RequiredArgument
from .argument_type import ArgumentType
from .converters import Converter, make_converter
from .declarations import DeclarationSet, UnknownTokenPolicy, build_defaults
from .easyargs_parser import EasyArgsParser
from .engine import ParseResult, parse
from .help import format_help, get_usage, render_help

__all__ = [
    "ArgumentKind",
    "ArgumentType",
    "BooleanArgument",
    "Converter",
    "DeclarationSet",
    "EasyArgsParser",
    "OptionalArgument",
    "ParseResult",
    "RequiredArgument",
    "UnknownTokenPolicy",
    "build_defaults",
    "format_help",
    "get_usage",
    "make_converter",
    "parse",
    "render_help",
]
