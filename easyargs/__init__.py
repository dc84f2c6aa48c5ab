"""
EasyArgs CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .logger import logger
from .parser import (
    ArgumentType,
    BooleanArgument,
    DeclarationSet,
    EasyArgsParser,
    OptionalArgument,
    ParseResult,
    RequiredArgument,
    UnknownTokenPolicy,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentType",
    "BooleanArgument",
    "DeclarationSet",
    "EasyArgsParser",
    "OptionalArgument",
    "ParseResult",
    "RequiredArgument",
    "UnknownTokenPolicy",
    "logger",
]
