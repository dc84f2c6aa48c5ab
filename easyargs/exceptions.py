# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by EasyArgs.

Declaration problems are authoring errors and surface as soon as a
`DeclarationSet` or descriptor is built. Parse problems describe bad user input
and are normally reported through a `ParseResult` instead of being raised; the
raising entry point `EasyArgsParser.parse_args()` re-raises them.

Exception Hierarchy:
- EasyArgsError
    ├── DeclarationError
    └── ParseError
        ├── ArityError
        ├── ConversionError
        └── UnknownArgumentError
"""
from __future__ import annotations

from typing import Any


class EasyArgsError(Exception):
    """Base exception for EasyArgs."""


class DeclarationError(EasyArgsError):
    """Raised when an argument declaration is malformed (bad type, duplicate flag or name)."""


class ParseError(EasyArgsError):
    """Raised when a token list cannot be parsed against a declaration set."""

    def __init__(self, message: str, token: str | None = None, argument: Any = None):
        super().__init__(message)
        self.token = token
        self.argument = argument


class ArityError(ParseError):
    """Too few tokens for the required arguments, or a flag without its value."""


class ConversionError(ParseError):
    """A token could not be converted to the declared type of its argument."""


class UnknownArgumentError(ParseError):
    """An unrecognized token was found while the declaration set rejects unknown tokens."""
