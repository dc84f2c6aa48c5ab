# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The EasyArgs parser engine.

`parse()` walks an argv-style token list (index 0 is the program name) against
a `DeclarationSet` and fills a result container in a single pass:

1. The list must hold the program name plus one token per required argument,
   otherwise the parse fails with an arity error.
2. Required arguments are consumed strictly in declared order, each through
   its converter. A failed conversion aborts the parse.
3. The remaining tokens are walked left to right. An optional flag consumes
   exactly the next token as its value (whatever it looks like, another flag
   included). A boolean flag sets its field to True. Any other token is
   unknown: it is reported and skipped, or fails the parse when the set's
   `unknown_tokens` policy is `ERROR`.

Failures never raise out of `parse()`. They are reported on the error console
and returned as a falsy `ParseResult` carrying the `ParseError`. The container
contents are unspecified after a failure.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from easyargs.exceptions import (
    ArityError,
    ConversionError,
    ParseError,
    UnknownArgumentError,
)
from easyargs.logger import logger
from easyargs.parser.argument import ArgumentKind, OptionalArgument, RequiredArgument
from easyargs.parser.declarations import DeclarationSet, UnknownTokenPolicy
from easyargs.parser.diagnostics import report_error, report_warning


@dataclass
class ParseResult:
    """
    Outcome of a parse pass. Truthy only when parsing succeeded.

    Attributes:
        ok (bool): True if every required and matched token was consumed.
        args (Any): The result container that was filled.
        error (ParseError | None): The failure, if any.
        warnings (list[str]): Unknown-token warnings emitted along the way.
        help_requested (bool): True if a help flag short-circuited the parse.
    """

    ok: bool
    args: Any
    error: ParseError | None = None
    warnings: list[str] = field(default_factory=list)
    help_requested: bool = False

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Return the container, or raise the recorded `ParseError`."""
        if self.ok:
            return self.args
        if self.error is not None:
            raise self.error
        raise ParseError("Parsing did not complete")


def _convert(
    argument: RequiredArgument | OptionalArgument, token: str
) -> Any:
    value, ok = argument.convert(token)
    if not ok:
        raise ConversionError(
            f"Invalid value '{token}' for <{argument.label}>",
            token=token,
            argument=argument,
        )
    return value


def _consume_required(
    argv: Sequence[str], declarations: DeclarationSet, container: Any
) -> int:
    index = 1
    for argument in declarations.required:
        setattr(container, argument.name, _convert(argument, argv[index]))
        index += 1
    return index


def _consume_keywords(
    argv: Sequence[str],
    start: int,
    declarations: DeclarationSet,
    container: Any,
    warnings: list[str],
) -> None:
    flag_map = declarations.flag_map
    index = start
    while index < len(argv):
        token = argv[index]
        argument = flag_map.get(token)
        if argument is None:
            if declarations.unknown_tokens == UnknownTokenPolicy.ERROR:
                raise UnknownArgumentError(
                    f"Unrecognized argument '{token}'", token=token
                )
            message = f"Ignoring invalid argument '{token}'"
            report_warning(message)
            warnings.append(message)
            index += 1
        elif argument.kind == ArgumentKind.OPTIONAL:
            assert isinstance(argument, OptionalArgument)
            if index + 1 >= len(argv):
                raise ArityError(
                    f"option '{token}' requires a value", token=token, argument=argument
                )
            setattr(container, argument.name, _convert(argument, argv[index + 1]))
            index += 2
        else:
            setattr(container, argument.name, True)
            index += 1


def parse(
    argv: Sequence[str] | None,
    declarations: DeclarationSet,
    container: Any = None,
) -> ParseResult:
    """
    Parse `argv` into `container` according to `declarations`.

    Args:
        argv (Sequence[str] | None): Tokens with the program name at index 0.
        declarations (DeclarationSet): The declaration table to enforce.
        container (Any): Container to fill; a default-initialized one is built
            when omitted.

    Returns:
        ParseResult: Truthy on success, falsy with the error on failure.
    """
    if container is None:
        container = declarations.build_defaults()
    warnings: list[str] = []
    try:
        if not argv:
            raise ArityError("no argument vector supplied")
        if len(argv) < 1 + declarations.required_count:
            raise ArityError(
                "Not all required arguments included "
                f"(expected {declarations.required_count}, got {len(argv) - 1})"
            )
        index = _consume_required(argv, declarations, container)
        _consume_keywords(argv, index, declarations, container, warnings)
    except ParseError as error:
        if not isinstance(error, ConversionError):
            # converters report their own diagnostics
            report_error(str(error))
        logger.debug("Parse failed (%s): %s", type(error).__name__, error)
        return ParseResult(ok=False, args=container, error=error, warnings=warnings)
    logger.debug("Parsed %d token(s) into %r", len(argv) - 1, container)
    return ParseResult(ok=True, args=container, warnings=warnings)
