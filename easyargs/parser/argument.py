# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the argument descriptors that make up an EasyArgs declaration.

Each descriptor is the complete metadata of one command-line argument. There
are three kinds, tagged by `ArgumentKind`:

- `RequiredArgument`: positional, must appear, consumed in declared order.
- `OptionalArgument`: introduced by its exact flag token followed by one value;
  when absent its declared default stands.
- `BooleanArgument`: presence of its flag token sets it to True; default False.

Descriptors are immutable. The same descriptor drives the result container
field, the parsing step and the help line, so all three stay consistent.

Example:
    RequiredArgument("int", "count", "count", "Number of items")
    OptionalArgument("string", "name", "anon", "--name", "name", "Who to greet")
    BooleanArgument("verbose", "--verbose", "Print progress")
"""
from __future__ import annotations

import keyword
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar

from easyargs.exceptions import DeclarationError
from easyargs.parser.argument_type import ArgumentType
from easyargs.parser.converters import Converter


class ArgumentKind(Enum):
    """The three descriptor variants of a declaration set."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    BOOLEAN = "boolean"

    def __str__(self) -> str:
        return self.value


def _coerce_type(value: ArgumentType | str, name: str) -> ArgumentType:
    try:
        return ArgumentType(value)
    except ValueError as error:
        raise DeclarationError(f"Argument '{name}': {error}") from error


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise DeclarationError("Argument name must be a non-empty string")
    if not name.isidentifier() or keyword.iskeyword(name):
        raise DeclarationError(
            f"Argument name '{name}' must be a valid identifier "
            "(letters, digits, and underscores only, not starting with a digit)"
        )


def _validate_flag(flag: str, name: str) -> None:
    if not isinstance(flag, str) or not flag:
        raise DeclarationError(f"Argument '{name}' flag must be a non-empty string")


@dataclass(frozen=True)
class RequiredArgument:
    """
    A positional argument that must appear on the command line.

    Attributes:
        type (ArgumentType): Declared scalar type (a member or its name).
        name (str): Storage name, used as the container field name.
        label (str): Placeholder shown in help text as `<label>`.
        description (str): Help text for the argument.
        converter (Converter | None): Token converter; defaults to the type's converter.
    """

    kind: ClassVar[ArgumentKind] = ArgumentKind.REQUIRED

    type: ArgumentType
    name: str
    label: str
    description: str = ""
    converter: Converter | None = None

    def __post_init__(self) -> None:
        _validate_name(self.name)
        object.__setattr__(self, "type", _coerce_type(self.type, self.name))
        if self.converter is None:
            object.__setattr__(self, "converter", self.type.converter)
        elif not callable(self.converter):
            raise DeclarationError(f"Argument '{self.name}' converter must be callable")

    @property
    def default(self) -> Any:
        """The zero value stored before parsing."""
        return self.type.zero

    def convert(self, token: str) -> tuple[Any, bool]:
        assert self.converter is not None, "converter should be set in __post_init__"
        return self.converter(token)

    def get_usage_text(self) -> str:
        return f"<{self.label}>"

    def get_column_width(self) -> int:
        return len(self.label) + 2


@dataclass(frozen=True)
class OptionalArgument:
    """
    A flagged argument that takes exactly one value.

    Attributes:
        type (ArgumentType): Declared scalar type (a member or its name).
        name (str): Storage name, used as the container field name.
        default (Any): Value kept when the flag is absent.
        flag (str): Exact token introducing the argument, e.g. `--name`.
        label (str): Placeholder shown in help text as `<label>`.
        description (str): Help text for the argument.
        formatter (str | Callable[[Any], str] | None): printf-style format string
            or callable used to render the default in help text.
        converter (Converter | None): Token converter; defaults to the type's converter.
        precision (int | None): Significant digits for the default float formatter.
    """

    kind: ClassVar[ArgumentKind] = ArgumentKind.OPTIONAL

    type: ArgumentType
    name: str
    default: Any
    flag: str
    label: str
    description: str = ""
    formatter: str | Callable[[Any], str] | None = None
    converter: Converter | None = None
    precision: int | None = None

    def __post_init__(self) -> None:
        _validate_name(self.name)
        _validate_flag(self.flag, self.name)
        argument_type = _coerce_type(self.type, self.name)
        object.__setattr__(self, "type", argument_type)
        try:
            default = argument_type.validate_default(self.default)
        except ValueError as error:
            raise DeclarationError(f"Argument '{self.name}': {error}") from error
        object.__setattr__(self, "default", default)
        if self.formatter is None:
            object.__setattr__(
                self, "formatter", argument_type.default_formatter(self.precision)
            )
        if self.converter is None:
            object.__setattr__(self, "converter", argument_type.converter)
        elif not callable(self.converter):
            raise DeclarationError(f"Argument '{self.name}' converter must be callable")

    def convert(self, token: str) -> tuple[Any, bool]:
        assert self.converter is not None, "converter should be set in __post_init__"
        return self.converter(token)

    def format_default(self) -> str:
        """Render the default value with the declared formatter."""
        if callable(self.formatter):
            return self.formatter(self.default)
        assert isinstance(self.formatter, str), "formatter should be set in __post_init__"
        return self.formatter % (self.default,)

    def get_usage_text(self) -> str:
        return f"[{self.flag} <{self.label}>]"

    def get_column_width(self) -> int:
        return len(self.flag) + 1 + len(self.label) + 2


@dataclass(frozen=True)
class BooleanArgument:
    """
    A switch that is False unless its flag token appears.

    Attributes:
        name (str): Storage name, used as the container field name.
        flag (str): Exact token setting the switch, e.g. `--verbose`.
        description (str): Help text for the switch.
    """

    kind: ClassVar[ArgumentKind] = ArgumentKind.BOOLEAN

    name: str
    flag: str
    description: str = ""

    def __post_init__(self) -> None:
        _validate_name(self.name)
        _validate_flag(self.flag, self.name)

    @property
    def type(self) -> type:
        return bool

    @property
    def default(self) -> bool:
        return False

    def get_usage_text(self) -> str:
        return f"[{self.flag}]"

    def get_column_width(self) -> int:
        return len(self.flag)


Argument = RequiredArgument | OptionalArgument | BooleanArgument
