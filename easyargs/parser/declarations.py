# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `DeclarationSet`, the single source of truth for an EasyArgs command line.

A declaration set holds three ordered groups of descriptors (required,
optional and boolean). The parser engine, the help renderer and the result
container builder all iterate over the same set, so the struct, the parsing
rules and the help text cannot drift apart.

The set also derives the result container: a dataclass type with one typed
field per descriptor (required first, then optional, then boolean), and a
builder returning an instance pre-populated with defaults.

Key Components:
- `UnknownTokenPolicy`: What the parser does with unrecognized tokens.
- `DeclarationSet`: The immutable descriptor table.
- `build_defaults()`: Build a default-initialized container for a set.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Iterable

from easyargs.exceptions import DeclarationError
from easyargs.parser.argument import (
    Argument,
    ArgumentKind,
    BooleanArgument,
    OptionalArgument,
    RequiredArgument,
)


class UnknownTokenPolicy(Enum):
    """
    How the parser treats tokens that match no declared flag.

    Members:
        WARN: Report a warning and keep parsing (default).
        ERROR: Report an error and fail the parse.
    """

    WARN = "warn"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


def _as_group(
    arguments: Iterable[Any], expected: type, group: str
) -> tuple[Any, ...]:
    try:
        items = tuple(arguments)
    except TypeError:
        raise DeclarationError(f"{group} arguments must be iterable") from None
    for argument in items:
        if not isinstance(argument, expected):
            raise DeclarationError(
                f"{group} arguments must be {expected.__name__} instances, "
                f"got {type(argument).__name__}"
            )
    return items


@dataclass(frozen=True)
class DeclarationSet:
    """
    Ordered, immutable collection of argument descriptors.

    Attributes:
        required (tuple[RequiredArgument, ...]): Positional arguments, in order.
        optional (tuple[OptionalArgument, ...]): Flagged arguments taking a value.
        boolean (tuple[BooleanArgument, ...]): Flagged switches.
        unknown_tokens (UnknownTokenPolicy): Handling of unrecognized tokens.
        container_name (str): Class name of the generated result container.
    """

    required: tuple[RequiredArgument, ...] = ()
    optional: tuple[OptionalArgument, ...] = ()
    boolean: tuple[BooleanArgument, ...] = ()
    unknown_tokens: UnknownTokenPolicy = UnknownTokenPolicy.WARN
    container_name: str = field(default="Arguments", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "required", _as_group(self.required, RequiredArgument, "Required")
        )
        object.__setattr__(
            self, "optional", _as_group(self.optional, OptionalArgument, "Optional")
        )
        object.__setattr__(
            self, "boolean", _as_group(self.boolean, BooleanArgument, "Boolean")
        )
        try:
            object.__setattr__(
                self, "unknown_tokens", UnknownTokenPolicy(self.unknown_tokens)
            )
        except ValueError as error:
            raise DeclarationError(str(error)) from error
        self._validate_unique()

    def _validate_unique(self) -> None:
        names: set[str] = set()
        for argument in self.arguments:
            if argument.name in names:
                raise DeclarationError(
                    f"Argument name '{argument.name}' is already defined"
                )
            names.add(argument.name)
        flags: dict[str, str] = {}
        for argument in self.keyword_arguments:
            if argument.flag in flags:
                raise DeclarationError(
                    f"Flag '{argument.flag}' is already used by argument "
                    f"'{flags[argument.flag]}'"
                )
            flags[argument.flag] = argument.name

    @property
    def arguments(self) -> tuple[Argument, ...]:
        """All descriptors: required, then optional, then boolean."""
        return self.required + self.optional + self.boolean

    @property
    def keyword_arguments(self) -> tuple[OptionalArgument | BooleanArgument, ...]:
        """Flagged descriptors: optional, then boolean."""
        return self.optional + self.boolean

    @property
    def required_count(self) -> int:
        return len(self.required)

    @property
    def optional_count(self) -> int:
        return len(self.optional)

    @property
    def boolean_count(self) -> int:
        return len(self.boolean)

    @cached_property
    def flag_map(self) -> dict[str, OptionalArgument | BooleanArgument]:
        """Map of flag token to its descriptor."""
        return {argument.flag: argument for argument in self.keyword_arguments}

    @cached_property
    def container_type(self) -> type:
        """
        Dataclass type with one field per descriptor.

        Field types follow the declared types (`bool` for boolean switches) and
        field defaults follow `build_defaults()`.
        """
        fields = [
            (
                argument.name,
                bool if argument.kind == ArgumentKind.BOOLEAN else argument.type.python_type,
                dataclasses.field(default=argument.default),
            )
            for argument in self.arguments
        ]
        return dataclasses.make_dataclass(self.container_name, fields)

    def build_defaults(self) -> Any:
        """
        Return a new container populated with defaults.

        Required fields hold their type's zero value, optional fields their
        declared default and boolean fields False.
        """
        return self.container_type()

    def get_argument(self, name: str) -> Argument | None:
        """Return the descriptor stored under `name`, if declared."""
        return next((a for a in self.arguments if a.name == name), None)

    def with_arguments(self, *arguments: Argument) -> DeclarationSet:
        """
        Return a new set with `arguments` appended to their groups.

        Raises:
            DeclarationError: If a name or flag collides with an existing one.
        """
        required = list(self.required)
        optional = list(self.optional)
        boolean = list(self.boolean)
        for argument in arguments:
            if isinstance(argument, RequiredArgument):
                required.append(argument)
            elif isinstance(argument, OptionalArgument):
                optional.append(argument)
            elif isinstance(argument, BooleanArgument):
                boolean.append(argument)
            else:
                raise DeclarationError(
                    f"Unsupported descriptor type: {type(argument).__name__}"
                )
        return dataclasses.replace(
            self, required=tuple(required), optional=tuple(optional), boolean=tuple(boolean)
        )

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert the declarations into a serializable list of dicts.

        Returns:
            List of definitions for use in introspection, documentation, or export.
        """
        definitions = []
        for argument in self.arguments:
            definition: dict[str, Any] = {
                "kind": str(argument.kind),
                "name": argument.name,
                "description": argument.description,
            }
            if isinstance(argument, BooleanArgument):
                definition.update(type="bool", flag=argument.flag, default=False)
            else:
                definition.update(type=str(argument.type), label=argument.label)
            if isinstance(argument, OptionalArgument):
                definition.update(flag=argument.flag, default=argument.default)
            definitions.append(definition)
        return definitions

    def __str__(self) -> str:
        return (
            f"DeclarationSet(required={self.required_count}, "
            f"optional={self.optional_count}, boolean={self.boolean_count}, "
            f"unknown_tokens={self.unknown_tokens})"
        )


def build_defaults(declarations: DeclarationSet) -> Any:
    """Build a default-initialized result container for `declarations`."""
    return declarations.build_defaults()
