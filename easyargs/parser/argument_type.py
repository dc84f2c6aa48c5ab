# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentType`, the enum of scalar types an EasyArgs argument can declare.

Each member knows the Python type of its values, the zero value used to
initialize required fields, the default printf-style formatter used to render
optional defaults in help text, and the converter that parses its tokens.

Supports alias coercion for C-style or config-friendly names.

Example:
    ArgumentType("int")           → ArgumentType.INT
    ArgumentType("unsigned long") → ArgumentType.ULONG (via alias)
    ArgumentType("str")           → ArgumentType.STRING (via alias)
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from easyargs.parser import converters
from easyargs.parser.converters import Converter


class ArgumentType(Enum):
    """
    Scalar types supported by argument descriptors.

    Members:
        STRING: Non-empty text, stored unchanged.
        CHAR: A single character.
        INT, LONG, LONG_LONG: Signed integers (32, 64 and 64 bits).
        UINT, ULONG, ULONG_LONG, SIZE: Unsigned integers (32, 64, 64 and 64 bits).
        FLOAT: Single precision floating point.
        DOUBLE: Double precision floating point.
    """

    STRING = "string"
    CHAR = "char"
    INT = "int"
    UINT = "uint"
    LONG = "long"
    ULONG = "ulong"
    LONG_LONG = "long_long"
    ULONG_LONG = "ulong_long"
    SIZE = "size"
    FLOAT = "float"
    DOUBLE = "double"

    @classmethod
    def choices(cls) -> list[ArgumentType]:
        """Return a list of all argument types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "character": "char",
            "unsigned int": "uint",
            "unsigned long": "ulong",
            "long long": "long_long",
            "llong": "long_long",
            "unsigned long long": "ulong_long",
            "ullong": "ulong_long",
            "size_t": "size",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def python_type(self) -> type:
        """The Python type of converted values."""
        if self in (ArgumentType.STRING, ArgumentType.CHAR):
            return str
        if self in (ArgumentType.FLOAT, ArgumentType.DOUBLE):
            return float
        return int

    @property
    def zero(self) -> Any:
        """The placeholder stored in required fields before parsing."""
        if self == ArgumentType.STRING:
            return ""
        if self == ArgumentType.CHAR:
            return "\0"
        return self.python_type()

    @property
    def converter(self) -> Converter:
        """The built-in converter for this type."""
        return _CONVERTERS[self]

    def default_formatter(self, precision: int | None = None) -> str:
        """
        Return the printf-style formatter used to render defaults of this type.

        Args:
            precision (int | None): Significant digits for FLOAT and DOUBLE (default 6).
        """
        if self == ArgumentType.STRING:
            return "%s"
        if self == ArgumentType.CHAR:
            return "%c"
        if self.python_type is float:
            return f"%.{6 if precision is None else precision}g"
        return "%d"

    def validate_default(self, value: Any) -> Any:
        """
        Check a declared default against this type and return the normalized value.

        Integers are accepted for floating point types. Booleans are rejected
        for numeric types.

        Raises:
            ValueError: If the value does not fit the type.
        """
        if isinstance(value, bool):
            raise ValueError(f"Default {value!r} is not a valid {self.value} value")
        if self.python_type is float and isinstance(value, int):
            return float(value)
        if not isinstance(value, self.python_type):
            raise ValueError(
                f"Default {value!r} is not a valid {self.value} value "
                f"(expected {self.python_type.__name__})"
            )
        if self == ArgumentType.CHAR and len(value) != 1:
            raise ValueError(f"Default {value!r} is not a single character")
        return value

    def __str__(self) -> str:
        """Return the string representation of the argument type."""
        return self.value


_CONVERTERS: dict[ArgumentType, Converter] = {
    ArgumentType.STRING: converters.parse_str,
    ArgumentType.CHAR: converters.parse_char,
    ArgumentType.INT: converters.parse_int,
    ArgumentType.UINT: converters.parse_uint,
    ArgumentType.LONG: converters.parse_long,
    ArgumentType.ULONG: converters.parse_ulong,
    ArgumentType.LONG_LONG: converters.parse_llong,
    ArgumentType.ULONG_LONG: converters.parse_ullong,
    ArgumentType.SIZE: converters.parse_size,
    ArgumentType.FLOAT: converters.parse_float,
    ArgumentType.DOUBLE: converters.parse_double,
}
