# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Scalar converters used by EasyArgs argument descriptors.

A converter turns one text token into a typed value. It never raises: it returns
a `(value, ok)` pair, and on failure it reports a diagnostic naming the
offending token and the target type before returning `(zero_value, False)`.

Integer and floating point converters follow C conventions rather than Python
literal syntax:
- leading whitespace is skipped, trailing characters (whitespace included) are not
- integers use base detection: `0x`/`0X` is hexadecimal, a leading `0` is
  octal, anything else is decimal; an optional sign is accepted
- unsigned converters reject a leading `-` instead of wrapping
- every integer converter range-checks against its width class
- floating point values fail on overflow, and when a nonzero literal underflows
  to zero; `float` values are rounded to single precision first

Functions:
- make_converter: Adapt a raising `str -> value` function to the converter contract.
- parse_str, parse_char: Text converters.
- parse_int, parse_long, parse_llong: Signed integer converters.
- parse_uint, parse_ulong, parse_ullong, parse_size: Unsigned integer converters.
- parse_float, parse_double: Floating point converters.
"""
from __future__ import annotations

import math
import re
import struct
from typing import Any, Callable, NamedTuple

from easyargs.parser.diagnostics import report_error

Converter = Callable[[str], tuple[Any, bool]]

C_WHITESPACE = " \t\n\v\f\r"

# no integer width exceeds 64 bits, i.e. 22 octal or 20 decimal digits
MAX_INTEGER_DIGITS = 24

_INTEGER_PATTERN = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_DECIMAL_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)([pP][+-]?[0-9]+)?"
)
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)


class IntegerRange(NamedTuple):
    """Name and inclusive bounds of an integer width class."""

    name: str
    minimum: int
    maximum: int


INT = IntegerRange("int", -(2**31), 2**31 - 1)
LONG = IntegerRange("long", -(2**63), 2**63 - 1)
LONG_LONG = IntegerRange("long long", -(2**63), 2**63 - 1)
UINT = IntegerRange("unsigned int", 0, 2**32 - 1)
ULONG = IntegerRange("unsigned long", 0, 2**64 - 1)
ULONG_LONG = IntegerRange("unsigned long long", 0, 2**64 - 1)
SIZE = IntegerRange("size_t", 0, 2**64 - 1)


def make_converter(
    type_name: str, convert: Callable[[str], Any], zero: Any = None
) -> Converter:
    """
    Wrap a raising conversion function so it satisfies the converter contract.

    `convert` signals invalid input by raising `ValueError` (or `TypeError`);
    the message becomes the reported diagnostic.

    Args:
        type_name (str): Name of the target type, used for `None` input.
        convert (Callable[[str], Any]): Function converting a token to a value.
        zero (Any): Value returned alongside `False` on failure.

    Returns:
        Converter: A function returning `(value, ok)` that never raises.
    """

    def converter(text: str) -> tuple[Any, bool]:
        if text is None:
            report_error(f"null input for {type_name}")
            return zero, False
        try:
            return convert(text), True
        except (ValueError, TypeError) as error:
            report_error(str(error))
            return zero, False

    converter.__name__ = f"parse_{getattr(convert, '__name__', 'value').lstrip('_')}"
    converter.__doc__ = convert.__doc__
    return converter


def _skip_leading(text: str) -> str:
    return text.lstrip(C_WHITESPACE)


def _scan_integer(text: str, type_name: str) -> int:
    """Scan a C-style integer literal with base detection."""
    match = _INTEGER_PATTERN.fullmatch(text)
    if not match:
        raise ValueError(f"'{text}' is not a valid {type_name}")
    sign, digits = match.groups()
    is_hex = digits[:2] in ("0x", "0X")
    if len((digits[2:] if is_hex else digits).lstrip("0")) > MAX_INTEGER_DIGITS:
        raise ValueError(f"'{text}' is out of range for {type_name}")
    if is_hex:
        magnitude = int(digits[2:], 16)
    elif digits.startswith("0"):
        magnitude = int(digits, 8)
    else:
        magnitude = int(digits, 10)
    return -magnitude if sign == "-" else magnitude


def _convert_signed(text: str, limits: IntegerRange) -> int:
    text = _skip_leading(text)
    if not text:
        raise ValueError(f"empty input for {limits.name}")
    value = _scan_integer(text, limits.name)
    if not limits.minimum <= value <= limits.maximum:
        raise ValueError(f"'{text}' is out of range for {limits.name}")
    return value


def _convert_unsigned(text: str, limits: IntegerRange) -> int:
    text = _skip_leading(text)
    if not text:
        raise ValueError(f"empty input for {limits.name}")
    if text.startswith("-"):
        raise ValueError(f"'{text}' negative value not allowed for {limits.name}")
    value = _scan_integer(text, limits.name)
    if value > limits.maximum:
        raise ValueError(f"'{text}' is out of range for {limits.name}")
    return value


def _has_nonzero_mantissa(text: str) -> bool:
    mantissa = text.lstrip("+-")
    if mantissa[:2] in ("0x", "0X"):
        mantissa = re.split("[pP]", mantissa[2:])[0]
    else:
        mantissa = re.split("[eE]", mantissa)[0]
    return any(digit not in "0." for digit in mantissa)


def _scan_float(text: str, type_name: str) -> float:
    """Scan a C-style floating point literal (decimal, hexadecimal, inf or nan)."""
    text = _skip_leading(text)
    if not text:
        raise ValueError(f"empty input for {type_name}")
    if _SPECIAL_FLOAT_PATTERN.fullmatch(text):
        return float(text)
    if _HEX_FLOAT_PATTERN.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError:
            raise ValueError(
                f"'{text}' is out of range for type {type_name}"
            ) from None
    elif _DECIMAL_FLOAT_PATTERN.fullmatch(text):
        value = float(text)
    else:
        raise ValueError(f"'{text}' is not a valid {type_name}")
    # overflow, or underflow of a nonzero literal to zero
    if math.isinf(value) or (value == 0.0 and _has_nonzero_mantissa(text)):
        raise ValueError(f"'{text}' is out of range for type {type_name}")
    return value


def _str(text: str) -> str:
    """Return the token unchanged; empty tokens are rejected."""
    if text == "":
        raise ValueError("empty string value not allowed")
    return text


def _char(text: str) -> str:
    """Return the single character of a one-character token."""
    if len(text) != 1:
        raise ValueError(f"'{text}' is not a valid character")
    return text


def _int(text: str) -> int:
    """Convert to a 32-bit signed integer."""
    return _convert_signed(text, INT)


def _long(text: str) -> int:
    """Convert to a 64-bit signed integer."""
    return _convert_signed(text, LONG)


def _llong(text: str) -> int:
    """Convert to a 64-bit signed integer."""
    return _convert_signed(text, LONG_LONG)


def _uint(text: str) -> int:
    """Convert to a 32-bit unsigned integer."""
    return _convert_unsigned(text, UINT)


def _ulong(text: str) -> int:
    """Convert to a 64-bit unsigned integer."""
    return _convert_unsigned(text, ULONG)


def _ullong(text: str) -> int:
    """Convert to a 64-bit unsigned integer."""
    return _convert_unsigned(text, ULONG_LONG)


def _size(text: str) -> int:
    """Convert to a 64-bit unsigned size."""
    return _convert_unsigned(text, SIZE)


def _float(text: str) -> float:
    """Convert to a single precision float."""
    value = _scan_float(text, "float")
    try:
        # round-trip through an IEEE 754 binary32
        single = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        single = math.inf
    if math.isinf(single) != math.isinf(value) or (single == 0.0 and value != 0.0):
        raise ValueError(f"'{_skip_leading(text)}' is out of range for type float")
    return single


def _double(text: str) -> float:
    """Convert to a double precision float."""
    return _scan_float(text, "double")


parse_str = make_converter("string", _str, None)
parse_char = make_converter("character argument", _char, "\0")
parse_int = make_converter(INT.name, _int, 0)
parse_long = make_converter(LONG.name, _long, 0)
parse_llong = make_converter(LONG_LONG.name, _llong, 0)
parse_uint = make_converter(UINT.name, _uint, 0)
parse_ulong = make_converter(ULONG.name, _ulong, 0)
parse_ullong = make_converter(ULONG_LONG.name, _ullong, 0)
parse_size = make_converter(SIZE.name, _size, 0)
parse_float = make_converter("float", _float, 0.0)
parse_double = make_converter("double", _double, 0.0)
