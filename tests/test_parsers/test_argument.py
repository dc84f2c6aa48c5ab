import pytest

from easyargs.exceptions import DeclarationError
from easyargs.parser import (
    ArgumentKind,
    ArgumentType,
    BooleanArgument,
    OptionalArgument,
    RequiredArgument,
)
from easyargs.parser.converters import parse_int, parse_str


def test_argument_type_aliases():
    assert ArgumentType("int") is ArgumentType.INT
    assert ArgumentType("unsigned long") is ArgumentType.ULONG
    assert ArgumentType("STR") is ArgumentType.STRING
    assert ArgumentType(" size_t ") is ArgumentType.SIZE
    assert ArgumentType("long long") is ArgumentType.LONG_LONG


def test_argument_type_invalid():
    with pytest.raises(ValueError, match="Invalid ArgumentType"):
        ArgumentType("complex")
    with pytest.raises(ValueError):
        ArgumentType(3)


@pytest.mark.parametrize(
    "argument_type, python_type, zero",
    [
        (ArgumentType.STRING, str, ""),
        (ArgumentType.CHAR, str, "\0"),
        (ArgumentType.INT, int, 0),
        (ArgumentType.SIZE, int, 0),
        (ArgumentType.DOUBLE, float, 0.0),
    ],
)
def test_argument_type_python_type_and_zero(argument_type, python_type, zero):
    assert argument_type.python_type is python_type
    assert argument_type.zero == zero
    assert type(argument_type.zero) is python_type


def test_argument_type_default_formatter():
    assert ArgumentType.STRING.default_formatter() == "%s"
    assert ArgumentType.CHAR.default_formatter() == "%c"
    assert ArgumentType.ULONG.default_formatter() == "%d"
    assert ArgumentType.FLOAT.default_formatter(2) == "%.2g"
    assert ArgumentType.DOUBLE.default_formatter() == "%.6g"


def test_required_argument_defaults_to_type_converter():
    argument = RequiredArgument("int", "count", "count", "Number of items")
    assert argument.kind == ArgumentKind.REQUIRED
    assert argument.type is ArgumentType.INT
    assert argument.converter is parse_int
    assert argument.default == 0
    assert argument.convert("12") == (12, True)
    assert argument.get_usage_text() == "<count>"
    assert argument.get_column_width() == 7


def test_required_argument_custom_converter():
    def upper(text: str) -> tuple[str, bool]:
        return text.upper(), bool(text)

    argument = RequiredArgument(ArgumentType.STRING, "word", "word", converter=upper)
    assert argument.convert("abc") == ("ABC", True)


def test_optional_argument():
    argument = OptionalArgument(
        "string", "name", "anon", "--name", "name", "Who to greet"
    )
    assert argument.kind == ArgumentKind.OPTIONAL
    assert argument.converter is parse_str
    assert argument.formatter == "%s"
    assert argument.format_default() == "anon"
    assert argument.get_usage_text() == "[--name <name>]"
    assert argument.get_column_width() == len("--name") + 1 + len("name") + 2


def test_optional_argument_float_precision():
    argument = OptionalArgument(
        "double", "scale", 0.123456, "--scale", "factor", "Scale", precision=3
    )
    assert argument.format_default() == "0.123"


def test_optional_argument_int_default_for_float_is_normalized():
    argument = OptionalArgument("float", "ratio", 2, "--ratio", "r")
    assert argument.default == 2.0
    assert isinstance(argument.default, float)


def test_optional_argument_callable_formatter():
    argument = OptionalArgument(
        "int", "width", 640, "--width", "px", formatter=lambda value: f"{value}px"
    )
    assert argument.format_default() == "640px"


@pytest.mark.parametrize(
    "argument_type, default",
    [("int", "five"), ("int", True), ("char", "ab"), ("string", 3), ("double", "1.0")],
)
def test_optional_argument_rejects_bad_default(argument_type, default):
    with pytest.raises(DeclarationError):
        OptionalArgument(argument_type, "value", default, "--value", "v")


def test_boolean_argument():
    argument = BooleanArgument("verbose", "--verbose", "Print progress")
    assert argument.kind == ArgumentKind.BOOLEAN
    assert argument.type is bool
    assert argument.default is False
    assert argument.get_usage_text() == "[--verbose]"
    assert argument.get_column_width() == len("--verbose")


@pytest.mark.parametrize("name", ["", "1count", "with-dash", "class"])
def test_invalid_storage_names(name):
    with pytest.raises(DeclarationError):
        RequiredArgument("int", name, "label")


def test_invalid_type_is_declaration_error():
    with pytest.raises(DeclarationError, match="Invalid ArgumentType"):
        RequiredArgument("matrix", "grid", "grid")


def test_empty_flag_is_rejected():
    with pytest.raises(DeclarationError):
        BooleanArgument("verbose", "")


def test_non_callable_converter_is_rejected():
    with pytest.raises(DeclarationError):
        RequiredArgument("int", "count", "count", converter="int")


def test_descriptors_are_immutable():
    argument = BooleanArgument("verbose", "--verbose")
    with pytest.raises(AttributeError):
        argument.flag = "--loud"
