import pytest

from easyargs.exceptions import (
    ArityError,
    ConversionError,
    ParseError,
    UnknownArgumentError,
)
from easyargs.parser import (
    BooleanArgument,
    DeclarationSet,
    OptionalArgument,
    ParseResult,
    RequiredArgument,
    parse,
)


@pytest.fixture
def declarations():
    return DeclarationSet(
        required=[RequiredArgument("int", "count", "count", "Number of items")],
        optional=[
            OptionalArgument("string", "name", "anon", "--name", "name", "Who to greet")
        ],
        boolean=[BooleanArgument("verbose", "--verbose", "Print progress")],
    )


def test_required_only(declarations):
    result = parse(["prog", "5"], declarations)
    assert result
    assert result.ok is True
    assert result.args.count == 5
    assert result.args.name == "anon"
    assert result.args.verbose is False
    assert result.warnings == []
    assert result.error is None


def test_all_arguments(declarations):
    result = parse(["prog", "5", "--name", "Ada", "--verbose"], declarations)
    assert result
    assert result.args.count == 5
    assert result.args.name == "Ada"
    assert result.args.verbose is True


def test_keyword_order_does_not_matter(declarations):
    first = parse(["prog", "3", "--verbose", "--name", "Bo"], declarations)
    second = parse(["prog", "3", "--name", "Bo", "--verbose"], declarations)
    assert first and second
    assert first.args == second.args


def test_missing_required(declarations, capsys):
    result = parse(["prog"], declarations)
    assert not result
    assert isinstance(result.error, ArityError)
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "Not all required arguments included (expected 1, got 0)." in err


def test_invalid_required_value(declarations, capsys):
    result = parse(["prog", "abc"], declarations)
    assert not result
    assert isinstance(result.error, ConversionError)
    assert result.error.token == "abc"
    assert result.error.argument.name == "count"
    err = capsys.readouterr().err
    assert "'abc' is not a valid int." in err
    assert err.count("Error:") == 1


def test_unknown_token_is_skipped_with_warning(declarations, capsys):
    result = parse(["prog", "5", "--unknownflag", "--verbose"], declarations)
    assert result
    assert result.args.verbose is True
    assert result.warnings == ["Ignoring invalid argument '--unknownflag'"]
    assert (
        "Warning: Ignoring invalid argument '--unknownflag'"
        in capsys.readouterr().err
    )


def test_extra_positional_is_unknown(declarations):
    result = parse(["prog", "5", "6"], declarations)
    assert result
    assert result.args.count == 5
    assert result.warnings == ["Ignoring invalid argument '6'"]


def test_unknown_token_error_policy(capsys):
    strict = DeclarationSet(
        boolean=[BooleanArgument("verbose", "--verbose")], unknown_tokens="error"
    )
    result = parse(["prog", "--verbose", "--bogus"], strict)
    assert not result
    assert isinstance(result.error, UnknownArgumentError)
    assert result.error.token == "--bogus"
    assert "Unrecognized argument '--bogus'." in capsys.readouterr().err


def test_optional_flag_without_value(declarations, capsys):
    result = parse(["prog", "5", "--name"], declarations)
    assert not result
    assert isinstance(result.error, ArityError)
    assert "option '--name' requires a value." in capsys.readouterr().err


def test_optional_consumes_flag_looking_value(declarations):
    result = parse(["prog", "5", "--name", "--verbose"], declarations)
    assert result
    assert result.args.name == "--verbose"
    assert result.args.verbose is False


def test_invalid_optional_value(capsys):
    declarations = DeclarationSet(
        optional=[OptionalArgument("uint", "width", 640, "--width", "px")]
    )
    result = parse(["prog", "--width", "-5"], declarations)
    assert not result
    assert isinstance(result.error, ConversionError)
    assert "negative value not allowed for unsigned int." in capsys.readouterr().err


def test_repeated_optional_keeps_last_value(declarations):
    result = parse(["prog", "1", "--name", "a", "--name", "b"], declarations)
    assert result
    assert result.args.name == "b"


def test_required_tokens_are_positional_even_if_flag_like():
    declarations = DeclarationSet(
        required=[RequiredArgument("string", "target", "target")],
        boolean=[BooleanArgument("verbose", "--verbose")],
    )
    result = parse(["prog", "--verbose"], declarations)
    assert result
    assert result.args.target == "--verbose"
    assert result.args.verbose is False


@pytest.mark.parametrize("argv", [None, []])
def test_missing_argument_vector(declarations, argv, capsys):
    result = parse(argv, declarations)
    assert not result
    assert isinstance(result.error, ArityError)
    assert "no argument vector supplied." in capsys.readouterr().err


def test_empty_declarations_accept_program_only():
    result = parse(["prog"], DeclarationSet())
    assert result
    assert result.warnings == []


def test_parse_fills_supplied_container(declarations):
    container = declarations.build_defaults()
    result = parse(["prog", "7"], declarations, container)
    assert result.args is container
    assert container.count == 7


def test_parse_does_not_mutate_argv(declarations):
    argv = ["prog", "2", "--name", "Cy"]
    parse(argv, declarations)
    assert argv == ["prog", "2", "--name", "Cy"]


def test_all_types_in_one_pass():
    declarations = DeclarationSet(
        required=[
            RequiredArgument("char", "mode", "mode"),
            RequiredArgument("size", "size", "bytes"),
        ],
        optional=[
            OptionalArgument("long_long", "offset", 0, "-o", "offset"),
            OptionalArgument("double", "ratio", 1.0, "-r", "ratio"),
            OptionalArgument("float", "gain", 0.5, "-g", "gain"),
        ],
    )
    result = parse(
        ["prog", "w", "0x100", "-o", "-0x10", "-r", "2.5e-1", "-g", "2"], declarations
    )
    assert result
    assert result.args.mode == "w"
    assert result.args.size == 256
    assert result.args.offset == -16
    assert result.args.ratio == 0.25
    assert result.args.gain == 2.0


def test_result_unwrap(declarations):
    assert parse(["prog", "4"], declarations).unwrap().count == 4
    with pytest.raises(ConversionError):
        parse(["prog", "x"], declarations).unwrap()


def test_unwrap_without_error_raises_parse_error():
    result = ParseResult(ok=False, args=None)
    with pytest.raises(ParseError):
        result.unwrap()
