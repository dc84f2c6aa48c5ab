import pytest
from rich.console import Console

from easyargs.exceptions import ArityError, ConversionError
from easyargs.parser import (
    BooleanArgument,
    DeclarationSet,
    EasyArgsParser,
    OptionalArgument,
    RequiredArgument,
)
from easyargs.signals import HelpSignal


def build_parser(**kwargs):
    return EasyArgsParser(
        DeclarationSet(
            required=[RequiredArgument("int", "count", "count", "Number of items")],
            optional=[
                OptionalArgument(
                    "string", "name", "anon", "--name", "name", "Who to greet"
                )
            ],
            boolean=[BooleanArgument("verbose", "--verbose", "Print progress")],
        ),
        **kwargs,
    )


def test_parse_success():
    parser = build_parser(program="greet")
    result = parser.parse(["greet", "2", "--verbose"])
    assert result
    assert result.args.count == 2
    assert result.args.verbose is True
    assert isinstance(result.args, parser.container_type)


def test_parse_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["greet", "3", "--name", "Ada"])
    result = build_parser().parse()
    assert result
    assert result.args.name == "Ada"


def test_make_defaults():
    defaults = build_parser().make_defaults()
    assert (defaults.count, defaults.name, defaults.verbose) == (0, "anon", False)


def test_parse_args_returns_container():
    args = build_parser().parse_args(["greet", "9"])
    assert args.count == 9


def test_parse_args_raises_parse_errors():
    parser = build_parser()
    with pytest.raises(ConversionError):
        parser.parse_args(["greet", "nine"])
    with pytest.raises(ArityError):
        parser.parse_args(["greet"])


def test_program_name_falls_back_to_argv():
    parser = build_parser()
    assert parser.get_usage(["./greet.py"]).startswith("./greet.py <count>")
    assert build_parser(program="hello").get_usage(["./greet.py"]).startswith(
        "hello <count>"
    )


def test_program_name_falls_back_to_invocation(monkeypatch):
    monkeypatch.setattr(
        "easyargs.parser.easyargs_parser.get_program_invocation", lambda: "greet"
    )
    assert build_parser().format_help().splitlines()[1] == (
        "    greet <count> [--name <name>] [--verbose]"
    )


def test_help_switch_is_declared():
    parser = build_parser(add_help=True, program="greet")
    assert "--help" in parser.declarations.flag_map
    assert parser.make_defaults().help is False
    assert parser.get_usage() == "greet <count> [--name <name>] [--verbose] [--help]"
    assert "    --help           Show this help message." in parser.format_help()


def test_help_switch_not_duplicated():
    declarations = DeclarationSet(
        boolean=[BooleanArgument("show_help", "--help", "Custom help")]
    )
    parser = EasyArgsParser(declarations, add_help=True)
    assert parser.declarations is declarations
    assert parser.declarations.boolean_count == 1


def test_help_request_renders_help(capsys):
    parser = build_parser(add_help=True, program="greet")
    result = parser.parse(["greet", "1", "--help"])
    assert not result
    assert result.help_requested is True
    assert result.error is None
    assert result.args.help is True
    out = capsys.readouterr().out
    assert out.startswith(
        "USAGE:\n    greet <count> [--name <name>] [--verbose] [--help]\n"
    )


def test_parse_args_raises_help_signal(capsys):
    parser = build_parser(add_help=True, program="greet")
    with pytest.raises(HelpSignal):
        parser.parse_args(["greet", "2", "--verbose", "--help"])
    assert "OPTIONS:" in capsys.readouterr().out


def test_help_as_option_value_is_stored(capsys):
    parser = build_parser(add_help=True, program="greet")
    result = parser.parse(["greet", "1", "--name", "--help"])
    assert result
    assert result.help_requested is False
    assert result.args.name == "--help"
    assert result.args.help is False
    assert capsys.readouterr().out == ""


def test_help_as_required_value_is_positional(capsys):
    parser = EasyArgsParser(
        DeclarationSet(required=[RequiredArgument("string", "topic", "topic")]),
        add_help=True,
    )
    result = parser.parse(["man", "--help"])
    assert result
    assert result.args.topic == "--help"
    assert result.args.help is False
    assert capsys.readouterr().out == ""


def test_help_after_option_value(capsys):
    parser = build_parser(add_help=True, program="greet")
    result = parser.parse(["greet", "1", "--name", "Ada", "--help"])
    assert result.help_requested is True
    assert capsys.readouterr().out.startswith("USAGE:")


def test_help_ignored_without_add_help(capsys):
    result = build_parser().parse(["greet", "1", "--help"])
    assert result
    assert result.warnings == ["Ignoring invalid argument '--help'"]
    assert capsys.readouterr().out == ""


def test_render_help_uses_parser_console():
    console = Console(record=True, color_system=None)
    parser = build_parser(program="greet", console=console)
    with console.capture() as capture:
        parser.render_help()
    assert capture.get().startswith("USAGE:\n    greet <count>")


def test_str_and_repr():
    parser = build_parser()
    assert str(parser) == "EasyArgsParser(required=1, optional=1, boolean=1)"
    assert repr(parser) == str(parser)


def test_equality_and_hash():
    assert build_parser() == build_parser(program="other")
    assert hash(build_parser()) == hash(build_parser())
    assert build_parser() != build_parser(add_help=True)
    assert build_parser() != "parser"
