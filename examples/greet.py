import sys

from easyargs import (
    BooleanArgument,
    DeclarationSet,
    EasyArgsParser,
    OptionalArgument,
    RequiredArgument,
)
from easyargs.utils import setup_logging

setup_logging()

declarations = DeclarationSet(
    required=[RequiredArgument("int", "count", "count", "Number of greetings")],
    optional=[
        OptionalArgument("string", "name", "anon", "--name", "name", "Who to greet"),
        OptionalArgument("char", "mark", "!", "--mark", "c", "Closing punctuation"),
    ],
    boolean=[BooleanArgument("verbose", "--verbose", "Print progress")],
    container_name="GreetArgs",
)

parser = EasyArgsParser(declarations, add_help=True)

if __name__ == "__main__":
    result = parser.parse(sys.argv)
    if not result:
        sys.exit(0 if result.help_requested else 1)

    args = result.args
    for index in range(args.count):
        if args.verbose:
            print(f"[{index + 1}/{args.count}]", end=" ")
        print(f"Hello, {args.name}{args.mark}")
