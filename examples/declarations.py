"""declarations.py"""

import sys
from pathlib import Path

from easyargs import EasyArgsParser
from easyargs.config import load_config
from easyargs.exceptions import ParseError

config = load_config(Path(__file__).with_name("resize.yaml"))
parser = EasyArgsParser(config.to_declarations(), program=config.program)

if __name__ == "__main__":
    try:
        args = parser.parse_args()
    except ParseError:
        sys.exit(1)
    print(f"{args.path}: {args.width}x{args.height} (x{args.scale})")
