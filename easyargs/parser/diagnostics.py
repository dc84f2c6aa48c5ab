# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
User-facing diagnostics for converters and the parser engine.

Diagnostics are written to the error console as single lines of the form
`Error: <reason>.` or `Warning: <reason>`. They are human-facing only; callers
check the parse outcome, not the text. Every diagnostic is mirrored to the
`easyargs` logger at debug level.
"""
from rich.text import Text

from easyargs.console import err_console
from easyargs.logger import logger


def report_error(message: str) -> None:
    """Write `Error: <message>.` to the error console."""
    logger.debug("Diagnostic error: %s", message)
    line = Text.assemble(("Error:", "error"), f" {message.rstrip('.')}.")
    err_console.print(line, soft_wrap=True, highlight=False)


def report_warning(message: str) -> None:
    """Write `Warning: <message>` to the error console."""
    logger.debug("Diagnostic warning: %s", message)
    line = Text.assemble(("Warning:", "warning"), f" {message}")
    err_console.print(line, soft_wrap=True, highlight=False)
