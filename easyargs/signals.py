# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by EasyArgs.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they
bypass `except Exception` blocks in caller code. They are not errors.

Signals:
- HelpSignal: Help text was requested and has already been rendered.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in EasyArgs."""


class HelpSignal(FlowSignal):
    """Raised by `EasyArgsParser.parse_args()` after rendering help for `--help`."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
