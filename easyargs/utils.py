# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process helpers for EasyArgs: the program name shown in usage lines when none
is given, container detection and logging setup.
"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

from easyargs.logger import logger

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_invocation() -> str:
    """Return how the running program is invoked, e.g. `greet` or `python greet.py`."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "program"
    if shutil.which(script):
        return os.path.basename(script)
    if "python" in os.path.basename(sys.executable):
        return f"python {script}"
    return script


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_MODES = ("cli", "json")


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(LOG_FORMAT)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(_json_formatter())
    return handler


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure root logging for EasyArgs programs.

    Log records are developer diagnostics. Parse errors and warnings meant for
    the user go to the error console whether or not this is called.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for structured
            logs. Falls back to `EASYARGS_LOG_MODE`, then to "json" inside a
            container and "cli" elsewhere.
        log_filename (str | None): Also log to this file when given.
        json_log_to_file (bool): Write the file log as JSON instead of plain text.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("EASYARGS_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    handlers = [(_console_handler(mode), console_log_level)]
    if log_filename:
        handlers.append((_file_handler(log_filename, json_log_to_file), file_log_level))
    for handler, level in handlers:
        handler.setLevel(level)
        root.addHandler(handler)

    logging.getLogger("easyargs").propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
