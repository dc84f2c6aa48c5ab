# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances: `console` for help and results, `err_console` for diagnostics."""
from rich.console import Console

from easyargs.themes import get_one_theme

console = Console(color_system="auto", theme=get_one_theme())
err_console = Console(color_system="auto", theme=get_one_theme(), stderr=True)
