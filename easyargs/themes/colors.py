# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used by EasyArgs consoles.

`OneColors` holds the One Dark colors EasyArgs output uses, with `_b` suffixed
variants for bold text. `get_one_theme()` maps the semantic style names used
by EasyArgs output (`error`, `warning`, `heading`, ...) onto them.
"""
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    CYAN = "#56B6C2"

    DARK_RED_b = f"bold {DARK_RED}"
    DARK_YELLOW_b = f"bold {DARK_YELLOW}"
    BLUE_b = f"bold {BLUE}"


def get_one_theme() -> Theme:
    return Theme(
        {
            "error": OneColors.DARK_RED_b,
            "warning": OneColors.DARK_YELLOW_b,
            "heading": OneColors.BLUE_b,
            "flag": OneColors.CYAN,
            "value": OneColors.GREEN,
            "muted": OneColors.COMMENT_GREY,
        }
    )
