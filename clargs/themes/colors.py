# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the default Rich theme used by clargs output.

`OneColors` holds hex colors from the One Dark palette. `get_default_theme()`
maps the semantic style names used by the help renderer and the outer shell
(`clargs.usage`, `clargs.error`, ...) onto those colors.
"""
from rich.theme import Theme


class OneColors:
    """One Dark color palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"

    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"
    LIGHT_RED_b = f"bold {LIGHT_RED}"


def get_default_theme() -> Theme:
    """Return the Rich theme with the `clargs.*` style names."""
    return Theme(
        {
            "clargs.title": OneColors.BLUE_b,
            "clargs.usage": "bold",
            "clargs.heading": OneColors.LIGHT_YELLOW,
            "clargs.flag": OneColors.CYAN,
            "clargs.command": OneColors.CYAN_b,
            "clargs.type": OneColors.COMMENT_GREY,
            "clargs.default": OneColors.GREEN,
            "clargs.description": OneColors.WHITE,
            "clargs.version": OneColors.BLUE_b,
            "clargs.error": OneColors.DARK_RED,
            "repr.number": OneColors.DARK_YELLOW,
        }
    )
