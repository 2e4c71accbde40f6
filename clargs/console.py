# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for clargs CLI applications."""
from rich.console import Console

from clargs.themes import get_default_theme

console = Console(color_system="truecolor", theme=get_default_theme())
