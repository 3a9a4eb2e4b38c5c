# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for clargs output."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "clargs.title": "bold cyan",
        "clargs.key": "cyan",
        "clargs.required": "yellow",
        "clargs.value": "green",
        "clargs.error": "bold red",
        "clargs.muted": "dim",
    }
)

console = Console(theme=theme)
