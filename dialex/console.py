# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the Dialex inspector and error reporting."""
from rich.console import Console
from rich.theme import Theme

dialex_theme = Theme(
    {
        "token.option": "bold cyan",
        "token.value": "green",
        "token.positional": "magenta",
        "token.error": "bold red",
        "token.meta": "dim",
    }
)

console = Console(color_system="truecolor", theme=dialex_theme)
