"""
Shared Rich console and theme for the sqlpaste CLI.
"""
from rich.console import Console
from rich.theme import Theme

custom_theme = Theme({
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
    "highlight": "bold blue",
    "muted": "dim",
    "key": "bold cyan",
    "table.header": "bold blue",
})

console = Console(theme=custom_theme, highlight=False)
