"""
sqlpaste CLI module - shared console and commands.
"""
from sqlpaste.cli.console import console, custom_theme
from sqlpaste.cli.display import display_column_table, display_warnings
from sqlpaste.cli.analyze import analyze_command
from sqlpaste.cli.check import check_command

__all__ = [
    'console',
    'custom_theme',
    'display_column_table',
    'display_warnings',
    'analyze_command',
    'check_command',
]
