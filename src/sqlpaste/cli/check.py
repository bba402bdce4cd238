"""
Check command - quick format check of pasted result rows.
"""
import click

from sqlpaste.cli.console import console
from sqlpaste.parser import validate_result_text


@click.command('check')
@click.argument('results_file', type=click.File('r', encoding='utf-8'))
def check_command(results_file):
    """Check that pasted results have headers and at least one data row."""
    validation = validate_result_text(results_file.read())

    if not validation.valid:
        console.print(f"[error]{validation.message}[/]")
        raise click.exceptions.Exit(1)

    console.print(f"[success]{validation.message}[/]")
