"""
Analyze command - infer the column schema of a pasted table.
"""
import json

import click
from rich.markup import escape

from sqlpaste.cli.console import console
from sqlpaste.cli.display import display_column_table, display_warnings
from sqlpaste.config import get_settings
from sqlpaste.metadata import columns_to_dataframe
from sqlpaste.parser import analyze_paste

PASTE_PATH = click.Path(exists=True, dir_okay=False, allow_dash=True)


def _read_paste(path) -> str:
    """Read a pasted file, or stdin for '-'."""
    if not path:
        return ''
    with click.open_file(path, 'r', encoding='utf-8') as f:
        return f.read()


@click.command('analyze')
@click.option('--structure', 'structure_path', type=PASTE_PATH,
              help='INFORMATION_SCHEMA.COLUMNS output (use - for stdin)')
@click.option('--results', 'results_path', type=PASTE_PATH,
              help='SELECT output with a header row (use - for stdin)')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'csv']),
              default='table', show_default=True, help='Output format')
def analyze_command(structure_path, results_path, output_format: str):
    """
    Detect columns from pasted query output.

    Pass the column structure, some result rows, or both. With both, the
    structure is the base and inferred types fill in generic VARCHAR ones.
    """
    if structure_path is None and results_path is None:
        raise click.UsageError('Provide --structure, --results, or both')
    if structure_path == '-' and results_path == '-':
        raise click.UsageError('Only one of --structure and --results can read from stdin')

    structure_text = _read_paste(structure_path)
    results_text = _read_paste(results_path)

    analysis = analyze_paste(structure_text, results_text, get_settings())

    if not analysis.ok:
        console.print(f"[error]{escape(analysis.message)}[/]")
        display_warnings(analysis.warnings)
        raise click.exceptions.Exit(1)

    _emit(analysis, output_format)


def _emit(analysis, output_format: str) -> None:
    """Print the analysis in the requested format."""
    if output_format == 'json':
        click.echo(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
        return

    if output_format == 'csv':
        click.echo(columns_to_dataframe(analysis.columns).to_csv(index=False), nl=False)
        return

    console.print(f"\n[success]{analysis.message}[/]\n")
    display_warnings(analysis.warnings)
    display_column_table(analysis.columns)
