"""
Rendering of detected columns for the terminal.
"""
from typing import List

from rich.markup import escape
from rich.table import Table

from sqlpaste.cli.console import console
from sqlpaste.metadata import summarize_columns
from sqlpaste.parser import ColumnDescriptor


def display_column_table(columns: List[ColumnDescriptor], title: str = "Detected columns") -> None:
    """Display one row per column with type, length, nullability and key flag."""
    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("Column", style="bold white")
    table.add_column("Type", style="green")
    table.add_column("Length", justify="right")
    table.add_column("Nulls", justify="center")
    table.add_column("Key", justify="center")
    table.add_column("Description")

    for i, col in enumerate(columns, 1):
        table.add_row(
            str(i),
            escape(col.name),
            col.type.value,
            col.length or "-",
            "yes" if col.nullable else "no",
            "[key]key[/]" if col.is_key_candidate else "",
            escape(col.description[:50] + "..." if len(col.description) > 50 else col.description),
        )
    console.print(table)

    summary = summarize_columns(columns)
    console.print(
        f"\n  [highlight]{summary['total']} columns[/], "
        f"[key]{summary['keys']} key candidates[/], "
        f"[muted]{summary['nullable']} nullable[/]"
    )


def display_warnings(warnings: List[str]) -> None:
    for warning in warnings:
        console.print(f"[warning]Warning:[/] {escape(warning)}")
