"""
sqlpaste CLI

Commands:
    analyze     Detect columns from pasted structure and/or result rows
    check       Check the format of pasted result rows
"""
import logging

import click

from sqlpaste.cli.analyze import analyze_command
from sqlpaste.cli.check import check_command
from sqlpaste.config import get_settings


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose: bool):
    """sqlpaste - column schemas from pasted SQL output"""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


cli.add_command(analyze_command)
cli.add_command(check_command)


if __name__ == '__main__':
    cli()
