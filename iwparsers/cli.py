"""
Command line interface

Usage:
    iwparsers parse screen.txt                 # detect layout, print record
    iwparsers parse screen.txt --json -o out.json
    iwparsers parse - --type de_index_geb < screen.txt
    iwparsers detect screen.txt
    iwparsers list-types
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigLoader
from .doctypes.builtin_types import create_registry
from .results import ParseOutcome


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """Configure loguru logging."""
    # Remove default handler
    logger.remove()

    # Console logging
    log_level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=log_level,
        colorize=True
    )

    # File logging
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="10 MB"
        )


def _read_input(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    return Path(source).read_text(encoding='utf-8')


def _print_outcome(outcome: ParseOutcome, console: Console) -> None:
    if not outcome.success:
        console.print(f"[red]✗ Parsing failed[/] ({outcome.identifier or 'unknown layout'})")
        # The offending text can be long; show the reason only
        if outcome.errors:
            console.print(f"  Error: {outcome.errors[0]}")
        return

    console.print(f"[green]✓ Parsed as {outcome.identifier}[/]")

    table = Table(title="Record")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in outcome.record.to_dict().items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, ensure_ascii=False)
        table.add_row(name, str(value))
    console.print(table)

    for warning in outcome.warnings:
        console.print(f"[yellow]Warning:[/] {warning}")


@click.group()
@click.version_option(__version__, prog_name='iwparsers')
def main():
    """Parse text copied from the game's screens."""


@main.command('parse')
@click.argument('source', type=str)
@click.option(
    '--type', '-t',
    'identifier',
    default=None,
    help='Screen type identifier (detected when omitted)'
)
@click.option(
    '--config', '-c',
    'config_path',
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help='YAML file with locale and matching settings'
)
@click.option(
    '--json', 'as_json',
    is_flag=True,
    help='Print the outcome as JSON'
)
@click.option(
    '--output', '-o',
    'output_path',
    type=click.Path(path_type=Path),
    default=None,
    help='Write the JSON outcome to a file'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Enable verbose logging'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Write detailed logs to file'
)
def parse_command(
    source: str,
    identifier: Optional[str],
    config_path: Optional[Path],
    as_json: bool,
    output_path: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
):
    """Parse SOURCE (a file, or - for stdin)."""
    setup_logging(verbose, log_file)
    console = Console()

    loader = ConfigLoader(config_path)
    registry = create_registry(loader.locale, loader.budget)

    outcome = registry.parse(_read_input(source), identifier)
    data = outcome.to_dict()

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')
        logger.info(f"Outcome written to: {output_path}")

    if as_json:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        _print_outcome(outcome, console)

    if not outcome.success:
        sys.exit(1)


@main.command('detect')
@click.argument('source', type=str)
def detect_command(source: str):
    """Print the screen type of SOURCE."""
    setup_logging()
    parser = create_registry().detect(_read_input(source))
    if parser is None:
        click.echo('No matching screen type', err=True)
        sys.exit(1)
    click.echo(parser.identifier)


@main.command('list-types')
def list_types_command():
    """List the available screen types in detection order."""
    console = Console()
    table = Table(title="Screen Types")
    table.add_column("Identifier", style="cyan")
    table.add_column("Name")
    for parser in create_registry().get_all():
        table.add_row(parser.identifier, parser.name)
    console.print(table)


if __name__ == '__main__':
    main()
