"""CLI command: cssbuilder render -- print a saved selector."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssbuilder.errors import SerializationError
from cssbuilder.serializers import load


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def render(file: str) -> None:
    """Print the selector string stored in a descriptor FILE."""
    try:
        selector = load(Path(file))
    except SerializationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
