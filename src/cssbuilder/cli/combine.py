"""CLI command: cssbuilder combine -- join two saved selectors."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssbuilder.cli.output import emit
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SerializationError
from cssbuilder.selector import builder
from cssbuilder.serializers import load


@click.command()
@click.argument("left", type=click.Path(exists=True, dir_okay=False))
@click.argument("combinator")
@click.argument("right", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the JSON descriptor instead of the selector")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write the JSON descriptor to a file")
@click.pass_obj
def combine(
    config: BuilderConfig,
    left: str,
    combinator: str,
    right: str,
    as_json: bool,
    output: str | None,
) -> None:
    """Combine two selector descriptor files with COMBINATOR (' ', '+', '~', '>')."""
    try:
        left_selector = load(Path(left))
        right_selector = load(Path(right))
    except SerializationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    emit(builder.combine(left_selector, combinator, right_selector), config, as_json, output)
