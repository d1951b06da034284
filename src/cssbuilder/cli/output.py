"""Shared output handling for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.selector import Selector
from cssbuilder.serializers import save, to_json


def emit(
    selector: Selector, config: BuilderConfig, as_json: bool, output: str | None
) -> None:
    """Print the selector, or its JSON descriptor, and optionally save it."""
    if output:
        save(selector, Path(output), indent=config.json_indent)
        click.echo(f"Wrote {output}", err=True)
    if as_json:
        click.echo(to_json(selector, indent=config.json_indent))
    else:
        click.echo(selector.stringify())
