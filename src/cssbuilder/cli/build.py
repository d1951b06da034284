"""CLI command: cssbuilder build -- assemble a compound selector."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli.output import emit
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.selector import builder


@click.command()
@click.option("--element", "element", default=None, help="Element name")
@click.option("--id", "ids", multiple=True, help="Id (repeatable)")
@click.option("--class", "classes", multiple=True, help="Class (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute, without brackets (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, without colon (repeatable)")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element, without colons")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON descriptor instead of the selector")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write the JSON descriptor to a file")
@click.pass_obj
def build(
    config: BuilderConfig,
    element: str | None,
    ids: tuple[str, ...],
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
    as_json: bool,
    output: str | None,
) -> None:
    """Build a compound selector from its parts.

    Parts are applied in grammar order (element, id, class, attribute,
    pseudo-class, pseudo-element) regardless of the order options are given;
    repeatable parts keep the order they appear on the command line.
    """
    if not any((element, ids, classes, attrs, pseudo_classes, pseudo_element)):
        raise click.UsageError("At least one selector part is required.")

    selector = builder
    try:
        if element is not None:
            selector = selector.element(element)
        for value in ids:
            selector = selector.id(value)
        for value in classes:
            selector = selector.class_(value)
        for value in attrs:
            selector = selector.attr(value)
        for value in pseudo_classes:
            selector = selector.pseudo_class(value)
        if pseudo_element is not None:
            selector = selector.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    emit(selector, config, as_json, output)
