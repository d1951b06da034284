"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("-v", "--verbose", is_flag=True, help="Log each builder step to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cssbuilder - assemble CSS selectors from ordered parts."""
    try:
        config = BuilderConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("cssbuilder").setLevel(
        logging.DEBUG if verbose else config.log_level
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.combine import combine  # noqa: E402
from cssbuilder.cli.render import render  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(render)
