"""Styleripper CLI entry point: Click group with subcommands."""

import logging

import click

from styleripper import __version__


@click.group()
@click.version_option(version=__version__, prog_name="styleripper")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for per-file detail)")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Styleripper - shrink HTML and CSS by renaming classes and dropping dead rules."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Import and register subcommands
from styleripper.cli.rip import rip  # noqa: E402
from styleripper.cli.build import build, watch  # noqa: E402

cli.add_command(rip)
cli.add_command(build)
cli.add_command(watch)
