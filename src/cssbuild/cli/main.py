"""cssbuild CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuild import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssbuild")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssbuild - build canonical CSS selector strings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from cssbuild.cli.build import build  # noqa: E402
from cssbuild.cli.render import render  # noqa: E402

cli.add_command(build)
cli.add_command(render)
