"""zstack CLI entry point: Click group with subcommands."""

import logging

import click

from zstack import __version__


@click.group()
@click.version_option(version=__version__, prog_name="zstack")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """zstack - z-index stacking topology for CSS and HTML."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from zstack.cli.rank import rank  # noqa: E402
from zstack.cli.topology import topology  # noqa: E402
from zstack.cli.highlight import highlight  # noqa: E402

cli.add_command(rank)
cli.add_command(topology)
cli.add_command(highlight)
