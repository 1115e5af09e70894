"""framesmith CLI entry point: Click group with subcommands."""

import logging

import click

from framesmith import __version__


@click.group()
@click.version_option(version=__version__, prog_name="framesmith")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """framesmith - convert HTML and CSS into layout-node trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from framesmith.cli.convert import convert  # noqa: E402
from framesmith.cli.serve import serve  # noqa: E402
from framesmith.cli.styles import styles  # noqa: E402

cli.add_command(convert)
cli.add_command(styles)
cli.add_command(serve)
