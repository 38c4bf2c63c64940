# ABOUTME: CLI package for Bookmatch, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bookmatch.cli.commands import match_cmd, profile_cmd, recommend_cmd, series_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=verbose
            )
        ],
        force=True,
    )


@click.group()
@click.version_option(package_name="bookmatch")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Bookmatch - match book records and rank recommendations for your library."""
    _configure_logging(verbose)


cli.add_command(match_cmd.match)
cli.add_command(profile_cmd.profile)
cli.add_command(recommend_cmd.recommend)
cli.add_command(series_cmd.series)
