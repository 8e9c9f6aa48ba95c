"""CLI entry point — Click command group."""

from __future__ import annotations

import logging

import click

from assetroots import __version__
from assetroots.core.env import load_user_env, log_level

load_user_env()


@click.group()
@click.version_option(__version__, prog_name="assetroots")
@click.option("-v", "--verbose", is_flag=True, help="Log every resolved root.")
def cli(verbose: bool) -> None:
    """assetroots — resolve and validate asset roots for a build unit."""
    level = log_level(verbose)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)


# Register all sub-commands on import
from assetroots.cli import commands as _commands  # noqa: F401, E402
