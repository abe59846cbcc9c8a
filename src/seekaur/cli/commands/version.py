"""Command to print the version."""

import click

from seekaur.cli.constants import VERSION_STRING
from seekaur.cli.output import user_output


@click.command("version")
def version_cmd() -> None:
    """Display the version."""
    user_output(VERSION_STRING)
