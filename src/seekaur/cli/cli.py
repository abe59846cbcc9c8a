import logging
import os

import click

from seekaur.cli.commands.info import info_cmd
from seekaur.cli.commands.pkgbuild import pkgbuild_cmd
from seekaur.cli.commands.search import search_cmd
from seekaur.cli.commands.tarball import tarball_cmd
from seekaur.cli.commands.version import version_cmd
from seekaur.cli.output import error_output
from seekaur.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if SEEKAUR_DEBUG environment variable is set
if os.getenv("SEEKAUR_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="seekaur")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Search and inspect packages in the Arch User Repository."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            error_output(str(e))
            raise SystemExit(1) from e


cli.add_command(info_cmd)
cli.add_command(pkgbuild_cmd)
cli.add_command(search_cmd)
cli.add_command(tarball_cmd)
cli.add_command(version_cmd)


def main() -> None:
    """CLI entry point used by the `seekaur` console script."""
    cli()
