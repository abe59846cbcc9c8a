"""Command to display detailed information for packages."""

import click

from seekaur.cli.display import format_info_block
from seekaur.cli.ensure import Ensure
from seekaur.cli.output import error_output, user_output
from seekaur.core.aur.errors import AurError, PackagesNotFoundError
from seekaur.core.aur.types import AurPackage
from seekaur.core.context import SeekaurContext
from seekaur.core.multi_info import multi_info


def report_missing_package(name: str) -> None:
    """Print the per-package diagnostic for a name the AUR does not know."""
    user_output(click.style("error:", fg="red", bold=True) + f" package '{name}' was not found")


@click.command("info")
@click.argument("names", nargs=-1)
@click.pass_obj
def info_cmd(ctx: SeekaurContext, names: tuple[str, ...]) -> None:
    """Display detailed information for each named package.

    Each NAME must exactly match a package name. Names with no corresponding
    package are reported as errors and make the command exit non-zero.
    """
    Ensure.package_names(names, "info")

    def show(package: AurPackage) -> None:
        user_output(format_info_block(package))

    try:
        multi_info(ctx.aur, names, on_match=show, on_missing=report_missing_package)
    except PackagesNotFoundError as e:
        # Each missing name was already reported as it was reached
        raise SystemExit(1) from e
    except AurError as e:
        error_output(str(e))
        raise SystemExit(1) from e
