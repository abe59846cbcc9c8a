"""Command to print source tarball links for packages."""

import click

from seekaur.cli.commands.info import report_missing_package
from seekaur.cli.ensure import Ensure
from seekaur.cli.output import error_output, user_output
from seekaur.core.aur.errors import AurError, PackagesNotFoundError
from seekaur.core.aur.types import AurPackage
from seekaur.core.context import SeekaurContext
from seekaur.core.multi_info import multi_info
from seekaur.core.urls import tarball_url, url_path_url


@click.command("tarball")
@click.argument("names", nargs=-1)
@click.option(
    "--verify",
    is_flag=True,
    help="Look the packages up first and print the tarball path the AUR reports.",
)
@click.pass_obj
def tarball_cmd(ctx: SeekaurContext, names: tuple[str, ...], verify: bool) -> None:
    """Print the tarball link for each named package.

    Links are built from the names alone without contacting the AUR, so a
    misspelled name still produces a (dead) link. Use --verify to resolve
    names through the RPC interface instead.
    """
    Ensure.package_names(names, "tarball")

    if not verify:
        for name in names:
            user_output(tarball_url(ctx.config.aur_url, name))
        return

    def show(package: AurPackage) -> None:
        user_output(url_path_url(ctx.config.aur_url, package.url_path))

    try:
        multi_info(ctx.aur, names, on_match=show, on_missing=report_missing_package)
    except PackagesNotFoundError as e:
        raise SystemExit(1) from e
    except AurError as e:
        error_output(str(e))
        raise SystemExit(1) from e
