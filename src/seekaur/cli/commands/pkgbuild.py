"""Command to print PKGBUILDs for packages."""

import click

from seekaur.cli.ensure import Ensure
from seekaur.cli.output import error_output, user_output
from seekaur.core.aur.errors import AurError, HttpStatusError
from seekaur.core.context import SeekaurContext
from seekaur.core.urls import pkgbuild_url


@click.command("pkgbuild")
@click.argument("names", nargs=-1)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on HTTP error statuses instead of printing the error page.",
)
@click.pass_obj
def pkgbuild_cmd(ctx: SeekaurContext, names: tuple[str, ...], strict: bool) -> None:
    """Print the PKGBUILD of each named package.

    Bodies are printed verbatim. Without --strict, a missing package prints
    whatever error page the server returns.
    """
    Ensure.package_names(names, "pkgbuild")

    for name in names:
        try:
            response = ctx.aur.get_text(pkgbuild_url(ctx.config.aur_url, name))
            if strict and not response.ok:
                raise HttpStatusError(response.url, response.status_code)
        except AurError as e:
            error_output(str(e))
            raise SystemExit(1) from e
        user_output(response.text)
