"""Command to search packages by name."""

import click

from seekaur.cli.display import format_search_entry
from seekaur.cli.ensure import Ensure
from seekaur.cli.output import error_output, user_output
from seekaur.core.aur.errors import AurError
from seekaur.core.context import SeekaurContext
from seekaur.core.sorting import sort_packages
from seekaur.core.urls import search_request


@click.command("search")
@click.argument("terms", nargs=-1, metavar="TERM")
@click.pass_obj
def search_cmd(ctx: SeekaurContext, terms: tuple[str, ...]) -> None:
    """Search for packages whose name contains TERM.

    Results are listed by category, then by name.
    """
    Ensure.argument_count(terms, 1, "search must be invoked with exactly one argument")

    try:
        response = ctx.aur.rpc(search_request(terms[0]))
    except AurError as e:
        error_output(str(e))
        raise SystemExit(1) from e

    for package in sort_packages(response.results):
        user_output(format_search_entry(package, ctx.config.repo_label))
