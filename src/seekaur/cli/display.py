"""Formatting of package records for terminal output.

Two layouts mirror pacman:

- compact search entries (``aur/devel/name version`` plus an indented
  description line)
- verbose info blocks (``-Si`` style labeled fields)

Staleness is shown differently in each. Compact entries color the version red;
info blocks append a literal ``[out of date]`` suffix. All functions are pure
and render records in the order they are given.
"""

from datetime import datetime, tzinfo

import click

from seekaur.cli.constants import (
    CURRENT_VERSION_STYLE,
    NAME_STYLE,
    OUT_OF_DATE_SUFFIX,
    REPO_STYLE,
    STALE_VERSION_STYLE,
    TIMESTAMP_FORMAT,
)
from seekaur.core.aur.types import AurPackage
from seekaur.core.categories import category_name

LABEL_WIDTH = 16


def format_timestamp(value: datetime, tz: tzinfo | None = None) -> str:
    """Format a timestamp like ``Mon 22 Oct 2012 09:02:48 PM UTC``.

    Args:
        value: Timezone-aware datetime
        tz: Zone to render in, defaults to the local zone
    """
    return value.astimezone(tz).strftime(TIMESTAMP_FORMAT)


def format_version(package: AurPackage) -> str:
    style = STALE_VERSION_STYLE if package.out_of_date else CURRENT_VERSION_STYLE
    return click.style(package.version, **style)


def format_search_entry(package: AurPackage, repo_label: str) -> str:
    """Format a package as a two-line search result."""
    prefix = click.style(f"{repo_label}/{category_name(package.category_id)}/", **REPO_STYLE)
    name = click.style(package.name, **NAME_STYLE)
    return f"{prefix}{name} {format_version(package)}\n    {package.description}"


def _field(label: str, value: object) -> str:
    return click.style(f"{label:<{LABEL_WIDTH}}: ", bold=True) + str(value)


def format_info_block(package: AurPackage, tz: tzinfo | None = None) -> str:
    """Format a package as a labeled info block, ending with a blank line."""
    version = package.version
    if package.out_of_date:
        version = f"{version} {OUT_OF_DATE_SUFFIX}"

    lines = [
        _field("Category", category_name(package.category_id)),
        _field("Name", package.name),
        _field("Version", version),
        _field("Description", package.description),
        _field("URL", package.url),
        _field("Licenses", package.license),
        _field("Maintainer", package.maintainer if package.maintainer is not None else "None"),
        _field("First Submitted", format_timestamp(package.first_submitted, tz)),
        _field("Last Modified", format_timestamp(package.last_modified, tz)),
        _field("Votes", package.num_votes),
        "",
    ]
    return "\n".join(lines)
