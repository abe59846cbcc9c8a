"""Batched package lookup by exact name.

The multiinfo RPC returns records in arbitrary order and silently omits names
it does not know. The helpers here re-associate each record with the name it
was requested under, preserving the caller's ordering.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from seekaur.core.aur.abc import Aur
from seekaur.core.aur.errors import PackagesNotFoundError
from seekaur.core.aur.types import AurPackage
from seekaur.core.urls import multiinfo_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupOutcome:
    """Result of looking up one requested name."""

    name: str
    package: AurPackage | None  # None when the server returned no such package


def reconcile(names: Iterable[str], packages: Sequence[AurPackage]) -> Iterator[LookupOutcome]:
    """Pair each requested name with its record, in request order.

    Scans the whole response for every name; the first exact match wins.
    """
    for name in names:
        match = None
        for package in packages:
            if package.name == name:
                match = package
                break
        yield LookupOutcome(name=name, package=match)


def multi_info(
    aur: Aur,
    names: Sequence[str],
    on_match: Callable[[AurPackage], None],
    on_missing: Callable[[str], None],
) -> None:
    """Look up packages by exact name with a single RPC call.

    Calls on_match for every package found and on_missing for every name that
    was not, interleaved in the order of ``names``. If on_match raises, the
    lookup stops there and the exception propagates.

    Args:
        aur: AUR integration to query
        names: Exact package names, in the order results should be reported
        on_match: Called with each matched package
        on_missing: Called with each name that had no match

    Raises:
        PackagesNotFoundError: After all names were processed, if the server
            returned fewer packages than were requested
        NetworkError: If the AUR could not be reached
        DecodeError: If the response could not be decoded
    """
    response = aur.rpc(multiinfo_request(names))
    logger.debug("multiinfo: requested=%d, returned=%d", len(names), len(response.results))

    missing: list[str] = []
    for outcome in reconcile(names, response.results):
        if outcome.package is None:
            missing.append(outcome.name)
            on_missing(outcome.name)
        else:
            on_match(outcome.package)

    if len(response.results) < len(names):
        raise PackagesNotFoundError(missing)
