"""Builders for AUR package records used across tests."""

from datetime import UTC, datetime
from typing import Any

from seekaur.core.aur.types import AurPackage, RpcResponse

FIRST_SUBMITTED = datetime(2012, 10, 22, 21, 2, 48, tzinfo=UTC)
LAST_MODIFIED = datetime(2013, 1, 5, 8, 30, 0, tzinfo=UTC)


def make_package(
    name: str,
    *,
    category_id: int = 3,
    version: str = "1.0-1",
    out_of_date: bool = False,
    maintainer: str | None = "alice",
    description: str | None = None,
    num_votes: int = 7,
) -> AurPackage:
    """Create an AurPackage with sensible defaults for everything but the name."""
    return AurPackage(
        maintainer=maintainer,
        id=sum(map(ord, name)),
        name=name,
        version=version,
        category_id=category_id,
        description=description if description is not None else f"The {name} package",
        url=f"https://example.com/{name}",
        license="MIT",
        num_votes=num_votes,
        out_of_date=out_of_date,
        first_submitted=FIRST_SUBMITTED,
        last_modified=LAST_MODIFIED,
        url_path=f"/packages/{name[:2]}/{name}/{name}.tar.gz",
    )


def make_response(response_type: str, packages: list[AurPackage]) -> RpcResponse:
    return RpcResponse(type=response_type, count=len(packages), results=tuple(packages))


def package_json(name: str, **overrides: Any) -> dict[str, Any]:
    """Build a raw RPC record as the server sends it."""
    record: dict[str, Any] = {
        "Maintainer": "alice",
        "ID": 4242,
        "Name": name,
        "Version": "2.1-3",
        "CategoryID": 3,
        "Description": f"The {name} package",
        "URL": f"https://example.com/{name}",
        "License": "GPL",
        "NumVotes": 12,
        "OutOfDate": 0,
        "FirstSubmitted": 1350939768,
        "LastModified": 1357374600,
        "URLPath": f"/packages/{name[:2]}/{name}/{name}.tar.gz",
    }
    record.update(overrides)
    return record
