"""Type definitions for AUR RPC responses."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AurPackage:
    """A single package record returned by the AUR RPC interface."""

    maintainer: str | None  # None for orphaned packages
    id: int
    name: str
    version: str
    category_id: int
    description: str
    url: str
    license: str
    num_votes: int
    out_of_date: bool  # sent as 0/1 on the wire
    first_submitted: datetime
    last_modified: datetime
    url_path: str  # server-relative path to the source tarball


@dataclass(frozen=True)
class RpcResponse:
    """Decoded RPC envelope.

    The length of ``results`` is authoritative; ``count`` is carried through as
    reported by the server and is not validated against it.
    """

    type: str
    count: int
    results: tuple[AurPackage, ...]


@dataclass(frozen=True)
class TextResponse:
    """Body and status of a plain (non-RPC) HTTP fetch."""

    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
