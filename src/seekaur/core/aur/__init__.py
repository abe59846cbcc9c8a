"""AUR RPC subpackage.

This subpackage provides an abstraction over the AUR RPC interface with a
production implementation backed by httpx and an in-memory fake for tests.
"""

from seekaur.core.aur.abc import Aur
from seekaur.core.aur.errors import (
    AurError,
    DecodeError,
    HttpStatusError,
    NetworkError,
    PackagesNotFoundError,
    RpcError,
)
from seekaur.core.aur.fake import FakeAur
from seekaur.core.aur.real import RealAur
from seekaur.core.aur.types import AurPackage, RpcResponse, TextResponse

__all__ = [
    "Aur",
    "AurError",
    "AurPackage",
    "DecodeError",
    "FakeAur",
    "HttpStatusError",
    "NetworkError",
    "PackagesNotFoundError",
    "RealAur",
    "RpcError",
    "RpcResponse",
    "TextResponse",
]
