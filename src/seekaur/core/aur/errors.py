"""Exceptions raised by AUR operations."""


class AurError(Exception):
    """Base class for all AUR client failures."""


class NetworkError(AurError):
    """The AUR could not be reached (DNS failure, refused connection, timeout)."""


class DecodeError(AurError):
    """A response body could not be decoded into the expected shape."""


class RpcError(AurError):
    """The RPC endpoint answered with an error envelope."""


class HttpStatusError(AurError):
    """A plain HTTP fetch returned a non-success status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"GET {url} returned HTTP {status_code}")
        self.url = url
        self.status_code = status_code


class PackagesNotFoundError(AurError):
    """One or more packages requested by name were absent from the response."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__("Some packages were not found")
        self.missing = missing
