"""Request paths and download URLs for the AUR.

Everything here is pure string templating; no network access happens.
"""

from collections.abc import Sequence
from urllib.parse import quote_plus

RPC_PATH = "/rpc.php"


def search_request(term: str) -> str:
    """Build the RPC path for a name search.

    Example:
        >>> search_request("python foo")
        '/rpc.php?type=search&arg=python+foo'
    """
    return f"{RPC_PATH}?type=search&arg={quote_plus(term)}"


def multiinfo_request(names: Sequence[str]) -> str:
    """Build the batched RPC path looking up every name at once.

    Each name becomes its own ``arg[]`` parameter, escaped individually.
    """
    args = "".join(f"&arg[]={quote_plus(name)}" for name in names)
    return f"{RPC_PATH}?type=multiinfo{args}"


def package_prefix(name: str) -> str:
    """Return the directory prefix the AUR shards package files under.

    This is the first two characters of the name. Names shorter than two
    characters use the whole name.
    """
    return name[:2]


def package_dir_url(origin: str, name: str) -> str:
    return f"{origin.rstrip('/')}/packages/{package_prefix(name)}/{name}"


def tarball_url(origin: str, name: str) -> str:
    """Build the source tarball URL for a package name.

    Example:
        >>> tarball_url("https://aur.archlinux.org", "foo")
        'https://aur.archlinux.org/packages/fo/foo/foo.tar.gz'
    """
    return f"{package_dir_url(origin, name)}/{name}.tar.gz"


def pkgbuild_url(origin: str, name: str) -> str:
    """Build the raw PKGBUILD URL for a package name."""
    return f"{package_dir_url(origin, name)}/PKGBUILD"


def url_path_url(origin: str, url_path: str) -> str:
    """Resolve a server-relative URLPath from an RPC record against the origin."""
    return f"{origin.rstrip('/')}/{url_path.lstrip('/')}"
