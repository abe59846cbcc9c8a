"""Ordering of search results."""

from collections.abc import Iterable

from seekaur.core.aur.types import AurPackage


def package_sort_key(package: AurPackage) -> tuple[int, str]:
    return (package.category_id, package.name)


def sort_packages(packages: Iterable[AurPackage]) -> list[AurPackage]:
    """Sort packages the way the AUR web interface lists them.

    Category id ascending, then name ascending by codepoint. The sort is
    stable, so packages with equal category and name keep their input order.
    """
    return sorted(packages, key=package_sort_key)
