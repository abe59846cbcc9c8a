"""Fixed AUR category table."""

from types import MappingProxyType

CATEGORIES: MappingProxyType[int, str] = MappingProxyType(
    {
        1: "none",
        2: "daemons",
        3: "devel",
        4: "editors",
        5: "emulators",
        6: "games",
        7: "gnome",
        8: "i18n",
        9: "kde",
        10: "lib",
        11: "modules",
        12: "multimedia",
        13: "network",
        14: "office",
        15: "science",
        16: "system",
        17: "x11",
        18: "xfce",
        19: "kernels",
        20: "fonts",
    }
)


def category_name(category_id: int) -> str:
    """Return the display name for a category id.

    Raises:
        KeyError: If the id is not in the table
    """
    return CATEGORIES[category_id]
