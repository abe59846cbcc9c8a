"""Shared constants for seekaur CLI commands."""

VERSION_STRING = "seekaur v1.0.0"

# Style arguments for click.style
REPO_STYLE = {"fg": "magenta", "bold": True}
NAME_STYLE = {"fg": "white", "bold": True}
CURRENT_VERSION_STYLE = {"fg": "green", "bold": True}
STALE_VERSION_STYLE = {"fg": "red", "bold": True}

OUT_OF_DATE_SUFFIX = "[out of date]"
TIMESTAMP_FORMAT = "%a %d %b %Y %I:%M:%S %p %Z"
