"""Output utilities for CLI commands with clear intent."""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a line of human-readable output to stdout.

    ANSI styling added with click.style is stripped automatically when stdout
    is not a terminal.
    """
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    """Write a red "Error: " prefixed message to stdout."""
    user_output(click.style("Error: ", fg="red") + message)
