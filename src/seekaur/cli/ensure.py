"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import Any

from seekaur.cli.output import error_output


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            error_output(error_message)
            raise SystemExit(1)

    @staticmethod
    def argument_count(
        args: tuple[Any, ...] | list[Any],
        expected: int,
        error_message: str | None = None,
    ) -> None:
        """Ensure argument count matches expected, otherwise output styled error and exit.

        Example:
            >>> Ensure.argument_count(args, 1, "search must be invoked with exactly one argument")
        """
        if len(args) != expected:
            if error_message is None:
                noun = "argument" if expected == 1 else "arguments"
                error_message = f"Expected {expected} {noun}, got {len(args)}"
            error_output(error_message)
            raise SystemExit(1)

    @staticmethod
    def package_names(names: tuple[str, ...], command: str) -> None:
        """Ensure at least one package name was given and none are blank or repeated.

        Args:
            names: Package names from the command line
            command: Command name used in the error message
        """
        Ensure.invariant(len(names) > 0, f"{command} requires at least one argument")
        for name in names:
            Ensure.invariant(bool(name.strip()), f"{command}: package names cannot be empty")
        duplicates = sorted({name for name in names if names.count(name) > 1})
        Ensure.invariant(
            not duplicates,
            f"{command}: package names given more than once: {', '.join(duplicates)}",
        )
