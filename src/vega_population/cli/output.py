"""Output helpers for CLI commands with clear intent.

user_output is for messages aimed at a person (stderr); machine_output is for
results a script may consume (stdout).
"""

import click


def user_output(message: str = "") -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write a result line to stdout."""
    click.echo(message)
