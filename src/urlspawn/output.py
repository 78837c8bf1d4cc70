"""User-facing output helpers."""

import click


def user_output(message: str) -> None:
    """Write a message meant for the user to stderr, keeping stdout for logs."""
    click.echo(message, err=True)
