"""Styled one-line status messages for the CLI.

Notices go to **stderr** so that stdout stays reserved for command output
(Alembic revisions, generated SQL).
"""

import click


def warn(message: str) -> None:
    """Print a yellow warning notice to stderr."""
    click.secho(f"WARNING: {message}", fg="yellow", err=True)


def error(message: str) -> None:
    """Print a red error notice to stderr."""
    click.secho(f"ERROR: {message}", fg="red", bold=True, err=True)


def success(message: str) -> None:
    """Print a green success notice to stderr."""
    click.secho(message, fg="green", err=True)
