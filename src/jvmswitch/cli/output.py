"""Output utilities for CLI commands with clear intent.

stdout is reserved for data the shell hook captures (the selected install
path, JSON); everything meant for a human goes to stderr.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users (stderr)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output structured data for machine or shell consumption (stdout)."""
    click.echo(message, nl=nl)
