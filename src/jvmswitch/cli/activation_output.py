"""Emit an activation result on the CLI streams.

The install path goes to stdout without decoration so the shell hook can
capture it; the announcement and errors go to stderr.
"""

from typing import NoReturn

import click

from jvmswitch.cli.ensure import Ensure
from jvmswitch.cli.output import machine_output, user_output
from jvmswitch.core.activation import ActivationResult


def emit_activation_result(result: ActivationResult) -> NoReturn:
    """Print the result and exit with its status.

    Raises:
        SystemExit: Always, with result.exit_code
    """
    if result.error is not None:
        Ensure.fail(result.error)

    if result.path is not None:
        machine_output(result.path)
    if result.announcement is not None:
        user_output(click.style(result.announcement, fg="green"))

    raise SystemExit(result.exit_code)
