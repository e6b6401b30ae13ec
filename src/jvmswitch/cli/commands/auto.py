"""Activation from the nearest `.java-version` or `.tool-versions`."""

import click

from jvmswitch.cli.activation_output import emit_activation_result
from jvmswitch.cli.ensure import Ensure
from jvmswitch.core.activation import activate
from jvmswitch.core.context import JvmSwitchContext
from jvmswitch.core.runtime import MalformedVersionError
from jvmswitch.core.switcher import select_for_directory


@click.command("auto")
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Exit silently when nothing is declared or matched, and skip the "
    "announcement when the runtime is already active.",
)
@click.pass_obj
def auto_cmd(ctx: JvmSwitchContext, quiet: bool) -> None:
    """Select the runtime declared by the current project.

    Searches the current directory and its parents for `.java-version`, then
    for a `java` line in `.tool-versions`. The shell hook runs this with
    --quiet on every directory change.
    """
    try:
        outcome = select_for_directory(ctx.cwd, ctx.registry, ctx.config.specifier_policy)
    except (MalformedVersionError, RuntimeError) as e:
        Ensure.fail(str(e))

    emit_activation_result(activate(outcome, quiet=quiet, exported_path=ctx.exported_path))
