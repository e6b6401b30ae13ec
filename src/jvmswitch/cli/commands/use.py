"""Explicit activation: `jvmswitch use <specifier>` (or just `jvmswitch <specifier>`)."""

import click

from jvmswitch.cli.activation_output import emit_activation_result
from jvmswitch.cli.ensure import Ensure
from jvmswitch.core.activation import activate
from jvmswitch.core.context import JvmSwitchContext
from jvmswitch.core.runtime import MalformedVersionError
from jvmswitch.core.switcher import select_by_specifier


@click.command("use")
@click.argument("specifier")
@click.pass_obj
def use_cmd(ctx: JvmSwitchContext, specifier: str) -> None:
    """Print the install path of the runtime matching SPECIFIER.

    Errors are always reported here; quiet mode only applies to `auto`.

    Examples:
        jvmswitch 17              # Any Java 17
        jvmswitch 1.8             # Java 8
        jvmswitch temurin-21      # Java 21 whose bundle id or path contains "temurin"
    """
    try:
        outcome = select_by_specifier(specifier, ctx.registry, ctx.config.specifier_policy)
    except (MalformedVersionError, RuntimeError) as e:
        Ensure.fail(str(e))

    emit_activation_result(activate(outcome, quiet=False, exported_path=ctx.exported_path))
