"""Shell integration source for `eval "$(jvmswitch init)"`."""

import click

from jvmswitch.cli.ensure import Ensure
from jvmswitch.cli.output import machine_output
from jvmswitch.cli.shell_hooks import render_shell_hook
from jvmswitch.core.context import JvmSwitchContext
from jvmswitch.core.shell import SUPPORTED_SHELLS


@click.command("init")
@click.argument("shell", required=False, type=click.Choice(SUPPORTED_SHELLS))
@click.pass_obj
def init_cmd(ctx: JvmSwitchContext, shell: str | None) -> None:
    """Print shell integration source.

    Without SHELL, the shell is detected from $SHELL.

    \b
    Add to your shell configuration:
        bash:  eval "$(jvmswitch init bash)"
        zsh:   eval "$(jvmswitch init zsh)"
        fish:  jvmswitch init fish | source
    """
    if shell is None:
        shell = Ensure.not_none(
            ctx.shell.detect_shell(),
            "Could not detect a supported shell from $SHELL. "
            f"Pass one explicitly: {', '.join(SUPPORTED_SHELLS)}",
        )

    machine_output(render_shell_hook(shell, ctx.config.env_var), nl=False)
