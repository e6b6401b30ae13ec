"""List installed runtimes."""

import click
from rich.console import Console

from jvmswitch.cli.ensure import Ensure
from jvmswitch.cli.json_output import emit_json
from jvmswitch.cli.json_schemas import ListCommandResponse, RuntimeInfo
from jvmswitch.cli.rendering import build_runtime_table
from jvmswitch.core.context import JvmSwitchContext


@click.command("list")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
def list_cmd(ctx: JvmSwitchContext, output_json: bool) -> None:
    """List installed runtimes in registry order."""
    try:
        runtimes = ctx.registry.list_runtimes()
    except RuntimeError as e:
        Ensure.fail(str(e))

    if output_json:
        response = ListCommandResponse(
            runtimes=[RuntimeInfo.from_runtime(i, rt) for i, rt in enumerate(runtimes, start=1)]
        )
        emit_json(response.model_dump(mode="json"))
        return

    console = Console()
    console.print(build_runtime_table(runtimes))
