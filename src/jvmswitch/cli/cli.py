import click

from jvmswitch.cli.commands.auto import auto_cmd
from jvmswitch.cli.commands.config import config_group
from jvmswitch.cli.commands.init import init_cmd
from jvmswitch.cli.commands.list_cmd import list_cmd
from jvmswitch.cli.commands.use import use_cmd
from jvmswitch.cli.debug import configure_logging
from jvmswitch.cli.ensure import Ensure
from jvmswitch.cli.spec_group import SpecifierGroup
from jvmswitch.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(cls=SpecifierGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="jvmswitch")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Select an installed Java runtime by version.

    \b
    jvmswitch                 List installed runtimes
    jvmswitch <specifier>     Print the path of a matching runtime (e.g. 17, 1.8, temurin-21)
    jvmswitch auto [-q]       Use the version declared by the current project
    jvmswitch init [shell]    Print shell integration source
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            Ensure.fail(str(e))

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_cmd, output_json=False)


cli.add_command(auto_cmd)
cli.add_command(config_group)
cli.add_command(init_cmd)
cli.add_command(list_cmd)
cli.add_command(use_cmd)


def main() -> None:
    """CLI entry point used by the `jvmswitch` console script."""
    configure_logging()
    cli()
