"""Click group that treats an unknown first argument as a version specifier."""

import re

import click

DEFAULT_COMMAND = "use"

# A specifier with an empty distro, e.g. `-17`. Click reads it as an option
# unless it follows `--`, so it only reaches resolve_command in that form.
_DASHED_SPECIFIER = re.compile(r"^-\d")


class SpecifierGroup(click.Group):
    """Route `jvmswitch 17` to `jvmswitch use 17`.

    Known subcommands win; anything else that is not an option is passed,
    whole, to the default command. `jvmswitch -- -17` reaches the default
    command too; without `--` click rejects `-17` as an unknown option.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if not args:
            return super().resolve_command(ctx, args)

        first = args[0]
        dashed = _DASHED_SPECIFIER.match(first) is not None
        if (dashed or not first.startswith("-")) and self.get_command(ctx, first) is None:
            default = self.get_command(ctx, DEFAULT_COMMAND)
            if default is not None:
                forwarded = ["--", *args] if dashed else args
                return DEFAULT_COMMAND, default, forwarded
        return super().resolve_command(ctx, args)
