"""Inspect and edit the global configuration."""

import dataclasses

import click

from jvmswitch.cli.ensure import Ensure
from jvmswitch.cli.json_output import emit_json
from jvmswitch.cli.json_schemas import GlobalConfigInfo
from jvmswitch.cli.output import machine_output, user_output
from jvmswitch.core.config_store import GlobalConfig, parse_env_var, parse_specifier_policy
from jvmswitch.core.context import JvmSwitchContext

CONFIG_KEYS = ("env_var", "specifier_policy")


def _config_value(config: GlobalConfig, key: str) -> str:
    match key:
        case "env_var":
            return config.env_var
        case "specifier_policy":
            return config.specifier_policy.value
        case _:
            Ensure.fail(f"Unknown config key: {key}")


def _update_config_field(current: GlobalConfig, key: str, value: str) -> GlobalConfig:
    """Return a copy of the config with one field replaced.

    Raises:
        SystemExit: If the key is unknown or the value is invalid
    """
    try:
        match key:
            case "env_var":
                return dataclasses.replace(current, env_var=parse_env_var(value))
            case "specifier_policy":
                return dataclasses.replace(
                    current, specifier_policy=parse_specifier_policy(value)
                )
            case _:
                Ensure.fail(f"Unknown config key: {key}")
    except ValueError as e:
        Ensure.fail(str(e))


@click.group("config")
def config_group() -> None:
    """Manage jvmswitch configuration."""


@config_group.command("list")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def config_list(ctx: JvmSwitchContext, output_json: bool) -> None:
    """Print every configuration key and its effective value."""
    store = ctx.config_store
    if output_json:
        info = GlobalConfigInfo(
            path=str(store.path()),
            exists=store.exists(),
            env_var=ctx.config.env_var,
            specifier_policy=ctx.config.specifier_policy.value,
        )
        emit_json(info.model_dump(mode="json"))
        return

    if not store.exists():
        user_output(click.style(f"No config at {store.path()}; using defaults", dim=True))
    for key in CONFIG_KEYS:
        machine_output(f"{key}={_config_value(ctx.config, key)}")


@config_group.command("get")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.pass_obj
def config_get(ctx: JvmSwitchContext, key: str) -> None:
    """Print the effective value of KEY."""
    machine_output(_config_value(ctx.config, key))


@config_group.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
@click.pass_obj
def config_set(ctx: JvmSwitchContext, key: str, value: str) -> None:
    """Set KEY to VALUE in the global config file."""
    updated = _update_config_field(ctx.config, key, value)
    ctx.config_store.save(updated)
    user_output(f"Set {key}={_config_value(updated, key)} in {ctx.config_store.path()}")
