"""Tests for `jvmswitch init`."""

from click.testing import CliRunner

from jvmswitch.cli.cli import cli
from jvmswitch.core.config_store import GlobalConfig
from jvmswitch.core.context import JvmSwitchContext
from jvmswitch.core.registry.fake import FakeJvmRegistry
from jvmswitch.core.specifier import SpecifierPolicy
from tests.fakes.shell import FakeShell


def test_explicit_shell() -> None:
    runner = CliRunner()
    ctx = JvmSwitchContext.for_test()

    result = runner.invoke(cli, ["init", "fish"], obj=ctx)

    assert result.exit_code == 0
    assert "shell integration for fish" in result.stdout
    assert "set -gx JAVA_HOME" in result.stdout


def test_detected_shell() -> None:
    runner = CliRunner()
    ctx = JvmSwitchContext.for_test(shell=FakeShell(detected_shell="zsh"))

    result = runner.invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0
    assert "add-zsh-hook chpwd __jvmswitch_auto" in result.stdout


def test_undetectable_shell_fails() -> None:
    runner = CliRunner()
    ctx = JvmSwitchContext.for_test(shell=FakeShell(detected_shell=None))

    result = runner.invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Could not detect a supported shell" in result.stderr


def test_unsupported_shell_argument_is_rejected() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["init", "tcsh"], obj=JvmSwitchContext.for_test())

    assert result.exit_code == 2


def test_uses_configured_variable() -> None:
    runner = CliRunner()
    config = GlobalConfig(env_var="JDK_HOME", specifier_policy=SpecifierPolicy.STRIPPED)
    ctx = JvmSwitchContext.for_test(config=config)

    result = runner.invoke(cli, ["init", "bash"], obj=ctx)

    assert 'export JDK_HOME="$__jvmswitch_path"' in result.stdout


def test_init_does_not_query_registry() -> None:
    runner = CliRunner()
    registry = FakeJvmRegistry()

    runner.invoke(cli, ["init", "bash"], obj=JvmSwitchContext.for_test(registry=registry))

    assert registry.list_calls == 0
