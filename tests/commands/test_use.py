"""Tests for explicit activation via `jvmswitch <specifier>` and `jvmswitch use`."""

from click.testing import CliRunner

from jvmswitch.cli.cli import cli
from jvmswitch.core.config_store import GlobalConfig
from jvmswitch.core.context import JvmSwitchContext
from jvmswitch.core.registry.fake import FakeJvmRegistry
from jvmswitch.core.specifier import SpecifierPolicy
from tests.test_utils.runtimes import CORRETTO_8, INSTALLED, TEMURIN_17, ZULU_17, make_runtime


def _ctx(**kwargs) -> JvmSwitchContext:
    kwargs.setdefault("registry", FakeJvmRegistry(runtimes=INSTALLED))
    return JvmSwitchContext.for_test(**kwargs)


def test_bare_specifier_prints_path_and_announces() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["17"], obj=_ctx())

    assert result.exit_code == 0
    assert result.stdout == ZULU_17.home_path + "\n"
    assert "Activating Java Zulu 17" in result.stderr


def test_use_subcommand_is_equivalent() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["use", "1.8"], obj=_ctx())

    assert result.exit_code == 0
    assert result.stdout == CORRETTO_8.home_path + "\n"


def test_distro_specifier_selects_distro() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["temurin-17"], obj=_ctx())

    assert result.exit_code == 0
    assert result.stdout == TEMURIN_17.home_path + "\n"


def test_announces_even_when_already_exported() -> None:
    runner = CliRunner()
    ctx = _ctx(exported_path=ZULU_17.home_path)

    result = runner.invoke(cli, ["17"], obj=ctx)

    assert result.exit_code == 0
    assert "Activating Java Zulu 17" in result.stderr


def test_no_matching_runtime_fails() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["11"], obj=_ctx())

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Error: You requested a JVM of version 11" in result.stderr


def test_unparseable_specifier_fails() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["latest"], obj=_ctx())

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Did not understand version spec 'latest'" in result.stderr


def test_original_policy_from_config() -> None:
    runner = CliRunner()
    config = GlobalConfig(env_var="JAVA_HOME", specifier_policy=SpecifierPolicy.ORIGINAL)

    result = runner.invoke(cli, ["temurin-17"], obj=_ctx(config=config))

    assert result.exit_code == 1
    assert "Did not understand version spec 'temurin-17'" in result.stderr


def test_malformed_registry_version_is_fatal() -> None:
    runner = CliRunner()
    registry = FakeJvmRegistry(runtimes=[make_runtime("17", home_path="/broken")])

    result = runner.invoke(cli, ["17"], obj=_ctx(registry=registry))

    assert result.exit_code == 1
    assert "Error: Version '17' of JVM /broken" in result.stderr


def test_registry_failure_is_reported() -> None:
    runner = CliRunner()
    registry = FakeJvmRegistry(error="Failed to run /usr/libexec/java_home")

    result = runner.invoke(cli, ["17"], obj=_ctx(registry=registry))

    assert result.exit_code == 1
    assert "Failed to run /usr/libexec/java_home" in result.stderr


def test_dashed_specifier_after_double_dash() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["--", "-17"], obj=_ctx())

    assert result.exit_code == 0
    assert result.stdout == ZULU_17.home_path + "\n"


def test_use_accepts_dashed_specifier_after_double_dash() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["use", "--", "-17"], obj=_ctx())

    assert result.exit_code == 0
    assert result.stdout == ZULU_17.home_path + "\n"


def test_dashed_specifier_without_double_dash_is_usage_error() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-17"], obj=_ctx())

    assert result.exit_code == 2
    assert result.stdout == ""
