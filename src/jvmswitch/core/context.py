"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from jvmswitch.core.config_store import (
    ConfigStore,
    FilesystemConfigStore,
    GlobalConfig,
    InMemoryConfigStore,
)
from jvmswitch.core.registry.abc import JvmRegistry
from jvmswitch.core.registry.real import RealJvmRegistry
from jvmswitch.core.shell import RealShell, Shell


@dataclass(frozen=True)
class JvmSwitchContext:
    """Immutable context holding all dependencies for jvmswitch operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Attributes:
        registry: Source of installed runtimes (queried lazily)
        shell: Login shell detection
        config_store: Global config persistence
        config: Global config loaded at startup
        cwd: Current working directory at CLI invocation
        exported_path: Value of config.env_var in the caller's environment
    """

    registry: JvmRegistry
    shell: Shell
    config_store: ConfigStore
    config: GlobalConfig
    cwd: Path
    exported_path: str | None

    @staticmethod
    def for_test(
        registry: JvmRegistry | None = None,
        shell: Shell | None = None,
        config_store: ConfigStore | None = None,
        config: GlobalConfig | None = None,
        cwd: Path | None = None,
        exported_path: str | None = None,
    ) -> "JvmSwitchContext":
        """Create test context with optional pre-configured dependencies.

        Any dependency left as None gets its in-memory test default.

        Example:
            >>> registry = FakeJvmRegistry(runtimes=[temurin_17])
            >>> ctx = JvmSwitchContext.for_test(registry=registry, cwd=tmp_path)
            >>> result = runner.invoke(cli, ["17"], obj=ctx)
        """
        from tests.fakes.shell import FakeShell

        from jvmswitch.core.registry.fake import FakeJvmRegistry

        if config is None:
            config = GlobalConfig.defaults()

        return JvmSwitchContext(
            registry=registry if registry is not None else FakeJvmRegistry(),
            shell=shell if shell is not None else FakeShell(),
            config_store=(
                config_store if config_store is not None else InMemoryConfigStore(config=config)
            ),
            config=config,
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            exported_path=exported_path,
        )


def create_context() -> JvmSwitchContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the global config file exists but is malformed
    """
    config_store = FilesystemConfigStore()
    config = config_store.load() if config_store.exists() else GlobalConfig.defaults()

    return JvmSwitchContext(
        registry=RealJvmRegistry(),
        shell=RealShell(),
        config_store=config_store,
        config=config,
        cwd=Path.cwd(),
        exported_path=os.environ.get(config.env_var),
    )
