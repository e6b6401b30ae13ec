"""Global configuration data structures and loading.

Provides immutable global config loaded from ~/.config/jvmswitch/config.toml
(or the file named by JVMSWITCH_CONFIG). Every key is optional; a missing file
means defaults.
"""

import os
import re
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit

from jvmswitch.core.specifier import SpecifierPolicy

CONFIG_ENV_VAR = "JVMSWITCH_CONFIG"
DEFAULT_ENV_VAR = "JAVA_HOME"

_ENV_VAR_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in JvmSwitchContext.
    """

    env_var: str
    specifier_policy: SpecifierPolicy

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(env_var=DEFAULT_ENV_VAR, specifier_policy=SpecifierPolicy.STRIPPED)


def parse_env_var(value: str) -> str:
    """Validate a variable name for the shell hook to export.

    Raises:
        ValueError: If the name is not a valid shell identifier
    """
    if not _ENV_VAR_NAME.match(value):
        raise ValueError(f"Invalid env_var {value!r}: must be a shell variable name")
    return value


def parse_specifier_policy(value: str) -> SpecifierPolicy:
    """Parse a specifier_policy value.

    Raises:
        ValueError: If the value is not one of the known policies
    """
    for policy in SpecifierPolicy:
        if policy.value == value:
            return policy
    choices = ", ".join(p.value for p in SpecifierPolicy)
    raise ValueError(f"Invalid specifier_policy {value!r}: expected one of {choices}")


def config_from_mapping(data: dict[str, Any], source: Path) -> GlobalConfig:
    """Build GlobalConfig from parsed TOML, filling in defaults.

    Raises:
        ValueError: If a value has the wrong type or is not allowed
    """
    defaults = GlobalConfig.defaults()

    env_var = data.get("env_var", defaults.env_var)
    if not isinstance(env_var, str):
        raise ValueError(f"'env_var' in {source} must be a string")

    policy = data.get("specifier_policy", defaults.specifier_policy.value)
    if not isinstance(policy, str):
        raise ValueError(f"'specifier_policy' in {source} must be a string")

    return GlobalConfig(
        env_var=parse_env_var(env_var),
        specifier_policy=parse_specifier_policy(policy),
    )


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes the TOML config file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Global config not found at {config_path}")

        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Cannot read config file {config_path}: {e}") from e

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config file {config_path}: {e}") from e

        return config_from_mapping(data, config_path)

    def save(self, config: GlobalConfig) -> None:
        """Write config, keeping comments and unrelated keys already in the file."""
        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global jvmswitch configuration"))

        doc["env_var"] = config.env_var
        doc["specifier_policy"] = config.specifier_policy.value
        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / "jvmswitch" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            raise FileNotFoundError(f"Global config not found at {self.path()}")
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/test/config.toml")
