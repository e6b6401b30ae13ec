"""Pydantic models for JSON output schemas.

These models validate the documents emitted by commands that support --json.
"""

from pydantic import BaseModel, ConfigDict

from jvmswitch.core.runtime import Runtime


class RuntimeInfo(BaseModel):
    """One installed runtime in `jvmswitch list --json`.

    Attributes:
        index: 1-based position in registry order
        version: Raw version string reported by the registry
        name: Display name
        arch: CPU architecture
        vendor: Vendor name
        bundle_id: Bundle identifier
        home_path: Install path
        enabled: Whether the registry marks the runtime as enabled
    """

    model_config = ConfigDict(strict=True)

    index: int
    version: str
    name: str
    arch: str
    vendor: str
    bundle_id: str
    home_path: str
    enabled: bool

    @staticmethod
    def from_runtime(index: int, runtime: Runtime) -> "RuntimeInfo":
        return RuntimeInfo(
            index=index,
            version=runtime.version,
            name=runtime.name,
            arch=runtime.arch,
            vendor=runtime.vendor,
            bundle_id=runtime.bundle_id,
            home_path=runtime.home_path,
            enabled=runtime.enabled,
        )


class ListCommandResponse(BaseModel):
    """JSON response schema for the `jvmswitch list` command."""

    model_config = ConfigDict(strict=True)

    runtimes: list[RuntimeInfo]


class GlobalConfigInfo(BaseModel):
    """Global configuration for `jvmswitch config list --json`.

    Attributes:
        path: Location of the config file
        exists: Whether the file exists (defaults apply when it does not)
        env_var: Variable the shell hook exports
        specifier_policy: How undotted distro-qualified specifiers are parsed
    """

    model_config = ConfigDict(strict=True)

    path: str
    exists: bool
    env_var: str
    specifier_policy: str
