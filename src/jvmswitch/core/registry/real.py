"""Registry backed by macOS `/usr/libexec/java_home -X`."""

import plistlib
from pathlib import Path
from typing import Any

from jvmswitch.core.registry.abc import JvmRegistry
from jvmswitch.core.runtime import Runtime
from jvmswitch.core.subprocess import run_subprocess_with_context

JAVA_HOME_TOOL = Path("/usr/libexec/java_home")

# plist key -> Runtime field
_PLIST_FIELDS = {
    "JVMArch": "arch",
    "JVMBundleID": "bundle_id",
    "JVMEnabled": "enabled",
    "JVMHomePath": "home_path",
    "JVMName": "name",
    "JVMPlatformVersion": "platform_version",
    "JVMVendor": "vendor",
    "JVMVersion": "version",
}


def runtime_from_plist_entry(entry: dict[str, Any]) -> Runtime:
    """Build a Runtime from one dict of the java_home plist.

    Raises:
        RuntimeError: If a required key is missing
    """
    missing = [key for key in _PLIST_FIELDS if key not in entry]
    if missing:
        raise RuntimeError(f"JVM entry is missing keys: {', '.join(missing)}")

    values = {field: entry[key] for key, field in _PLIST_FIELDS.items()}
    return Runtime(
        arch=str(values["arch"]),
        bundle_id=str(values["bundle_id"]),
        enabled=bool(values["enabled"]),
        home_path=str(values["home_path"]),
        name=str(values["name"]),
        platform_version=str(values["platform_version"]),
        vendor=str(values["vendor"]),
        version=str(values["version"]),
    )


def parse_java_home_plist(data: bytes) -> list[Runtime]:
    """Decode `java_home -X` output into runtimes, preserving order.

    Raises:
        RuntimeError: If the output is not a plist array of dicts
    """
    try:
        entries = plistlib.loads(data)
    except (plistlib.InvalidFileException, ValueError) as e:
        raise RuntimeError(
            "Failed to parse the list of JVMs. This should probably be raised as a bug!"
        ) from e

    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise RuntimeError("Expected java_home to report a list of JVM dictionaries")

    return [runtime_from_plist_entry(entry) for entry in entries]


class RealJvmRegistry(JvmRegistry):
    """Production implementation querying the macOS java_home tool."""

    def __init__(self, tool: Path = JAVA_HOME_TOOL) -> None:
        self._tool = tool

    def list_runtimes(self) -> list[Runtime]:
        if not self._tool.exists():
            raise RuntimeError(f"Failed to run {self._tool}. Is this a macOS system?")

        result = run_subprocess_with_context(
            [str(self._tool), "-X"],
            operation_context="list installed JVMs",
            text=False,
        )
        return parse_java_home_plist(result.stdout)
