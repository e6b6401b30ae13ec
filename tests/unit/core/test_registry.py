"""Tests for the java_home-backed registry."""

import plistlib
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from jvmswitch.core.registry.fake import FakeJvmRegistry
from jvmswitch.core.registry.real import (
    RealJvmRegistry,
    parse_java_home_plist,
    runtime_from_plist_entry,
)
from jvmswitch.core.runtime import Runtime


def _entry(version: str, home: str, bundle_id: str = "net.temurin.jdk") -> dict[str, object]:
    return {
        "JVMArch": "arm64",
        "JVMBundleID": bundle_id,
        "JVMEnabled": True,
        "JVMHomePath": home,
        "JVMName": "OpenJDK",
        "JVMPlatformVersion": version,
        "JVMVendor": "Eclipse Adoptium",
        "JVMVersion": version,
    }


class TestParseJavaHomePlist:
    def test_decodes_entries_in_order(self) -> None:
        data = plistlib.dumps([_entry("21.0.1", "/jdk21"), _entry("1.8.0_392", "/jdk8")])

        runtimes = parse_java_home_plist(data)

        assert [rt.home_path for rt in runtimes] == ["/jdk21", "/jdk8"]
        assert runtimes[0] == Runtime(
            arch="arm64",
            bundle_id="net.temurin.jdk",
            enabled=True,
            home_path="/jdk21",
            name="OpenJDK",
            platform_version="21.0.1",
            vendor="Eclipse Adoptium",
            version="21.0.1",
        )

    def test_extra_keys_are_ignored(self) -> None:
        entry = _entry("17.0.9", "/jdk17")
        entry["JVMHomePathBackup"] = "/elsewhere"

        runtimes = parse_java_home_plist(plistlib.dumps([entry]))

        assert runtimes[0].home_path == "/jdk17"

    def test_empty_list(self) -> None:
        assert parse_java_home_plist(plistlib.dumps([])) == []

    def test_garbage_raises_runtime_error(self) -> None:
        with pytest.raises(RuntimeError, match="Failed to parse the list of JVMs"):
            parse_java_home_plist(b"not a plist")

    def test_non_list_raises_runtime_error(self) -> None:
        with pytest.raises(RuntimeError, match="list of JVM dictionaries"):
            parse_java_home_plist(plistlib.dumps({"JVMVersion": "17.0.1"}))

    def test_missing_key_raises_runtime_error(self) -> None:
        entry = _entry("17.0.9", "/jdk17")
        del entry["JVMHomePath"]

        with pytest.raises(RuntimeError, match="JVMHomePath"):
            runtime_from_plist_entry(entry)


class TestRealJvmRegistry:
    def test_missing_tool_raises(self, tmp_path: Path) -> None:
        registry = RealJvmRegistry(tool=tmp_path / "java_home")

        with pytest.raises(RuntimeError, match="Is this a macOS system"):
            registry.list_runtimes()

    def test_runs_tool_and_parses_output(self, tmp_path: Path) -> None:
        tool = tmp_path / "java_home"
        tool.touch()
        output = plistlib.dumps([_entry("17.0.9", "/jdk17")])

        with patch("jvmswitch.core.subprocess.subprocess.run") as mock_run:
            mock_result = Mock(spec=subprocess.CompletedProcess)
            mock_result.stdout = output
            mock_run.return_value = mock_result

            runtimes = RealJvmRegistry(tool=tool).list_runtimes()

        assert [rt.home_path for rt in runtimes] == ["/jdk17"]
        mock_run.assert_called_once_with(
            [str(tool), "-X"],
            capture_output=True,
            text=False,
            check=True,
        )

    def test_tool_failure_raises_with_context(self, tmp_path: Path) -> None:
        tool = tmp_path / "java_home"
        tool.touch()

        with patch("jvmswitch.core.subprocess.subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                returncode=2, cmd=[str(tool), "-X"], stderr=b"Unable to find any JVMs"
            )

            with pytest.raises(RuntimeError) as exc_info:
                RealJvmRegistry(tool=tool).list_runtimes()

        message = str(exc_info.value)
        assert "Failed to list installed JVMs" in message
        assert "Exit code: 2" in message
        assert "stderr: Unable to find any JVMs" in message


class TestFakeJvmRegistry:
    def test_returns_copy_and_counts_calls(self) -> None:
        registry = FakeJvmRegistry(runtimes=[])
        registry.list_runtimes()
        registry.list_runtimes()
        assert registry.list_calls == 2

    def test_configured_error(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            FakeJvmRegistry(error="boom").list_runtimes()
