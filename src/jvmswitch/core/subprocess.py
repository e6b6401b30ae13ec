"""Subprocess execution with rich error context.

Wraps subprocess.run() so integration failures surface as RuntimeError with
the operation, command and captured output in the message.
"""

import subprocess
from collections.abc import Sequence
from typing import Any


def _decode(stream: str | bytes) -> str:
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    text: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess:
    """Execute subprocess with enriched error reporting for the integration layer.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        text: Whether to decode output as UTF-8 text (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command fails or its binary is not found
    """
    if text:
        kwargs.setdefault("encoding", "utf-8")

    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=text,
            check=True,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stdout:
            stdout_stripped = _decode(e.stdout).strip()
            if stdout_stripped:
                error_msg += f"\nstdout: {stdout_stripped}"

        if e.stderr:
            stderr_stripped = _decode(e.stderr).strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise RuntimeError(error_msg) from e

    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
