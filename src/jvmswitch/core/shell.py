"""Login shell detection."""

import os
from abc import ABC, abstractmethod
from pathlib import Path

SUPPORTED_SHELLS = ("bash", "zsh", "fish")


class Shell(ABC):
    """Abstract interface for inspecting the user's shell environment.

    This abstraction enables testing without mock.patch by making shell
    detection an injectable dependency.
    """

    @abstractmethod
    def detect_shell(self) -> str | None:
        """Return the name of the user's shell if it is supported.

        Returns:
            One of SUPPORTED_SHELLS, or None if unknown or unsupported
        """
        ...


def shell_name_from_path(shell_path: str) -> str | None:
    """Map a shell executable path like /bin/zsh to a supported shell name."""
    name = Path(shell_path).name
    if name in SUPPORTED_SHELLS:
        return name
    return None


class RealShell(Shell):
    """Production implementation reading the SHELL environment variable."""

    def detect_shell(self) -> str | None:
        shell_path = os.environ.get("SHELL")
        if not shell_path:
            return None
        return shell_name_from_path(shell_path)
