"""Fake implementation of Shell for testing.

This fake enables testing shell-dependent functionality without
requiring a specific SHELL environment variable.
"""

from jvmswitch.core.shell import Shell


class FakeShell(Shell):
    """In-memory fake implementation of shell detection.

    Constructor Injection:
    - All state is provided via constructor parameters
    - No mutations occur (immutable after construction)

    Examples:
        >>> FakeShell(detected_shell="zsh").detect_shell()
        'zsh'
        >>> FakeShell().detect_shell() is None
        True
    """

    def __init__(self, *, detected_shell: str | None = None) -> None:
        self._detected_shell = detected_shell

    def detect_shell(self) -> str | None:
        """Return the shell configured at construction time."""
        return self._detected_shell
