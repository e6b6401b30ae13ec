"""Quiet-mode failure policy for runtime activation.

Turns the outcome of a resolution attempt into what the CLI should print and
how it should exit. Quiet mode never changes which runtime is selected; it only
silences lookup failures and skips the announcement when the exported path
would not change.
"""

from dataclasses import dataclass

from jvmswitch.core.locator import NoConfigFound
from jvmswitch.core.resolver import NoMatchingRuntime
from jvmswitch.core.runtime import Runtime
from jvmswitch.core.specifier import UnparseableSpecifier

ResolutionFailure = NoConfigFound | UnparseableSpecifier | NoMatchingRuntime


@dataclass(frozen=True)
class ActivationResult:
    """What to emit for one activation attempt.

    Attributes:
        exit_code: Process exit status (0 or 1)
        path: Install path for stdout, or None to print nothing
        announcement: Human-readable message for stderr, or None
        error: Error message for stderr, or None
    """

    exit_code: int
    path: str | None
    announcement: str | None
    error: str | None


def announcement_for(runtime: Runtime) -> str:
    return f"Activating Java {runtime.name}"


def activate(
    outcome: Runtime | ResolutionFailure,
    *,
    quiet: bool,
    exported_path: str | None,
) -> ActivationResult:
    """Apply the failure policy to a resolution outcome.

    Args:
        outcome: Selected runtime or the sentinel describing why none was
        quiet: Whether failures are silent and redundant announcements skipped
        exported_path: Value of the runtime variable already exported by the
            caller's shell, if any

    Returns:
        ActivationResult describing output and exit status
    """
    if not isinstance(outcome, Runtime):
        if quiet:
            return ActivationResult(exit_code=0, path=None, announcement=None, error=None)
        return ActivationResult(exit_code=1, path=None, announcement=None, error=outcome.message)

    unchanged = exported_path is not None and exported_path == outcome.home_path
    announcement = None if quiet and unchanged else announcement_for(outcome)
    return ActivationResult(
        exit_code=0, path=outcome.home_path, announcement=announcement, error=None
    )
