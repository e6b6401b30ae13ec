"""Installed Java runtimes and their version numbers.

A Runtime is one entry from the JVM registry. Registry data is trusted: a
version string that does not follow the JVM numbering scheme is a bug in the
registry, not something the user can fix, so it raises instead of returning
a sentinel.
"""

from dataclasses import dataclass


class MalformedVersionError(ValueError):
    """Raised when a runtime's version string cannot be normalized."""

    def __init__(self, version: str, home_path: str, reason: str) -> None:
        super().__init__(f"Version {version!r} of JVM {home_path} {reason}")
        self.version = version
        self.home_path = home_path


@dataclass(frozen=True)
class Runtime:
    """One installed JVM as reported by the registry."""

    arch: str
    bundle_id: str
    enabled: bool
    home_path: str
    name: str
    platform_version: str
    vendor: str
    version: str


def parse_major_token(token: str) -> int | None:
    """Parse a version component as a non-negative integer.

    Only plain ASCII digits are accepted; int() would also take signs,
    surrounding whitespace and underscores.
    """
    if not token or not token.isascii() or not token.isdigit():
        return None
    return int(token)


def normalize_major_version(version: str, home_path: str) -> int:
    """Reduce a raw JVM version string to its major version.

    Examples:
        >>> normalize_major_version("17.0.9", "/jdk")
        17
        >>> normalize_major_version("1.8.0_392", "/jdk")
        8

    Raises:
        MalformedVersionError: If the string has no period, a legacy "1."
            string has no second period, or the major component is not numeric.
    """
    head, sep, rest = version.partition(".")
    if not sep:
        raise MalformedVersionError(version, home_path, "should contain at least one period")

    if head == "1":
        head, sep, _ = rest.partition(".")
        if not sep:
            raise MalformedVersionError(
                version, home_path, "should contain at least two periods when 1-prefixed"
            )

    major = parse_major_token(head)
    if major is None:
        raise MalformedVersionError(version, home_path, f"has non-numeric major version {head!r}")
    return major


def major_version(runtime: Runtime) -> int:
    """Return the normalized major version of a runtime."""
    return normalize_major_version(runtime.version, runtime.home_path)
