"""Cascading lookup of a project's declared Java version.

Starting from a directory, each level is checked for `.java-version` and then
`.tool-versions`; the nearest declaration wins.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

JAVA_VERSION_FILE = ".java-version"
TOOL_VERSIONS_FILE = ".tool-versions"


@dataclass(frozen=True)
class FoundSpecifier:
    """A specifier read from a config file."""

    specifier: str
    source: Path


@dataclass(frozen=True)
class NoConfigFound:
    """Sentinel returned when no directory up to the root declares a version."""

    start: Path

    @property
    def message(self) -> str:
        return (
            f"No {JAVA_VERSION_FILE} or {TOOL_VERSIONS_FILE} with a java entry "
            f"found in {self.start} or any parent directory"
        )


def _read_text(path: Path) -> str | None:
    """Read a file, treating anything unreadable as absent."""
    try:
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError):
        logger.debug("Ignoring unreadable %s", path)
        return None


def read_tool_versions_entry(content: str) -> str | None:
    """Return the java specifier from `.tool-versions` content, if any.

    Only the first line whose tool token is exactly ``java`` is used; other
    lines are ignored without validation.
    """
    for raw_line in content.splitlines():
        line = raw_line.strip()
        parts = line.split(maxsplit=1)
        if parts and parts[0] == "java":
            return parts[1] if len(parts) > 1 else ""
    return None


def _specifier_in(directory: Path) -> FoundSpecifier | None:
    primary = directory / JAVA_VERSION_FILE
    content = _read_text(primary)
    if content is not None:
        return FoundSpecifier(specifier=content.strip(), source=primary)

    secondary = directory / TOOL_VERSIONS_FILE
    content = _read_text(secondary)
    if content is not None:
        specifier = read_tool_versions_entry(content)
        if specifier is not None:
            return FoundSpecifier(specifier=specifier, source=secondary)

    return None


def find_specifier(start: Path) -> FoundSpecifier | NoConfigFound:
    """Walk up from `start` to the filesystem root looking for a declaration.

    Args:
        start: Directory to begin the search in; made absolute once

    Returns:
        FoundSpecifier from the nearest directory that declares one, or
        NoConfigFound if the root is reached without a match
    """
    current = start.absolute()
    while True:
        found = _specifier_in(current)
        if found is not None:
            logger.debug("Found specifier %r in %s", found.specifier, found.source)
            return found

        parent = current.parent
        if parent == current:
            return NoConfigFound(start=start)
        current = parent
