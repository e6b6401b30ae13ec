"""End-to-end runtime selection: config lookup, parsing and resolution.

The registry is only queried once a Query exists, so a directory without a
version declaration never pays for the registry call.
"""

import logging
from pathlib import Path

from jvmswitch.core.locator import NoConfigFound, find_specifier
from jvmswitch.core.registry.abc import JvmRegistry
from jvmswitch.core.resolver import NoMatchingRuntime, resolve_runtime
from jvmswitch.core.runtime import Runtime
from jvmswitch.core.specifier import SpecifierPolicy, UnparseableSpecifier, parse_specifier

logger = logging.getLogger(__name__)


def select_by_specifier(
    specifier: str, registry: JvmRegistry, policy: SpecifierPolicy
) -> Runtime | UnparseableSpecifier | NoMatchingRuntime:
    """Parse a specifier and resolve it against the registry."""
    query = parse_specifier(specifier, policy)
    if isinstance(query, UnparseableSpecifier):
        return query

    runtimes = registry.list_runtimes()
    logger.debug("Registry reported %d runtime(s)", len(runtimes))
    return resolve_runtime(query, runtimes)


def select_for_directory(
    cwd: Path, registry: JvmRegistry, policy: SpecifierPolicy
) -> Runtime | NoConfigFound | UnparseableSpecifier | NoMatchingRuntime:
    """Find the nearest declared specifier above `cwd` and resolve it."""
    found = find_specifier(cwd)
    if isinstance(found, NoConfigFound):
        logger.debug("No version declaration above %s", cwd)
        return found
    return select_by_specifier(found.specifier, registry, policy)
