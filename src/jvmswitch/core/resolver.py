"""Selection of one runtime from the registry for a Query."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from jvmswitch.core.runtime import Runtime, major_version
from jvmswitch.core.specifier import Query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoMatchingRuntime:
    """Sentinel returned when no installed runtime satisfies a Query."""

    query: Query

    @property
    def message(self) -> str:
        return (
            f"You requested a JVM of version {self.query.describe()}, "
            "but no such JVM is installed!"
        )


def distro_matches(query: Query, runtime: Runtime) -> bool:
    """Check the query's distro constraint against a runtime.

    The constraint is a case-sensitive substring of either the bundle id or
    the install path. No constraint matches everything.
    """
    if query.distro is None:
        return True
    return query.distro in runtime.bundle_id or query.distro in runtime.home_path


def resolve_runtime(query: Query, runtimes: Sequence[Runtime]) -> Runtime | NoMatchingRuntime:
    """Return the first runtime, in registry order, that satisfies the query.

    The registry order is used as-is; nothing is sorted or deduplicated.

    Raises:
        MalformedVersionError: If a runtime examined before the match has a
            version string that cannot be normalized.
    """
    for runtime in runtimes:
        if major_version(runtime) != query.version:
            continue
        if not distro_matches(query, runtime):
            continue
        logger.debug("Resolved %s to %s", query, runtime.home_path)
        return runtime

    logger.debug("No match for %s among %d runtime(s)", query, len(runtimes))
    return NoMatchingRuntime(query=query)
