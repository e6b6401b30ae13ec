"""Fake JVM registry for testing."""

from jvmswitch.core.registry.abc import JvmRegistry
from jvmswitch.core.runtime import Runtime


class FakeJvmRegistry(JvmRegistry):
    """In-memory registry returning a fixed list of runtimes.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Only the call counter changes after construction

    Examples:
        >>> registry = FakeJvmRegistry(runtimes=[temurin_17])
        >>> registry.list_runtimes()
        [Runtime(...)]

        # Simulate a registry that cannot be queried
        >>> registry = FakeJvmRegistry(error="java_home not found")
    """

    def __init__(self, *, runtimes: list[Runtime] | None = None, error: str | None = None) -> None:
        self._runtimes = runtimes or []
        self._error = error
        self._list_calls = 0

    def list_runtimes(self) -> list[Runtime]:
        self._list_calls += 1
        if self._error is not None:
            raise RuntimeError(self._error)
        return list(self._runtimes)

    @property
    def list_calls(self) -> int:
        """Number of list_runtimes() calls made.

        This property is for test assertions only.
        """
        return self._list_calls
