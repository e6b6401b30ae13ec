"""Abstract interface for the installed-JVM registry."""

from abc import ABC, abstractmethod

from jvmswitch.core.runtime import Runtime


class JvmRegistry(ABC):
    """Source of installed Java runtimes.

    This abstraction enables testing without mock.patch by making the
    registry an injectable dependency.
    """

    @abstractmethod
    def list_runtimes(self) -> list[Runtime]:
        """Return installed runtimes in the order the platform reports them.

        Raises:
            RuntimeError: If the registry cannot be queried or decoded
        """
        ...
