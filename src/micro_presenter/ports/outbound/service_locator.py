"""Service locator port for type-based dependency lookup.

The dispatcher never constructs services itself. It asks the DI container
for an instance of each type a callback declares, and treats an absent
registration as "not available" rather than as an error.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Protocol, TypeVar

T = TypeVar("T")


class ServiceLocator(Protocol):
    """Protocol for resolving services by type.

    Example:
        db = locator.get_by_type(Database, throw=False)
        if db is None:
            # fall back to a default
            ...
    """

    @abstractmethod
    def get_by_type(self, interface: type[T], throw: bool = True) -> Optional[T]:
        """Resolve a service by type.

        Args:
            interface: Requested type.
            throw: Raise when nothing is registered for the type.

        Returns:
            The service, or None when unregistered and ``throw`` is False.

        Raises:
            KeyError: If unregistered and ``throw`` is True.
        """
        ...
