"""Dependency injection container."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from micro_presenter.infrastructure.config import Config, get_config
from micro_presenter.infrastructure.metrics import MetricsRegistry, get_metrics

T = TypeVar("T")


class Container:
    """
    Simple dependency injection container.

    Supports singleton and factory registrations with lazy initialization,
    and type-based lookup that also matches registrations of subclasses.
    Implements the ServiceLocator port.
    """

    def __init__(self) -> None:
        """Initialize the container."""
        self._singletons: dict[type, Any] = {}
        self._factories: dict[type, Callable[[Container], Any]] = {}
        self._instances: dict[type, Any] = {}

    def register_singleton(self, interface: type[T], instance: T) -> None:
        """
        Register a singleton instance.

        Args:
            interface: The interface/type to register
            instance: The singleton instance
        """
        self._singletons[interface] = instance
        self._instances[interface] = instance

    def register_factory(
        self,
        interface: type[T],
        factory: Callable[[Container], T],
    ) -> None:
        """
        Register a factory function for lazy instantiation.

        Args:
            interface: The interface/type to register
            factory: Factory function that takes the container and returns an instance
        """
        self._factories[interface] = factory

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a dependency registered under exactly this type.

        Raises:
            KeyError: If no registration exists for the interface
        """
        if interface in self._instances:
            return self._instances[interface]

        if interface in self._factories:
            instance = self._factories[interface](self)
            self._instances[interface] = instance
            return instance

        raise KeyError(f"No registration found for {interface}")

    def get_by_type(self, interface: type[T], throw: bool = True) -> Optional[T]:
        """
        Resolve a dependency by type.

        Looks for an exact registration first, then for a registration
        whose type derives from ``interface``.

        Args:
            interface: Requested type
            throw: Raise when nothing matches instead of returning None

        Raises:
            KeyError: If nothing matches and ``throw`` is True
        """
        key = self._find_key(interface)
        if key is None:
            if throw:
                raise KeyError(f"No service of type {getattr(interface, '__name__', interface)} found")
            return None
        return self.resolve(key)

    def has(self, interface: type) -> bool:
        """Check if an interface is registered."""
        return (
            interface in self._singletons
            or interface in self._factories
            or interface in self._instances
        )

    def clear(self) -> None:
        """Clear all registrations and instances."""
        self._singletons.clear()
        self._factories.clear()
        self._instances.clear()

    def _find_key(self, interface: type) -> Optional[type]:
        if self.has(interface):
            return interface
        for key in (*self._instances, *self._factories):
            if interface in getattr(key, "__mro__", ()):
                return key
        return None


def build_container(config: Config | None = None, container: Container | None = None) -> Container:
    """
    Register the default services.

    Registers the configuration, the metrics registry and a Jinja2
    engine factory, each unless already registered.

    Args:
        config: Configuration to register (defaults to get_config())
        container: Container to populate (defaults to a new one)

    Returns:
        The populated container
    """
    from micro_presenter.adapters.outbound.jinja_engine import JinjaEngineFactory
    from micro_presenter.ports.outbound.template_engine import TemplateEngineFactory

    config = config or get_config()
    container = container if container is not None else Container()

    if not container.has(Config):
        container.register_singleton(Config, config)
    if not container.has(MetricsRegistry):
        container.register_factory(MetricsRegistry, lambda c: get_metrics())
    if container.get_by_type(TemplateEngineFactory, throw=False) is None:
        container.register_factory(
            TemplateEngineFactory,
            lambda c: JinjaEngineFactory(c.resolve(Config).templates),
        )
    return container


# Global container instance
_container: Container | None = None


def get_container() -> Container:
    """Get the global container instance."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    if _container is not None:
        _container.clear()
    _container = None
