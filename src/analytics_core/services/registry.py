"""Service registry for dependency injection."""

from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeVar, cast

T = TypeVar("T")
ServiceFactory = Callable[[], T]
ServiceProvider = T | ServiceFactory[T]


class ServiceRegistry:
    """Registry for all shared services with support for singletons and factories.

    Services are keyed by type name. Whatever was registered with
    ``register_singleton`` is returned as-is, even if it is callable; whatever
    was registered with ``register_factory`` is called on each ``get``.
    """

    def __init__(self):
        """Initialize an empty service registry."""
        self._services: dict[str, ServiceProvider[Any]] = {}
        self._singletons: set[str] = set()

    def register_singleton(self, service_type: type[T], instance: T) -> None:
        """Register a singleton instance by its type.

        Args:
            service_type: The type of the service to register
            instance: The singleton instance to register
        """
        self._services[service_type.__name__] = instance
        self._singletons.add(service_type.__name__)

    def register_factory(self, service_type: type[T], factory: ServiceFactory[T]) -> None:
        """Register a factory function by its type.

        Args:
            service_type: The type of the service to register
            factory: The factory function that creates instances of the service
        """
        self._services[service_type.__name__] = factory
        self._singletons.discard(service_type.__name__)

    def get(self, service_type: type[T]) -> T:
        """Get a service instance by type.

        Args:
            service_type: The type of the service to retrieve

        Returns:
            An instance of the requested service

        Raises:
            KeyError: If the requested service is not registered
        """
        service_name = service_type.__name__

        if service_name not in self._services:
            raise KeyError(f"Service {service_name} not registered")

        provider = self._services[service_name]

        # Singletons may themselves be callable (e.g. an observer object)
        if service_name in self._singletons:
            return cast(T, provider)

        return provider()

    def is_registered(self, service_type: type) -> bool:
        return service_type.__name__ in self._services

    def clear(self) -> None:
        """Remove every registered service."""
        self._services.clear()
        self._singletons.clear()


@lru_cache
def get_service_registry() -> ServiceRegistry:
    """Get the singleton service registry instance.

    Returns:
        The global service registry instance
    """
    return ServiceRegistry()
