"""Dependency injection container.

Wires the road map repository, the predecessor cache and the trip
planner together from an AppConfig. Tests rebind a port to swap in a
fake repository or a different cache.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily builds one instance per bound type.

    Usage:
        container = Container.create_default()
        planner = container.resolve(TripPlannerService)

        container.register(CachePort, NullCache)  # before the first resolve

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance already built."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to ``port_type``, building it on first use.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            if port_type not in self._instances:
                try:
                    factory = self._factories[port_type]
                except KeyError:
                    raise KeyError(f"Type not registered: {port_type}") from None
                self._instances[port_type] = factory()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container bound to the CSV repository and in-memory cache."""
        from .adapters.cache import InMemoryCache
        from .adapters.roadmap import CSVRoadMapRepository
        from .ports.cache import CachePort
        from .ports.roadmap import RoadMapRepositoryPort
        from .services import TripPlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            CachePort,
            lambda: InMemoryCache(
                max_size=config.planner.cache_max_entries, name="shortest-paths"
            ),
        )
        container.register(
            RoadMapRepositoryPort,
            lambda: CSVRoadMapRepository(config.map, config.planner),
        )

        def create_trip_planner() -> TripPlannerService:
            repository = container.resolve(RoadMapRepositoryPort)
            return TripPlannerService(
                road_map=repository.load(),
                cache=container.resolve(CachePort),
                require_strongly_connected=config.planner.require_strongly_connected,
            )

        container.register(TripPlannerService, create_trip_planner)

        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container, creating it if needed."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Forget the default container; the next get_container() builds a new one."""
    global _default_container
    with _container_lock:
        _default_container = None
