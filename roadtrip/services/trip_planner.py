"""Trip planner service - answers trips over a road map.

The planner runs Dijkstra once per (metric, start vertex), keeps the
resulting predecessor map in a cache, and turns predecessor chains into
routes made of road segments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..adapters.cache import InMemoryCache
from ..domain.errors import DisconnectedMapError, NoRouteFoundError
from ..domain.models import Route, RouteLeg, Trip, TripMetric
from ..graph.shortest_paths import reconstruct_path
from ..ports.cache import CachePort
from ..ports.roadmap import RoadMap


@dataclass
class TripPlannerService:
    """Plans shortest-distance and shortest-time trips on a road map.

    Attributes:
        road_map: The road map to plan on
        cache: Where predecessor maps are kept between trips
        require_strongly_connected: Refuse to plan on a map where some
            location cannot reach another
    """

    road_map: RoadMap
    cache: CachePort[Dict[int, int]] = field(
        default_factory=lambda: InMemoryCache(name="shortest-paths")
    )
    require_strongly_connected: bool = True

    _connected: Optional[bool] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def is_connected(self) -> bool:
        """Return whether the road map is strongly connected (memoized)."""
        if self._connected is None:
            self._connected = self.road_map.is_strongly_connected()
            self._logger.info(
                "Connectivity checked",
                extra={
                    "locations": self.road_map.vertex_count(),
                    "roads": self.road_map.edge_count(),
                    "strongly_connected": self._connected,
                },
            )
        return self._connected

    def check_connectivity(self) -> None:
        """Raise if a strongly connected map is required and this one isn't.

        Raises:
            DisconnectedMapError: If some location cannot reach another.
        """
        if self.require_strongly_connected and not self.is_connected():
            raise DisconnectedMapError("Road map is not strongly connected")

    def shortest_paths(self, start_vertex: int, metric: TripMetric) -> Dict[int, int]:
        """Return a copy of the predecessor map for ``start_vertex`` under ``metric``.

        Raises:
            UnknownVertexError: If ``start_vertex`` is not on the map.
        """
        return dict(self._predecessors(start_vertex, metric))

    def _predecessors(self, start_vertex: int, metric: TripMetric) -> Dict[int, int]:
        def compute() -> Dict[int, int]:
            self._logger.debug(
                "Running shortest-path search",
                extra={"start_vertex": start_vertex, "metric": metric.value},
            )
            return self.road_map.find_shortest_paths(start_vertex, metric.weight)

        return self.cache.get_or_compute((metric.value, start_vertex), compute)

    def plan(self, trip: Trip) -> Route:
        """Find the best route for ``trip``.

        Raises:
            UnknownVertexError: If either end of the trip is not on the map.
            NoRouteFoundError: If the destination cannot be reached.
        """
        start_name = self.road_map.vertex_info(trip.start_vertex)
        end_name = self.road_map.vertex_info(trip.end_vertex)

        predecessors = self._predecessors(trip.start_vertex, trip.metric)
        path = reconstruct_path(predecessors, trip.start_vertex, trip.end_vertex)
        if not path:
            self._logger.warning(
                "No route found",
                extra={"start_vertex": trip.start_vertex, "end_vertex": trip.end_vertex},
            )
            raise NoRouteFoundError(
                f"No route from {start_name} to {end_name}",
                start_vertex=trip.start_vertex,
                end_vertex=trip.end_vertex,
            )

        legs = tuple(
            RouteLeg(
                from_vertex=from_vertex,
                to_vertex=to_vertex,
                from_name=self.road_map.vertex_info(from_vertex),
                to_name=self.road_map.vertex_info(to_vertex),
                segment=self.road_map.edge_info(from_vertex, to_vertex),
            )
            for from_vertex, to_vertex in zip(path, path[1:])
        )
        route = Route(trip=trip, start_name=start_name, end_name=end_name, legs=legs)

        self._logger.info(
            "Route planned",
            extra={
                "start_vertex": trip.start_vertex,
                "end_vertex": trip.end_vertex,
                "metric": trip.metric.value,
                "legs": len(legs),
            },
        )
        return route

    def plan_all(self, trips: Iterable[Trip]) -> List[Route]:
        """Check connectivity, then plan every trip in order.

        Raises:
            DisconnectedMapError: If the map is required to be strongly
                connected and is not.
            NoRouteFoundError: If a destination cannot be reached.
        """
        self.check_connectivity()
        return [self.plan(trip) for trip in trips]

    def invalidate(self) -> None:
        """Forget cached searches; call after mutating the road map."""
        cleared = self.cache.clear()
        self._connected = None
        self._logger.debug("Planner cache cleared", extra={"entries_cleared": cleared})
