"""Immutable domain models for the road-trip planner.

All models are frozen dataclasses with slots. A road map is a Digraph
whose vertices carry location names and whose edges carry RoadSegments;
these models describe the edge payloads, the trips asked about and the
routes produced for them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class RoadSegment:
    """A one-way stretch of road between two locations.

    Attributes:
        miles: Length of the segment in miles
        miles_per_hour: Typical driving speed on the segment
    """

    miles: float
    miles_per_hour: float

    def __post_init__(self) -> None:
        """Validate segment length and speed."""
        if not self.miles >= 0:
            raise ValueError(f"Miles must be non-negative, got {self.miles}")
        if not self.miles_per_hour > 0:
            raise ValueError(
                f"Speed must be positive, got {self.miles_per_hour}"
            )

    @property
    def hours(self) -> float:
        """Return the driving time in hours."""
        return self.miles / self.miles_per_hour

    @property
    def seconds(self) -> float:
        """Return the driving time in seconds."""
        return self.hours * 3600


class TripMetric(Enum):
    """What a trip minimizes: driving distance or driving time."""

    DISTANCE = "distance"
    TIME = "time"

    def weight(self, segment: RoadSegment) -> float:
        """Edge weight of ``segment`` under this metric (miles or hours)."""
        if self is TripMetric.DISTANCE:
            return segment.miles
        return segment.hours

    @classmethod
    def parse(cls, value: str) -> TripMetric:
        """Parse ``D``/``T`` or ``distance``/``time`` (case-insensitive)."""
        normalized = value.strip().lower()
        if normalized in {"d", "distance"}:
            return cls.DISTANCE
        if normalized in {"t", "time"}:
            return cls.TIME
        raise ValueError(f"Unknown trip metric: {value!r}")


@dataclass(frozen=True, slots=True)
class Trip:
    """A request for the best route between two locations.

    Attributes:
        start_vertex: Vertex number of the starting location
        end_vertex: Vertex number of the destination
        metric: Whether to minimize distance or driving time
    """

    start_vertex: int
    end_vertex: int
    metric: TripMetric = TripMetric.DISTANCE


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """One step of a route, following a single road segment."""

    from_vertex: int
    to_vertex: int
    from_name: str
    to_name: str
    segment: RoadSegment


@dataclass(frozen=True, slots=True)
class Route:
    """Result of planning a trip.

    Attributes:
        trip: The trip this route answers
        start_name: Name of the starting location
        end_name: Name of the destination
        legs: Road segments followed, in driving order
    """

    trip: Trip
    start_name: str
    end_name: str
    legs: tuple[RouteLeg, ...] = field(default_factory=tuple)

    @property
    def vertices(self) -> tuple[int, ...]:
        """Return the vertex numbers visited, start and end included."""
        return (self.trip.start_vertex,) + tuple(leg.to_vertex for leg in self.legs)

    @property
    def total_miles(self) -> float:
        return sum(leg.segment.miles for leg in self.legs)

    @property
    def total_seconds(self) -> float:
        return sum(leg.segment.seconds for leg in self.legs)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no legs (start equals destination)."""
        return len(self.legs) == 0
