"""Road map ports - Abstractions for loading maps and trips.

A road map is a Digraph whose vertices carry location names and whose
edges carry RoadSegments. Repositories build one by repeated vertex and
edge insertion and hand it to the trip planner.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.models import RoadSegment, Trip
from ..graph.digraph import Digraph

RoadMap = Digraph[str, RoadSegment]


class RoadMapRepositoryPort(Protocol):
    """Port for road map and trip loading.

    Implementation: adapters/roadmap/csv_repository.py
    """

    def load(self) -> RoadMap:
        """Load the road map.

        Returns:
            The road map, keyed by location vertex number.
        """
        ...

    def load_trips(self) -> Sequence[Trip]:
        """Load the trips to plan, in the order they should be answered."""
        ...
