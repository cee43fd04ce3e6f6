"""CSV road map repository adapter.

Builds a RoadMap by repeated vertex and edge insertion from three CSV
files found in the configured data directory:

- locations.csv: ``vertex,name``
- roads.csv: ``from_vertex,to_vertex,miles,miles_per_hour``
- trips.csv: ``start_vertex,end_vertex[,metric]`` (metric is ``D`` or ``T``;
  when blank or absent the planner's default metric applies)
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from ...config import MapConfig, PlannerConfig, get_config
from ...domain.errors import DigraphError, RoadMapError
from ...domain.models import RoadSegment, Trip, TripMetric
from ...ports.roadmap import RoadMap


@dataclass
class CSVRoadMapRepository:
    """Road map repository that loads from CSV files.

    This adapter implements RoadMapRepositoryPort. The road map is loaded
    once and cached; call clear_cache() to re-read the files.

    Attributes:
        config: Map configuration (data directory, file names)
        planner_config: Supplies the metric for trips that name none
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)
    planner_config: PlannerConfig = field(default_factory=lambda: get_config().planner)
    _logger: logging.Logger = field(init=False, repr=False)

    _road_map: Optional[RoadMap] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> RoadMap:
        """Load the road map from the locations and roads files.

        Returns:
            The road map. The same instance is returned on later calls.

        Raises:
            RoadMapError: If a file is missing or malformed, or if it
                repeats a location or road, or names an unknown location.
        """
        if self._road_map is not None:
            return self._road_map

        self._logger.debug(
            "Loading road map",
            extra={
                "locations_path": str(self.config.locations_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        road_map: RoadMap = RoadMap()
        self._load_locations(road_map, self.config.locations_path)
        self._load_roads(road_map, self.config.roads_path)

        self._road_map = road_map
        self._logger.info(
            "Road map loaded",
            extra={
                "locations": road_map.vertex_count(),
                "roads": road_map.edge_count(),
            },
        )
        return road_map

    def load_trips(self) -> List[Trip]:
        """Load the trips to plan from the trips file.

        Raises:
            RoadMapError: If the file is missing or malformed.
        """
        path = self.config.trips_path
        default_metric = TripMetric.parse(self.planner_config.default_metric)
        trips: List[Trip] = []
        try:
            rows = self._rows(path, ("start_vertex", "end_vertex"), optional=("metric",))
            for row in rows:
                metric = row.get("metric")
                trips.append(
                    Trip(
                        start_vertex=int(row["start_vertex"]),
                        end_vertex=int(row["end_vertex"]),
                        metric=TripMetric.parse(metric) if metric else default_metric,
                    )
                )
        except (OSError, KeyError, ValueError) as e:
            raise RoadMapError(
                f"Failed to load trips: {path}", file_path=str(path), cause=e
            )

        self._logger.info("Trips loaded", extra={"trips": len(trips)})
        return trips

    def clear_cache(self) -> None:
        """Forget the cached road map."""
        self._road_map = None
        self._logger.debug("Road map cache cleared")

    def _load_locations(self, road_map: RoadMap, path: Path) -> None:
        try:
            for row in self._rows(path, ("vertex", "name")):
                road_map.add_vertex(int(row["vertex"]), row["name"])
        except (OSError, KeyError, ValueError, DigraphError) as e:
            raise RoadMapError(
                f"Failed to load locations: {path}", file_path=str(path), cause=e
            )

    def _load_roads(self, road_map: RoadMap, path: Path) -> None:
        columns = ("from_vertex", "to_vertex", "miles", "miles_per_hour")
        try:
            for row in self._rows(path, columns):
                segment = RoadSegment(
                    miles=float(row["miles"]),
                    miles_per_hour=float(row["miles_per_hour"]),
                )
                road_map.add_edge(int(row["from_vertex"]), int(row["to_vertex"]), segment)
        except (OSError, KeyError, ValueError, DigraphError) as e:
            raise RoadMapError(
                f"Failed to load roads: {path}", file_path=str(path), cause=e
            )

    @staticmethod
    def _rows(
        path: Path, columns: tuple[str, ...], optional: tuple[str, ...] = ()
    ) -> Iterator[Dict[str, str]]:
        """Yield stripped rows, skipping blank lines.

        ``optional`` columns may be absent from the header or left empty;
        they are yielded as empty strings then.

        Raises:
            KeyError: If the header lacks one of ``columns``.
            ValueError: If a row leaves one of ``columns`` empty.
        """
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = [c for c in columns if c not in (reader.fieldnames or [])]
            if missing:
                raise KeyError(f"missing columns {', '.join(missing)}")

            for row in reader:
                values = {c: (row.get(c) or "").strip() for c in columns + optional}
                if not any(values.values()):
                    continue
                empty = [c for c in columns if not values[c]]
                if empty:
                    raise ValueError(
                        f"line {reader.line_num}: empty {', '.join(empty)}"
                    )
                yield values
