"""Command-line entry point for the road-trip planner.

Reads the road map and trips from the configured data directory, then
prints the best route for every trip, or ``Disconnected Map`` when some
location cannot reach another.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, configure_logging, get_config
from .container import Container
from .domain.errors import DisconnectedMapError, NoRouteFoundError, RoadTripError
from .ports.roadmap import RoadMapRepositoryPort
from .services import DISCONNECTED_MAP_MESSAGE, TripPlannerService, format_route
from .services.formatting import format_no_route

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadtrip",
        description="Plan shortest-distance and shortest-time road trips.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding locations.csv, roads.csv and trips.csv",
    )
    parser.add_argument("--log-level", help="Logging level (e.g. DEBUG, INFO)")
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with command-line overrides applied."""
    updates = {}
    if args.data_dir is not None:
        updates["map"] = config.map.model_copy(update={"data_dir": args.data_dir})
    if args.log_level is not None:
        updates["observability"] = config.observability.model_copy(
            update={"level": args.log_level}
        )
    return config.model_copy(update=updates) if updates else config


def run(container: Container) -> str:
    """Plan every trip and return the text to print.

    Raises:
        RoadTripError: If the map or trips cannot be loaded, or a trip
            names an unknown location.
    """
    repository = container.resolve(RoadMapRepositoryPort)
    trips = repository.load_trips()
    planner: TripPlannerService = container.resolve(TripPlannerService)

    try:
        planner.check_connectivity()
    except DisconnectedMapError:
        logger.warning("Road map is not strongly connected")
        return DISCONNECTED_MAP_MESSAGE + "\n"

    blocks: List[str] = []
    for trip in trips:
        try:
            blocks.append(format_route(planner.plan(trip)))
        except NoRouteFoundError:
            blocks.append(
                format_no_route(
                    planner.road_map.vertex_info(trip.start_vertex),
                    planner.road_map.vertex_info(trip.end_vertex),
                )
            )
    return "".join(block + "\n\n" for block in blocks)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(get_config(), args)
        configure_logging(config.observability)
        output = run(Container.create_default(config))
    except RoadTripError as e:
        logger.debug("Planning failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
