"""Shared fixtures for the road-trip planner tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from roadtrip.config import reset_config
from roadtrip.container import reset_container
from roadtrip.domain.models import RoadSegment
from roadtrip.graph import Digraph
from roadtrip.ports.roadmap import RoadMap

DAG_EDGES = [
    (0, 1, 8),
    (0, 2, 6),
    (1, 3, 10),
    (2, 3, 15),
    (2, 4, 9),
    (3, 4, 14),
    (3, 5, 4),
    (4, 5, 13),
    (4, 6, 17),
    (5, 6, 7),
]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep RTP_* variables from the environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("RTP_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def weighted_dag() -> Digraph[str, int]:
    """Vertices 0..6 with integer edge weights as EdgeInfo."""
    graph: Digraph[str, int] = Digraph()
    for vertex in range(7):
        graph.add_vertex(vertex, chr(ord("a") + vertex))
    for from_vertex, to_vertex, weight in DAG_EDGES:
        graph.add_edge(from_vertex, to_vertex, weight)
    return graph


@pytest.fixture
def road_map() -> RoadMap:
    """A small strongly connected road map.

    The highway 0 -> 2 is longer than going through 1 but much faster.
    """
    graph: RoadMap = Digraph()
    graph.add_vertex(0, "Irvine")
    graph.add_vertex(1, "Tustin")
    graph.add_vertex(2, "Anaheim")
    graph.add_edge(0, 1, RoadSegment(miles=5.0, miles_per_hour=25.0))
    graph.add_edge(1, 2, RoadSegment(miles=8.0, miles_per_hour=30.0))
    graph.add_edge(0, 2, RoadSegment(miles=15.0, miles_per_hour=60.0))
    graph.add_edge(2, 0, RoadSegment(miles=15.0, miles_per_hour=60.0))
    graph.add_edge(1, 0, RoadSegment(miles=5.0, miles_per_hour=25.0))
    return graph


def write_csv(path: Path, header: str, rows: list[str]) -> Path:
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def map_dir(tmp_path: Path) -> Path:
    """Data directory with the same map as ``road_map`` plus two trips."""
    write_csv(
        tmp_path / "locations.csv",
        "vertex,name",
        ["0,Irvine", "1,Tustin", "2,Anaheim"],
    )
    write_csv(
        tmp_path / "roads.csv",
        "from_vertex,to_vertex,miles,miles_per_hour",
        [
            "0,1,5.0,25.0",
            "1,2,8.0,30.0",
            "0,2,15.0,60.0",
            "2,0,15.0,60.0",
            "1,0,5.0,25.0",
        ],
    )
    write_csv(
        tmp_path / "trips.csv",
        "start_vertex,end_vertex,metric",
        ["0,2,D", "0,2,T"],
    )
    return tmp_path
