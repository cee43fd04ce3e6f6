"""Typed domain errors for the road-trip planner.

The graph core signals every violated precondition with one of the
DigraphError subclasses, so callers can tell an unknown vertex from a
duplicate edge without parsing messages. Planner-level failures (bad
input files, disconnected maps, unreachable destinations) have their own
types.

All errors inherit from RoadTripError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadTripError(Exception):
    """Base error for the road-trip planner.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DigraphError(RoadTripError):
    """Base error for Digraph operations."""


@dataclass
class UnknownVertexError(DigraphError):
    """An operation referenced a vertex number not present in the graph.

    Attributes:
        vertex: The vertex number that was not found
    """

    vertex: Optional[int] = None


@dataclass
class DuplicateVertexError(DigraphError):
    """An insertion attempted to reuse an existing vertex number.

    Attributes:
        vertex: The vertex number that is already present
    """

    vertex: Optional[int] = None


@dataclass
class UnknownEdgeError(DigraphError):
    """An operation referenced an ordered vertex pair with no edge.

    Attributes:
        from_vertex: Source vertex number
        to_vertex: Target vertex number
    """

    from_vertex: Optional[int] = None
    to_vertex: Optional[int] = None


@dataclass
class DuplicateEdgeError(DigraphError):
    """An insertion attempted to recreate an existing ordered vertex pair.

    Attributes:
        from_vertex: Source vertex number
        to_vertex: Target vertex number
    """

    from_vertex: Optional[int] = None
    to_vertex: Optional[int] = None


@dataclass
class RoadMapError(RoadTripError):
    """Road map or trip description could not be read.

    Attributes:
        file_path: Path to the offending file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class DisconnectedMapError(RoadTripError):
    """The road map is not strongly connected."""


@dataclass
class NoRouteFoundError(RoadTripError):
    """No path exists between the requested locations.

    Attributes:
        start_vertex: Vertex number the trip starts at
        end_vertex: Vertex number the trip ends at
    """

    start_vertex: Optional[int] = None
    end_vertex: Optional[int] = None


@dataclass
class ConfigurationError(RoadTripError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
