"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DigraphError,
    DisconnectedMapError,
    DuplicateEdgeError,
    DuplicateVertexError,
    NoRouteFoundError,
    RoadMapError,
    RoadTripError,
    UnknownEdgeError,
    UnknownVertexError,
)
from .models import RoadSegment, Route, RouteLeg, Trip, TripMetric

__all__ = [
    # Models
    "RoadSegment",
    "TripMetric",
    "Trip",
    "RouteLeg",
    "Route",
    # Errors
    "RoadTripError",
    "DigraphError",
    "UnknownVertexError",
    "DuplicateVertexError",
    "UnknownEdgeError",
    "DuplicateEdgeError",
    "RoadMapError",
    "DisconnectedMapError",
    "NoRouteFoundError",
    "ConfigurationError",
]
