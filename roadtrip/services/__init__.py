"""Services layer - Application orchestration.

Available services:
- TripPlannerService: Plans trips over a road map with cached searches
- formatting: Renders planned routes for the console
"""

from .formatting import DISCONNECTED_MAP_MESSAGE, format_duration, format_route
from .trip_planner import TripPlannerService

__all__ = [
    "TripPlannerService",
    "DISCONNECTED_MAP_MESSAGE",
    "format_duration",
    "format_route",
]
