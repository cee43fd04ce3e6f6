"""Console formatting of planned routes.

Distances are shown in miles and durations broken down into hours,
minutes and seconds, all to one decimal place:

    Shortest driving time from Irvine to Anaheim
      Begin at Irvine
      Continue to Anaheim (14.2 miles @ 65.0mph = 13 mins 6.5 secs)
    Total time: 13 mins 6.5 secs
"""

from __future__ import annotations

from typing import List

from ..domain.models import Route, TripMetric

DISCONNECTED_MAP_MESSAGE = "Disconnected Map"


def format_duration(seconds: float) -> str:
    """Format a duration as e.g. ``1 hr 2 mins 3.4 secs``.

    Hours and minutes are only shown when non-zero.
    """
    text = ""
    remaining = seconds
    if remaining >= 3600:
        hours = int(remaining) // 3600
        text += "1 hr " if hours == 1 else f"{hours} hrs "
        remaining -= hours * 3600
    if remaining >= 60:
        minutes = int(remaining) // 60
        text += "1 min " if minutes == 1 else f"{minutes} mins "
        remaining -= minutes * 60
    return f"{text}{remaining:.1f} secs"


def format_miles(miles: float) -> str:
    return f"{miles:.1f} miles"


def format_route(route: Route) -> str:
    """Render a route the way the planner prints it, without a trailing newline."""
    if route.trip.metric is TripMetric.DISTANCE:
        lines: List[str] = [
            f"Shortest distance from {route.start_name} to {route.end_name}",
            f"  Begin at {route.start_name}",
        ]
        for leg in route.legs:
            lines.append(f"  Continue to {leg.to_name} ({format_miles(leg.segment.miles)})")
        lines.append(f"Total distance: {format_miles(route.total_miles)}")
    else:
        lines = [
            f"Shortest driving time from {route.start_name} to {route.end_name}",
            f"  Begin at {route.start_name}",
        ]
        for leg in route.legs:
            segment = leg.segment
            lines.append(
                f"  Continue to {leg.to_name} ({format_miles(segment.miles)} "
                f"@ {segment.miles_per_hour:.1f}mph = {format_duration(segment.seconds)})"
            )
        lines.append(f"Total time: {format_duration(route.total_seconds)}")
    return "\n".join(lines)


def format_no_route(start_name: str, end_name: str) -> str:
    return f"No route from {start_name} to {end_name}"
