"""Top-level package for the road-trip planner.

The heart of the package is ``roadtrip.graph``: a generic directed graph
with a strong-connectivity check and Dijkstra shortest paths. Around it,
the planner reads road maps and trips, plans shortest-distance and
shortest-time routes, and prints them.
"""

from .graph import Digraph

__version__ = "0.1.0"

__all__ = ["Digraph", "__version__"]
