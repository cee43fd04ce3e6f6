"""Generic directed graph and the algorithms that run over it.

This subpackage holds the Digraph container, the strong-connectivity
check and Dijkstra's shortest-path search with predecessor-chain
reconstruction. It has no knowledge of roads or trips.
"""

from .connectivity import count_reachable, is_strongly_connected
from .digraph import Digraph, DigraphEdge, DigraphVertex
from .shortest_paths import find_shortest_paths, predecessor_chain, reconstruct_path

__all__ = [
    "Digraph",
    "DigraphEdge",
    "DigraphVertex",
    "count_reachable",
    "is_strongly_connected",
    "find_shortest_paths",
    "predecessor_chain",
    "reconstruct_path",
]
