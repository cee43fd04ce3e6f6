"""Strong-connectivity check for a Digraph.

A graph is strongly connected when a depth-first traversal started at any
vertex reaches every vertex. Empty and single-vertex graphs are
trivially strongly connected. The check costs O(V * (V + E)), which is
fine for a one-off diagnostic on a road map.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Set

from ..domain.errors import UnknownVertexError

if TYPE_CHECKING:
    from .digraph import Digraph


def count_reachable(graph: Digraph[Any, Any], start_vertex: int) -> int:
    """Count the vertices reachable from ``start_vertex``, itself included.

    Uses an explicit stack so large maps do not hit the recursion limit.

    Raises:
        UnknownVertexError: If ``start_vertex`` is not in the graph.
    """
    if start_vertex not in graph:
        raise UnknownVertexError(
            f"count_reachable(): vertex {start_vertex} does not exist",
            vertex=start_vertex,
        )

    visited: Set[int] = set()
    stack: List[int] = [start_vertex]

    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        for _, to_vertex in reversed(graph.edges_from(vertex)):
            if to_vertex not in visited:
                stack.append(to_vertex)

    return len(visited)


def is_strongly_connected(graph: Digraph[Any, Any]) -> bool:
    """Return True if every vertex of ``graph`` reaches every other vertex."""
    total = graph.vertex_count()
    for vertex in graph.vertices():
        if count_reachable(graph, vertex) != total:
            return False
    return True
