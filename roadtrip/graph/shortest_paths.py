"""Single-source shortest paths using Dijkstra's algorithm.

``find_shortest_paths`` returns a predecessor map rather than distances:
for every vertex of the graph it gives the vertex that precedes it on a
shortest path from the start vertex. The start vertex, and every vertex
the search never reaches, is its own predecessor. Callers therefore have
to check where a predecessor chain ends before trusting it as a route;
``reconstruct_path`` does exactly that.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Set, Tuple, TypeVar

from ..domain.errors import UnknownVertexError

if TYPE_CHECKING:
    from .digraph import Digraph

E = TypeVar("E")


def find_shortest_paths(
    graph: Digraph[Any, E],
    start_vertex: int,
    edge_weight_func: Callable[[E], float],
) -> Dict[int, int]:
    """Compute shortest-path predecessors from ``start_vertex``.

    Parameters
    ----------
    graph:
        The graph to search. It is only read.
    start_vertex:
        Vertex number the paths start from.
    edge_weight_func:
        Maps an edge's EdgeInfo to its cost. Costs must be non-negative and
        finite; negative weights are not supported and are not checked.

    Returns
    -------
    dict[int, int]
        Predecessor of every vertex in the graph. Vertices without a
        predecessor (the start vertex and unreachable vertices) map to
        themselves.

    Raises
    ------
    UnknownVertexError
        If ``start_vertex`` is not in the graph.
    """
    if start_vertex not in graph:
        raise UnknownVertexError(
            f"find_shortest_paths(): start vertex {start_vertex} does not exist",
            vertex=start_vertex,
        )

    predecessors: Dict[int, int] = {}
    distances: Dict[int, float] = {}
    for vertex in graph.vertices():
        predecessors[vertex] = vertex
        distances[vertex] = float("inf")
    distances[start_vertex] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, start_vertex)]
    settled: Set[int] = set()

    while heap:
        current_distance, vertex = heapq.heappop(heap)

        # Stale entry for a vertex whose distance is already final.
        if vertex in settled:
            continue
        settled.add(vertex)

        for edge in graph.outgoing(vertex):
            neighbour = edge.to_vertex
            if neighbour in settled:
                continue
            candidate = current_distance + edge_weight_func(edge.einfo)
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = vertex
                heapq.heappush(heap, (candidate, neighbour))

    return predecessors


def predecessor_chain(predecessors: Mapping[int, int], target: int) -> List[int]:
    """Walk the predecessor map from ``target`` back to its terminal vertex.

    The walk stops at the first vertex that is its own predecessor, which
    is either the start vertex of the search or ``target`` itself when it
    was never reached.

    Returns:
        Vertices from ``target`` to the terminal vertex, both included.

    Raises:
        UnknownVertexError: If ``target`` is not in the map.
        ValueError: If the map loops without reaching a self-predecessor.
    """
    if target not in predecessors:
        raise UnknownVertexError(
            f"predecessor_chain(): vertex {target} is not in the predecessor map",
            vertex=target,
        )

    chain: List[int] = [target]
    current = target
    previous = predecessors[current]
    while previous != current:
        if len(chain) > len(predecessors):
            raise ValueError(f"Predecessor map loops when walking back from {target}")
        chain.append(previous)
        current = previous
        previous = predecessors[current]
    return chain


def reconstruct_path(
    predecessors: Mapping[int, int], start_vertex: int, end_vertex: int
) -> List[int]:
    """Return the vertices of the shortest path from start to end.

    Returns an empty list when ``end_vertex`` was not reached from
    ``start_vertex``, i.e. when its predecessor chain ends elsewhere.
    """
    chain = predecessor_chain(predecessors, end_vertex)
    if chain[-1] != start_vertex:
        return []
    chain.reverse()
    return chain
