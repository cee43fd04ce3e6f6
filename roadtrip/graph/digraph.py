"""Generic directed graph stored as adjacency lists.

Each vertex is identified by an integer vertex number (not necessarily
sequential, zero-based or non-negative) and carries a ``vinfo`` payload
together with its outgoing edges. Each edge carries an ``einfo`` payload
and is unique per ordered (from, to) pair.

The Digraph itself is not synchronized; give independent contexts their
own instance with ``copy()``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..domain.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    UnknownEdgeError,
    UnknownVertexError,
)
from .connectivity import is_strongly_connected
from .shortest_paths import find_shortest_paths

V = TypeVar("V")
E = TypeVar("E")


@dataclass
class DigraphEdge(Generic[E]):
    """An outgoing edge: endpoints plus its EdgeInfo payload."""

    from_vertex: int
    to_vertex: int
    einfo: E


@dataclass
class DigraphVertex(Generic[V, E]):
    """A vertex payload and its outgoing edges keyed by target vertex.

    The edge mapping keeps insertion order, which is the order edges are
    reported in.
    """

    vinfo: V
    edges: Dict[int, DigraphEdge[E]] = field(default_factory=dict)


class Digraph(Generic[V, E]):
    """Directed graph with per-vertex and per-edge payloads.

    Usage:
        graph: Digraph[str, float] = Digraph()
        graph.add_vertex(0, "Irvine")
        graph.add_vertex(1, "Anaheim")
        graph.add_edge(0, 1, 14.2)
        predecessors = graph.find_shortest_paths(0, lambda miles: miles)
    """

    def __init__(self) -> None:
        self._vertices: Dict[int, DigraphVertex[V, E]] = {}
        self._edge_count = 0

    # -- copying and ownership transfer -------------------------------------

    def copy(self) -> Digraph[V, E]:
        """Return a deep copy; later changes to either graph stay local."""
        return copy.deepcopy(self)

    def __deepcopy__(self, memo: dict) -> Digraph[V, E]:
        duplicate: Digraph[V, E] = type(self)()
        memo[id(self)] = duplicate
        duplicate._vertices = copy.deepcopy(self._vertices, memo)
        duplicate._edge_count = self._edge_count
        return duplicate

    def copy_from(self, other: Digraph[V, E]) -> None:
        """Replace this graph's contents with a deep copy of ``other``."""
        if other is self:
            return
        self._vertices = copy.deepcopy(other._vertices)
        self._edge_count = other._edge_count

    def transfer(self) -> Digraph[V, E]:
        """Move this graph's storage into a new graph, leaving this one empty."""
        moved: Digraph[V, E] = type(self)()
        moved.take_from(self)
        return moved

    def take_from(self, other: Digraph[V, E]) -> None:
        """Take over ``other``'s storage; ``other`` becomes an empty graph."""
        if other is self:
            return
        self._vertices = other._vertices
        self._edge_count = other._edge_count
        other._vertices = {}
        other._edge_count = 0

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._vertices = {}
        self._edge_count = 0

    # -- queries ------------------------------------------------------------

    def vertices(self) -> List[int]:
        """Return the vertex numbers of every vertex, in ascending order."""
        return sorted(self._vertices)

    def edges(self, vertex: Optional[int] = None) -> List[Tuple[int, int]]:
        """Return (from, to) pairs of edges.

        Without an argument every edge is returned, grouped by ascending
        source vertex and in insertion order within a source. With a vertex
        number, only that vertex's outgoing edges are returned.

        Raises:
            UnknownVertexError: If ``vertex`` is given and absent.
        """
        if vertex is not None:
            return self.edges_from(vertex)
        return [
            (edge.from_vertex, edge.to_vertex)
            for number in sorted(self._vertices)
            for edge in self._vertices[number].edges.values()
        ]

    def edges_from(self, vertex: int) -> List[Tuple[int, int]]:
        """Return the (from, to) pairs of the edges leaving ``vertex``."""
        record = self._vertex(vertex, "edges")
        return [(edge.from_vertex, edge.to_vertex) for edge in record.edges.values()]

    def vertex_info(self, vertex: int) -> V:
        """Return the VertexInfo belonging to ``vertex``."""
        return self._vertex(vertex, "vertex_info").vinfo

    def edge_info(self, from_vertex: int, to_vertex: int) -> E:
        """Return the EdgeInfo belonging to the edge ``from_vertex -> to_vertex``.

        Raises:
            UnknownVertexError: If either vertex does not exist.
            UnknownEdgeError: If both exist but the edge does not.
        """
        return self._edge(from_vertex, to_vertex, "edge_info").einfo

    def has_edge(self, from_vertex: int, to_vertex: int) -> bool:
        """Check whether the edge exists, without raising."""
        record = self._vertices.get(from_vertex)
        return record is not None and to_vertex in record.edges

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self, vertex: Optional[int] = None) -> int:
        """Return the total edge count, or the out-degree of ``vertex``."""
        if vertex is None:
            return self._edge_count
        return len(self._vertex(vertex, "edge_count").edges)

    def outgoing(self, vertex: int) -> Iterator[DigraphEdge[E]]:
        """Iterate over the edge records leaving ``vertex``."""
        return iter(list(self._vertex(vertex, "outgoing").edges.values()))

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self._vertices)}, "
            f"edges={self._edge_count})"
        )

    # -- mutators -----------------------------------------------------------

    def add_vertex(self, vertex: int, vinfo: V) -> None:
        """Add a vertex with no outgoing edges.

        Raises:
            DuplicateVertexError: If the vertex number is already in use.
        """
        if vertex in self._vertices:
            raise DuplicateVertexError(
                f"Digraph add_vertex(): vertex {vertex} already exists",
                vertex=vertex,
            )
        self._vertices[vertex] = DigraphVertex(vinfo=vinfo)

    def add_edge(self, from_vertex: int, to_vertex: int, einfo: E) -> None:
        """Add the edge ``from_vertex -> to_vertex``.

        Raises:
            UnknownVertexError: If either vertex does not exist.
            DuplicateEdgeError: If the edge is already present.
        """
        source = self._vertex(from_vertex, "add_edge")
        self._vertex(to_vertex, "add_edge")
        if to_vertex in source.edges:
            raise DuplicateEdgeError(
                f"Digraph add_edge(): edge {from_vertex} -> {to_vertex} already exists",
                from_vertex=from_vertex,
                to_vertex=to_vertex,
            )
        source.edges[to_vertex] = DigraphEdge(from_vertex, to_vertex, einfo)
        self._edge_count += 1

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex together with its incoming and outgoing edges."""
        record = self._vertex(vertex, "remove_vertex")
        removed = len(record.edges)
        del self._vertices[vertex]
        for other in self._vertices.values():
            if other.edges.pop(vertex, None) is not None:
                removed += 1
        self._edge_count -= removed

    def remove_edge(self, from_vertex: int, to_vertex: int) -> None:
        """Remove the edge ``from_vertex -> to_vertex``.

        Raises:
            UnknownVertexError: If either vertex does not exist.
            UnknownEdgeError: If both exist but the edge does not.
        """
        self._edge(from_vertex, to_vertex, "remove_edge")
        del self._vertices[from_vertex].edges[to_vertex]
        self._edge_count -= 1

    # -- algorithms ---------------------------------------------------------

    def is_strongly_connected(self) -> bool:
        """Return True if every vertex is reachable from every other."""
        return is_strongly_connected(self)

    def find_shortest_paths(
        self, start_vertex: int, edge_weight_func: Callable[[E], float]
    ) -> Dict[int, int]:
        """Run Dijkstra from ``start_vertex``; see ``shortest_paths``."""
        return find_shortest_paths(self, start_vertex, edge_weight_func)

    # -- internals ----------------------------------------------------------

    def _vertex(self, vertex: int, operation: str) -> DigraphVertex[V, E]:
        record = self._vertices.get(vertex)
        if record is None:
            raise UnknownVertexError(
                f"Digraph {operation}(): vertex {vertex} does not exist",
                vertex=vertex,
            )
        return record

    def _edge(self, from_vertex: int, to_vertex: int, operation: str) -> DigraphEdge[E]:
        source = self._vertex(from_vertex, operation)
        self._vertex(to_vertex, operation)
        edge = source.edges.get(to_vertex)
        if edge is None:
            raise UnknownEdgeError(
                f"Digraph {operation}(): edge {from_vertex} -> {to_vertex} does not exist",
                from_vertex=from_vertex,
                to_vertex=to_vertex,
            )
        return edge
