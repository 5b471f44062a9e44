"""
Undirected graph over identity-keyed vertices.

The Graph owns a membership record (``nodes``) and the symmetric adjacency
links it creates between members. Edge and vertex operations involving a
vertex that is not a member are silent no-ops unless the graph is strict.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from setgraph.core.config import Settings, get_settings
from setgraph.graph.exceptions import VertexNotFoundError
from setgraph.graph.traversal import (
    TraversalOrder,
    breadth_first_values,
    depth_first_values,
    traverse,
)
from setgraph.graph.vertex import Vertex

logger = logging.getLogger(__name__)


class Graph:
    """Undirected graph with set-based adjacency.

    Usage:
        a, b, c = Vertex(1), Vertex(2), Vertex(3)
        graph = Graph()
        graph.add_vertices([a, b, c])
        graph.add_edge(a, b)
        graph.add_edge(b, c)

        graph.depth_first_search(a)    # [1, 2, 3]
        graph.breadth_first_search(a)  # [1, 2, 3]

    Invariant: for members u and v, u is adjacent to v exactly when v is
    adjacent to u.
    """

    def __init__(
        self,
        strict: bool = False,
        default_order: TraversalOrder | str = TraversalOrder.DEPTH_FIRST,
    ) -> None:
        """Initialize an empty graph.

        Args:
            strict: Raise VertexNotFoundError for non-member arguments instead
                of ignoring them
            default_order: Order used by traverse() when none is given
        """
        self.nodes: dict[Vertex, None] = {}
        self._strict = strict
        self._default_order = TraversalOrder(default_order)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Graph:
        """Create an empty graph configured from SETGRAPH_* settings."""
        settings = settings or get_settings()
        return cls(
            strict=settings.strict_membership,
            default_order=settings.default_traversal,
        )

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def default_order(self) -> TraversalOrder:
        return self._default_order

    # =========================================================================
    # Membership
    # =========================================================================

    def has_vertex(self, vertex: Any) -> bool:
        return vertex in self.nodes

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self.nodes))

    def _members(self, operation: str, *vertices: Any) -> bool:
        """Return True if every vertex is a member, else ignore or raise."""
        for vertex in vertices:
            if vertex not in self.nodes:
                if self._strict:
                    raise VertexNotFoundError(
                        f"{operation}: vertex {vertex!r} is not in the graph",
                        vertex=vertex,
                        operation=operation,
                    )
                logger.debug(
                    "%s ignored: %r is not in the graph",
                    operation,
                    vertex,
                    extra={"operation": operation, "vertex": repr(vertex)},
                )
                return False
        return True

    # =========================================================================
    # Vertex Operations
    # =========================================================================

    def add_vertex(self, vertex: Vertex) -> None:
        """Add ``vertex`` to the graph. Adding a member again is a no-op."""
        self.nodes[vertex] = None

    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        """Add every vertex of ``vertices`` in order."""
        for vertex in vertices:
            self.add_vertex(vertex)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove ``vertex`` and every edge incident to it.

        The neighbor set is copied before iterating because remove_edge
        shrinks it on each step.
        """
        if not self._members("remove_vertex", vertex):
            return
        for neighbor in list(vertex.adjacent):
            if neighbor in self.nodes:
                self.remove_edge(vertex, neighbor)
            else:
                # Link to a vertex that was never registered or already left.
                vertex.adjacent.pop(neighbor, None)
                neighbor.adjacent.pop(vertex, None)
        del self.nodes[vertex]
        logger.debug(
            "Removed vertex %r",
            vertex,
            extra={"operation": "remove_vertex", "vertex": repr(vertex)},
        )

    def clear(self) -> None:
        """Remove every vertex and the edges between them."""
        for vertex in list(self.nodes):
            self.remove_vertex(vertex)

    # =========================================================================
    # Edge Operations
    # =========================================================================

    def add_edge(self, v1: Vertex, v2: Vertex) -> None:
        """Connect two member vertices. ``add_edge(v, v)`` adds a self-loop."""
        if not self._members("add_edge", v1, v2):
            return
        v1.adjacent[v2] = None
        v2.adjacent[v1] = None

    def remove_edge(self, v1: Vertex, v2: Vertex) -> None:
        """Disconnect two member vertices. Missing edges are ignored."""
        if not self._members("remove_edge", v1, v2):
            return
        v1.adjacent.pop(v2, None)
        v2.adjacent.pop(v1, None)

    def has_edge(self, v1: Any, v2: Any) -> bool:
        return v1 in self.nodes and v2 in self.nodes and v2 in v1.adjacent

    def neighbors(self, vertex: Any) -> list[Vertex]:
        """Neighbors of a member vertex in edge order; [] for non-members."""
        if vertex not in self.nodes:
            return []
        return list(vertex.adjacent)

    def edge_count(self) -> int:
        """Number of undirected edges between members (self-loops count once).

        Each unordered pair is counted once, so a link recorded on only one
        side still counts as one edge.
        """
        seen: set[frozenset[int]] = set()
        for vertex in self.nodes:
            for neighbor in vertex.adjacent:
                if neighbor in self.nodes:
                    seen.add(frozenset((id(vertex), id(neighbor))))
        return len(seen)

    # =========================================================================
    # Traversal
    # =========================================================================

    def depth_first_search(
        self,
        start: Vertex | None,
        max_depth: int | None = None,
    ) -> list[Any]:
        """Values reachable from ``start`` in depth-first pre-order.

        A None start returns an empty list.
        """
        return depth_first_values(start, max_depth=max_depth)

    def breadth_first_search(
        self,
        start: Vertex | None,
        max_depth: int | None = None,
    ) -> list[Any]:
        """Values reachable from ``start`` in breadth-first order.

        A None start returns an empty list, the same as depth_first_search.
        """
        return breadth_first_values(start, max_depth=max_depth)

    def traverse(
        self,
        start: Vertex | None,
        order: TraversalOrder | str | None = None,
        max_depth: int | None = None,
    ) -> list[Any]:
        """Traverse from ``start`` in the given order.

        Args:
            start: Start vertex
            order: TraversalOrder or its value; None uses default_order
            max_depth: Maximum number of hops from start (None for unlimited)
        """
        if order is None:
            order = self._default_order
        return traverse(start, TraversalOrder(order), max_depth=max_depth)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.nodes)}, edges={self.edge_count()})"
