"""
Vertex record for the undirected graph.

A Vertex is a passive holder of a value and its neighbor set. Equality and
hashing are by object identity, so two vertices carrying equal values are
still distinct nodes.

The neighbor set is a dict keyed by vertex with None values: membership is
by identity and iteration follows the order in which edges were added, so
traversal order is stable from run to run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Vertex:
    """A node in the graph.

    Attributes:
        value: Opaque payload reported by traversals
        adjacent: Insertion-ordered identity set of neighboring vertices.
            The constructor also accepts any iterable of vertices (set,
            list) and converts it to this dict form.
    """

    value: Any
    adjacent: dict[Vertex, None] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        # Accept any iterable of vertices (set, list, dict) as the initial
        # neighbor set.
        if not isinstance(self.adjacent, dict):
            self.adjacent = dict.fromkeys(self.adjacent)

    @property
    def degree(self) -> int:
        """Number of adjacency entries (a self-loop counts once)."""
        return len(self.adjacent)

    def __repr__(self) -> str:
        return f"Vertex(value={self.value!r}, degree={self.degree})"
