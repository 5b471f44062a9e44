"""
setgraph - in-memory undirected graph with depth-first and breadth-first
traversal.

Example:
    >>> from setgraph import Graph, Vertex
    >>> a, b, c = Vertex(1), Vertex(2), Vertex(3)
    >>> graph = Graph()
    >>> graph.add_vertices([a, b, c])
    >>> graph.add_edge(a, b)
    >>> graph.add_edge(b, c)
    >>> graph.breadth_first_search(a)
    [1, 2, 3]
"""

__version__ = "0.1.0"

from setgraph.graph import (
    Graph,
    GraphError,
    TraversalOrder,
    Vertex,
    VertexNotFoundError,
    breadth_first_values,
    depth_first_values,
)

__all__ = [
    "Graph",
    "Vertex",
    "TraversalOrder",
    "GraphError",
    "VertexNotFoundError",
    "breadth_first_values",
    "depth_first_values",
]
