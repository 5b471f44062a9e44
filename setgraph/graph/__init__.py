# Graph module
"""
Graph layer for the undirected graph:
- Vertex: identity-keyed node with an ordered neighbor set
- Graph: membership record plus symmetric edge operations
- Traversal: depth-first and breadth-first enumeration of values
"""

from setgraph.graph.exceptions import GraphError, VertexNotFoundError
from setgraph.graph.graph import Graph
from setgraph.graph.traversal import (
    TraversalOrder,
    breadth_first_values,
    depth_first_values,
    traverse,
)
from setgraph.graph.vertex import Vertex

__all__ = [
    # Exceptions
    "GraphError",
    "VertexNotFoundError",
    # Model
    "Graph",
    "Vertex",
    # Traversal
    "TraversalOrder",
    "breadth_first_values",
    "depth_first_values",
    "traverse",
]
