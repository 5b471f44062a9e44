"""
Custom exceptions for the graph module.

The default graph policy is permissive: operations on vertices that are not
members of the graph are silent no-ops. These exceptions are only raised
when a Graph is created in strict membership mode.
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base exception for all graph-related errors."""

    pass


class VertexNotFoundError(GraphError):
    """Raised when a strict graph is asked to operate on a non-member vertex.

    Named VertexNotFoundError rather than reusing KeyError so callers can
    catch graph failures through GraphError.
    """

    def __init__(
        self,
        message: str,
        vertex: Any = None,
        operation: str | None = None,
    ) -> None:
        """Initialize with message, offending vertex, and operation name.

        Args:
            message: Human-readable error description
            vertex: The vertex that is not a member of the graph
            operation: Name of the graph operation that was refused
        """
        super().__init__(message)
        self.vertex = vertex
        self.operation = operation
