"""
Graph traversal algorithms over vertex adjacency.

Implements the two enumeration orders offered by the graph:
- DEPTH_FIRST: pre-order, fully exploring one branch before backtracking
- BREADTH_FIRST: level by level from the start vertex

Both functions read only ``Vertex.adjacent`` so they work on a bare vertex as
well as on one registered in a Graph. Neighbors are visited in adjacency
iteration order (the order edges were added), which makes the output
deterministic.

Design follows:
- BFS with a deque and mark-on-enqueue, so no vertex is queued twice
- DFS with an explicit stack of neighbor iterators instead of recursion,
  giving the same pre-order without growing the call stack
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from enum import Enum
from typing import Any

from setgraph.graph.vertex import Vertex

logger = logging.getLogger(__name__)


class TraversalOrder(Enum):
    """Order in which reachable vertices are enumerated."""

    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"


def _check_max_depth(max_depth: int | None) -> None:
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")


def depth_first_values(
    start: Vertex | None,
    max_depth: int | None = None,
) -> list[Any]:
    """Depth-first pre-order traversal from ``start``.

    Each stack frame holds an iterator over one vertex's neighbors. The top
    iterator is advanced until it yields an unvisited neighbor, which is
    recorded and pushed; an exhausted iterator is popped. This reproduces the
    recursive visit order exactly.

    Args:
        start: Vertex to start from; None yields an empty result
        max_depth: Maximum number of hops from start (None for unlimited)

    Returns:
        Values of the visited vertices in visitation order.
    """
    _check_max_depth(max_depth)
    if start is None:
        logger.debug("Depth-first search called without a start vertex")
        return []

    visited: set[Vertex] = {start}
    results: list[Any] = [start.value]
    stack: list[Iterator[Vertex]] = []
    if max_depth != 0:
        stack.append(iter(list(start.adjacent)))

    while stack:
        for neighbor in stack[-1]:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            results.append(neighbor.value)
            # The stack holds one iterator per edge on the current path.
            if max_depth is None or len(stack) < max_depth:
                stack.append(iter(list(neighbor.adjacent)))
            break
        else:
            stack.pop()

    logger.debug(
        "Depth-first search visited %d vertices",
        len(results),
        extra={"order": TraversalOrder.DEPTH_FIRST.value, "visited": len(results)},
    )
    return results


def breadth_first_values(
    start: Vertex | None,
    max_depth: int | None = None,
) -> list[Any]:
    """Breadth-first traversal from ``start`` using a FIFO queue.

    Vertices are marked visited when enqueued, not when dequeued.

    Args:
        start: Vertex to start from; None yields an empty result
        max_depth: Maximum number of hops from start (None for unlimited)

    Returns:
        Values of the visited vertices in visitation order.
    """
    _check_max_depth(max_depth)
    if start is None:
        logger.debug("Breadth-first search called without a start vertex")
        return []

    results: list[Any] = []
    visited: set[Vertex] = {start}
    queue: deque[tuple[Vertex, int]] = deque()
    queue.append((start, 0))

    while queue:
        current, depth = queue.popleft()
        results.append(current.value)

        if max_depth is not None and depth >= max_depth:
            continue

        for neighbor in current.adjacent:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, depth + 1))

    logger.debug(
        "Breadth-first search visited %d vertices",
        len(results),
        extra={"order": TraversalOrder.BREADTH_FIRST.value, "visited": len(results)},
    )
    return results


def traverse(
    start: Vertex | None,
    order: TraversalOrder = TraversalOrder.DEPTH_FIRST,
    max_depth: int | None = None,
) -> list[Any]:
    """Run the traversal selected by ``order``."""
    if order is TraversalOrder.BREADTH_FIRST:
        return breadth_first_values(start, max_depth=max_depth)
    return depth_first_values(start, max_depth=max_depth)
