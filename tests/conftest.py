"""
Pytest configuration and fixtures for setgraph tests.
"""

from collections.abc import Iterator

import pytest

from setgraph.core.config import Settings, get_settings
from setgraph.graph import Graph, Vertex


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from SETGRAPH_* variables and the cached settings."""
    for name in (
        "SETGRAPH_LOG_LEVEL",
        "SETGRAPH_LOG_FILE_PATH",
        "SETGRAPH_STRICT_MEMBERSHIP",
        "SETGRAPH_DEFAULT_TRAVERSAL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Provide test settings with default behavior flags."""
    return Settings(
        log_level="DEBUG",
        strict_membership=False,
        default_traversal="depth_first",
    )


@pytest.fixture
def graph() -> Graph:
    """Empty permissive graph."""
    return Graph(strict=False)


@pytest.fixture
def chain(graph: Graph) -> tuple[Graph, Vertex, Vertex, Vertex]:
    """A(1) - B(2) - C(3)."""
    a, b, c = Vertex(1), Vertex(2), Vertex(3)
    graph.add_vertices([a, b, c])
    graph.add_edge(a, b)
    graph.add_edge(b, c)
    return graph, a, b, c


@pytest.fixture
def star(graph: Graph) -> tuple[Graph, Vertex, list[Vertex]]:
    """Center A(1) connected to B(2), C(3), D(4), plus isolated E(5)."""
    center = Vertex(1)
    leaves = [Vertex(2), Vertex(3), Vertex(4)]
    graph.add_vertex(center)
    graph.add_vertices(leaves)
    for leaf in leaves:
        graph.add_edge(center, leaf)
    graph.add_vertex(Vertex(5))
    return graph, center, leaves
