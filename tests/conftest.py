"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for testing the depthgraph project.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "core"          # Run only core tests
    pytest tests/ --quick            # Quick subset
"""

import pytest
import tempfile
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from depthgraph.core import EdgeColor, Graph, generate_graph


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def layered_graph() -> Graph:
    """
    Hand-built tree, grey edges only:

        depth 1:  0
        depth 2:  1   2
        depth 3:  3   4      (3 under 1, 4 under 2)
    """
    graph = Graph()
    for _ in range(5):
        graph.add_vertex()
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    return graph


@pytest.fixture
def small_graph() -> Graph:
    """Small generated graph"""
    return generate_graph(target_depth=3, new_vertices_per_step=2, seed=42)


@pytest.fixture
def medium_graph() -> Graph:
    """Medium generated graph"""
    return generate_graph(target_depth=6, new_vertices_per_step=3, seed=42)


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory for test outputs"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# =============================================================================
# Helper Functions
# =============================================================================

def assert_graph_invariants(graph: Graph):
    """Assert the depth and color invariants of a finished graph"""
    vertices = graph.vertices()
    edges = graph.edges()

    if not vertices:
        assert graph.depth() == 0
        assert edges == []
        return

    # Depths are contiguous from 1
    depths = {graph.vertex_depth(v.id) for v in vertices}
    assert min(depths) == 1
    assert depths == set(range(1, graph.depth() + 1))

    grey_parents = {}
    seen_pairs = set()
    for edge in edges:
        source, target = edge.from_vertex_id, edge.to_vertex_id
        difference = graph.vertex_depth(target) - graph.vertex_depth(source)
        pair = frozenset((source, target))

        if edge.color is EdgeColor.GREY:
            assert difference == 1
            assert target not in grey_parents
            # The grey edge was the first edge to touch its target
            assert graph.connected_edges(target)[0] == edge.id
            grey_parents[target] = source
        elif edge.color is EdgeColor.GREEN:
            assert source == target
        elif edge.color is EdgeColor.YELLOW:
            assert difference == 1
            assert pair not in seen_pairs
        elif edge.color is EdgeColor.RED:
            assert difference == 2

        if source == target:
            assert edge.color is EdgeColor.GREEN

        seen_pairs.add(pair)

    # Every vertex but the root hangs from exactly one grey edge
    non_root = [v.id for v in vertices if graph.vertex_depth(v.id) > 1]
    assert sorted(grey_parents) == sorted(non_root)
