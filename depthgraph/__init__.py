"""
depthgraph

Depth-layered synthetic graph generation with colored edges.
"""

from .core import (
    EdgeColor,
    Edge,
    Graph,
    GraphConfig,
    GraphExporter,
    GraphGenerator,
    generate_graph,
)

__all__ = [
    "EdgeColor",
    "Edge",
    "Graph",
    "GraphConfig",
    "GraphExporter",
    "GraphGenerator",
    "generate_graph",
]

__version__ = "1.0.0"
