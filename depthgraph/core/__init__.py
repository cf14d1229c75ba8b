"""
depthgraph Core Module

Depth-layered graph modeling, generation and export.

Graph Model:
    Vertices: created at depth 1, moved deeper once by their first grey edge
    Edges: GREY (tree), GREEN (self-loop), YELLOW (next layer), RED (skips a layer)

Usage:
    # Generate a graph
    from depthgraph.core import generate_graph
    graph = generate_graph(target_depth=5, new_vertices_per_step=3, seed=42)

    # Serialize it
    from depthgraph.core import GraphExporter
    text = GraphExporter().to_json(graph)

    # Build one by hand
    from depthgraph.core import Graph
    graph = Graph()
    root = graph.add_vertex()
    child = graph.add_vertex()
    graph.add_edge(root, child)   # grey, child now at depth 2
"""

# Graph Model - Data structures
from .graph_model import (
    # Enums
    EdgeColor,
    # Elements
    Vertex,
    Edge,
    # Model
    Graph,
    # Errors
    GraphError,
    InvalidVertexError,
    InvalidEdgeError,
    EdgeColorError,
)

# Graph Generator - Create layered graphs
from .graph_generator import (
    GraphConfig,
    GraphGenerator,
    generate_graph,
)

# Graph Exporter - Serialization
from .graph_exporter import (
    GraphExporter,
)

__all__ = [
    # Enums
    "EdgeColor",
    # Elements
    "Vertex",
    "Edge",
    # Model
    "Graph",
    # Errors
    "GraphError",
    "InvalidVertexError",
    "InvalidEdgeError",
    "EdgeColorError",
    # Generator
    "GraphConfig",
    "GraphGenerator",
    "generate_graph",
    # Exporter
    "GraphExporter",
]
