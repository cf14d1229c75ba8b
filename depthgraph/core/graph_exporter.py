"""
Graph Exporter

Exports Graph instances to:
- JSON ({depth, vertices: [{id, edge_ids, depth}], edges: [{id, vertex_ids, color}]})
- GraphML (for Gephi, yEd, NetworkX)
- NetworkX (direct MultiDiGraph object)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .graph_model import Graph, Vertex


class GraphExporter:
    """
    Exports Graph instances to various formats
    """

    def __init__(self):
        """Initialize the graph exporter"""
        self.logger = logging.getLogger(__name__)

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def vertex_to_dict(self, vertex: Vertex, graph: Graph) -> Dict:
        return {
            'id': vertex.id,
            'edge_ids': graph.connected_edges(vertex.id),
            'depth': graph.vertex_depth(vertex.id),
        }

    def to_dict(self, graph: Graph) -> Dict[str, Any]:
        """Convert a graph to a JSON-ready dictionary"""
        return {
            'depth': graph.depth(),
            'vertices': [self.vertex_to_dict(v, graph) for v in graph.vertices()],
            'edges': [e.to_dict() for e in graph.edges()],
        }

    def to_json(self, graph: Graph, indent: Optional[int] = None) -> str:
        """Serialize a graph; compact unless an indent is given"""
        separators = (',', ':') if indent is None else None
        return json.dumps(self.to_dict(graph), indent=indent, separators=separators) + "\n"

    def export_to_json(self, graph: Graph, filepath: str, indent: Optional[int] = None) -> str:
        """Export Graph to JSON file"""
        self.logger.info(f"Exporting to JSON: {filepath}")

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json(graph, indent=indent))

        return str(path)

    # -------------------------------------------------------------------------
    # GraphML / NetworkX
    # -------------------------------------------------------------------------

    def export_to_graphml(self, graph: Graph, filepath: str) -> str:
        """Export Graph to GraphML format"""
        self.logger.info(f"Exporting to GraphML: {filepath}")

        G = self._to_networkx(graph)
        import networkx as nx
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        nx.write_graphml(G, str(path))
        return str(path)

    def export_to_networkx(self, graph: Graph) -> Any:
        """Export Graph to NetworkX MultiDiGraph"""
        return self._to_networkx(graph)

    def _to_networkx(self, graph: Graph) -> Any:
        """Convert graph to NetworkX multigraph"""
        try:
            import networkx as nx
        except ImportError:
            raise ImportError("networkx package required. Install with: pip install networkx")

        G = nx.MultiDiGraph(depth=graph.depth())

        for vertex in graph.vertices():
            G.add_node(vertex.id, depth=graph.vertex_depth(vertex.id))

        # Red edges may repeat a vertex pair, so the edge id is the key
        for edge in graph.edges():
            G.add_edge(edge.from_vertex_id, edge.to_vertex_id, key=edge.id, color=edge.color.value)

        return G
