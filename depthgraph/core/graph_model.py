"""
Graph Model - Depth-Layered Graph

Append-only directed multigraph that tracks a depth for every vertex and
colors each edge from the depth relationship of its endpoints:

Vertices:
- Vertex: {id}, created at the base depth (1)

Edges:
- GREY   (parent → new child): child is placed one layer deeper
- GREEN  (v → v): self-loop
- YELLOW (layer d → layer d+1): endpoints not connected before
- RED    (layer d → layer d+2): skips exactly one layer

An edge's color is decided once, when the edge is added, and never changes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List
import logging

logger = logging.getLogger(__name__)


BASE_DEPTH = 1
YELLOW_EDGE_DEPTH_DIFFERENCE = 1
RED_EDGE_DEPTH_DIFFERENCE = 2


# =============================================================================
# Errors
# =============================================================================

class GraphError(Exception):
    """Base class for graph errors"""


class InvalidVertexError(GraphError, ValueError):
    """Raised when an operation references a vertex id the graph does not hold"""


class InvalidEdgeError(GraphError, ValueError):
    """Raised when an edge id is not held by the graph"""


class EdgeColorError(GraphError, RuntimeError):
    """Raised when an edge fits none of the color rules"""


# =============================================================================
# Enumerations
# =============================================================================

class EdgeColor(str, Enum):
    """Edge colors in the graph"""
    GREY = "grey"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


# =============================================================================
# Vertex and Edge
# =============================================================================

@dataclass(frozen=True)
class Vertex:
    """Graph vertex"""
    id: int


@dataclass(frozen=True)
class Edge:
    """Directed colored edge"""
    id: int
    from_vertex_id: int
    to_vertex_id: int
    color: EdgeColor

    @property
    def vertex_ids(self) -> List[int]:
        return [self.from_vertex_id, self.to_vertex_id]

    def is_self_loop(self) -> bool:
        return self.from_vertex_id == self.to_vertex_id

    def to_dict(self) -> Dict:
        return {'id': self.id, 'vertex_ids': self.vertex_ids, 'color': self.color.value}


# =============================================================================
# Graph
# =============================================================================

class Graph:
    """
    Depth-layered directed multigraph.

    Vertex and edge ids come from counters owned by the instance and start
    at 0. Depth buckets are created on first use and are never removed, so
    depth() counts every layer that has ever held a vertex.
    """

    def __init__(self):
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self._adjacency: Dict[int, List[int]] = {}
        self._vertex_depths: Dict[int, int] = {}
        self._depth_to_vertices: Dict[int, List[int]] = {}
        self._next_vertex_id = 0
        self._next_edge_id = 0

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_vertex(self) -> int:
        """Create a vertex at the base depth and return its id"""
        vertex_id = self._next_vertex_id
        self._next_vertex_id += 1

        self._vertices.append(Vertex(vertex_id))
        self._adjacency[vertex_id] = []
        self._vertex_depths[vertex_id] = BASE_DEPTH
        self._depth_to_vertices.setdefault(BASE_DEPTH, []).append(vertex_id)
        return vertex_id

    def add_edge(self, from_vertex_id: int, to_vertex_id: int) -> int:
        """
        Add an edge and return its id.

        The color is computed by get_edge_color(). A grey edge also moves
        the target vertex one layer below the source; no other call
        changes a vertex depth.

        Raises:
            InvalidVertexError: if either endpoint is unknown
            EdgeColorError: if the edge fits none of the color rules
        """
        self._require_vertex(from_vertex_id)
        self._require_vertex(to_vertex_id)

        color = self.get_edge_color(from_vertex_id, to_vertex_id)
        if color is EdgeColor.GREY:
            self._set_vertex_depth(to_vertex_id, self._vertex_depths[from_vertex_id] + 1)

        edge_id = self._next_edge_id
        self._next_edge_id += 1

        self._edges.append(Edge(edge_id, from_vertex_id, to_vertex_id, color))
        self._adjacency[from_vertex_id].append(edge_id)
        if to_vertex_id != from_vertex_id:
            self._adjacency[to_vertex_id].append(edge_id)

        logger.debug(f"Added {color.value} edge {edge_id}: {from_vertex_id} -> {to_vertex_id}")
        return edge_id

    def _set_vertex_depth(self, vertex_id: int, depth: int) -> None:
        current = self._vertex_depths[vertex_id]
        self._depth_to_vertices[current].remove(vertex_id)
        self._depth_to_vertices.setdefault(depth, []).append(vertex_id)
        self._vertex_depths[vertex_id] = depth

    def _require_vertex(self, vertex_id: int) -> None:
        if not self.has_vertex(vertex_id):
            raise InvalidVertexError(f"Vertex {vertex_id} does not exist")

    # -------------------------------------------------------------------------
    # Edge classification
    # -------------------------------------------------------------------------

    def get_edge_color(self, from_vertex_id: int, to_vertex_id: int) -> EdgeColor:
        """
        Classify a prospective edge. Rules are checked in order:

        1. self-loop                                    -> GREEN
        2. target has no incident edges yet             -> GREY
        3. target one layer deeper and not connected    -> YELLOW
        4. target two layers deeper                     -> RED

        Raises:
            InvalidVertexError: if either endpoint is unknown
            EdgeColorError: if no rule matches
        """
        self._require_vertex(from_vertex_id)
        self._require_vertex(to_vertex_id)

        if from_vertex_id == to_vertex_id:
            return EdgeColor.GREEN
        if not self._adjacency[to_vertex_id]:
            return EdgeColor.GREY

        difference = self._vertex_depths[to_vertex_id] - self._vertex_depths[from_vertex_id]
        if (difference == YELLOW_EDGE_DEPTH_DIFFERENCE
                and not self.is_connected(from_vertex_id, to_vertex_id)):
            return EdgeColor.YELLOW
        if difference == RED_EDGE_DEPTH_DIFFERENCE:
            return EdgeColor.RED

        raise EdgeColorError(
            f"Cannot determine color for edge {from_vertex_id} -> {to_vertex_id} "
            f"(depths {self._vertex_depths[from_vertex_id]} -> {self._vertex_depths[to_vertex_id]})"
        )

    def is_connected(self, from_vertex_id: int, to_vertex_id: int) -> bool:
        """True if any edge joins the two vertices, in either direction"""
        for edge_id in self._adjacency.get(from_vertex_id, []):
            edge = self._edges[edge_id]
            other = edge.to_vertex_id if edge.from_vertex_id == from_vertex_id else edge.from_vertex_id
            if other == to_vertex_id:
                return True
        return False

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._adjacency

    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def get_edge(self, edge_id: int) -> Edge:
        if not 0 <= edge_id < len(self._edges):
            raise InvalidEdgeError(f"Edge {edge_id} does not exist")
        return self._edges[edge_id]

    def connected_edges(self, vertex_id: int) -> List[int]:
        return list(self._adjacency.get(vertex_id, []))

    def vertex_depth(self, vertex_id: int) -> int:
        self._require_vertex(vertex_id)
        return self._vertex_depths[vertex_id]

    def vertices_with_depth(self, depth: int) -> List[int]:
        return list(self._depth_to_vertices.get(depth, []))

    def depth(self) -> int:
        """Number of depth layers recorded so far (0 for an empty graph)"""
        return len(self._depth_to_vertices)

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_statistics(self) -> Dict:
        edges_by_color = {color.value: 0 for color in EdgeColor}
        for edge in self._edges:
            edges_by_color[edge.color.value] += 1

        vertices_by_depth = {
            depth: len(vertex_ids)
            for depth, vertex_ids in sorted(self._depth_to_vertices.items())
        }

        return {
            'num_vertices': len(self._vertices),
            'num_edges': len(self._edges),
            'depth': self.depth(),
            'edges_by_color': edges_by_color,
            'vertices_by_depth': vertices_by_depth,
        }

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)}, depth={self.depth()})"
