"""
Graph Generator

Grows a depth-layered graph in four phases, always in this order:

1. Grey edges   - tree growth, layer by layer, with a branching probability
                  that decays linearly to zero at the target depth
2. Green edges  - self-loops
3. Yellow edges - links to an unconnected vertex one layer deeper
4. Red edges    - links to any vertex two layers deeper

Each phase reads the layering produced by the phases before it.

Usage:
    from depthgraph.core.graph_generator import generate_graph, GraphConfig

    # Simple usage
    graph = generate_graph(target_depth=5, new_vertices_per_step=3)

    # With configuration
    config = GraphConfig(target_depth=5, new_vertices_per_step=3, seed=42)
    graph = GraphGenerator(config).generate()
"""

from __future__ import annotations
import random
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .graph_model import (
    BASE_DEPTH,
    RED_EDGE_DEPTH_DIFFERENCE,
    YELLOW_EDGE_DEPTH_DIFFERENCE,
    EdgeColor,
    Graph,
)


# =============================================================================
# Configuration
# =============================================================================

GREEN_EDGE_PROBABILITY = 0.10
RED_EDGE_PROBABILITY = 0.33


@dataclass
class GraphConfig:
    """Configuration for graph generation"""
    target_depth: int = 0
    new_vertices_per_step: int = 0
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("target_depth", "new_vertices_per_step"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Invalid {name} {value!r}: expected an integer")
            if value < 0:
                raise ValueError(f"Invalid {name} {value}: must be non-negative")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"Invalid seed {self.seed!r}: expected an integer or None")


def decaying_probability(depth: int, max_depth: int) -> float:
    """
    Probability that falls linearly from 1.0 at the base depth to 0.0 at
    max_depth. A single-layer range always gives 1.0.
    """
    if max_depth <= BASE_DEPTH:
        return 1.0
    return 1.0 - (depth - BASE_DEPTH) / (max_depth - BASE_DEPTH)


# =============================================================================
# Graph Generator
# =============================================================================

class GraphGenerator:
    """
    Generates depth-layered graphs.

    All randomness comes from one random.Random owned by the generator, so a
    fixed seed reproduces the same graph.
    """

    def __init__(self, config: GraphConfig):
        self.config = config
        self.logger = logging.getLogger(__name__)
        self._rng = random.Random(config.seed)

    def generate(self) -> Graph:
        """
        Generate the complete graph.

        Returns:
            Graph with grey, green, yellow and red edges; empty when
            target_depth is 0
        """
        start_time = datetime.now()
        graph = Graph()

        if self.config.target_depth > 0:
            graph.add_vertex()
            self._generate_grey_edges(graph)
            self._generate_green_edges(graph)
            self._generate_yellow_edges(graph)
            self._generate_red_edges(graph)

        generation_time = (datetime.now() - start_time).total_seconds()
        stats = graph.get_statistics()
        self.logger.info(
            f"Generated: {stats['num_vertices']} vertices, {stats['num_edges']} edges, "
            f"depth {stats['depth']} in {generation_time:.3f}s"
        )
        return graph

    # -------------------------------------------------------------------------
    # Random helpers
    # -------------------------------------------------------------------------

    def _check_probability(self, probability: float) -> bool:
        """Bernoulli trial"""
        return self._rng.random() < probability

    def _choose(self, vertex_ids: List[int]) -> int:
        return vertex_ids[self._rng.randrange(len(vertex_ids))]

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def _generate_grey_edges(self, graph: Graph) -> None:
        """Grow the tree one layer at a time"""
        count = 0
        for current_depth in range(BASE_DEPTH, self.config.target_depth + 1):
            layer = graph.vertices_with_depth(current_depth)
            # No vertex reached this layer, growth has stopped
            if graph.depth() != current_depth:
                break

            probability = decaying_probability(current_depth, self.config.target_depth)
            for vertex_id in layer:
                for _ in range(self.config.new_vertices_per_step):
                    if self._check_probability(probability):
                        child_id = graph.add_vertex()
                        graph.add_edge(vertex_id, child_id)
                        count += 1

        self.logger.debug(f"{EdgeColor.GREY.value}: {count} edges")

    def _generate_green_edges(self, graph: Graph) -> None:
        count = 0
        for vertex in graph.vertices():
            if self._check_probability(GREEN_EDGE_PROBABILITY):
                graph.add_edge(vertex.id, vertex.id)
                count += 1

        self.logger.debug(f"{EdgeColor.GREEN.value}: {count} edges")

    def _generate_yellow_edges(self, graph: Graph) -> None:
        count = 0
        for vertex in graph.vertices():
            vertex_depth = graph.vertex_depth(vertex.id)
            probability = decaying_probability(vertex_depth, graph.depth())

            # NOTE: an edge is added when the decaying trial fails, so yellow
            # edges become more likely with depth; this is probably inverted.
            if self._check_probability(probability):
                continue

            candidates = [
                candidate_id
                for candidate_id in graph.vertices_with_depth(vertex_depth + YELLOW_EDGE_DEPTH_DIFFERENCE)
                if not graph.is_connected(vertex.id, candidate_id)
            ]
            if candidates:
                graph.add_edge(vertex.id, self._choose(candidates))
                count += 1

        self.logger.debug(f"{EdgeColor.YELLOW.value}: {count} edges")

    def _generate_red_edges(self, graph: Graph) -> None:
        count = 0
        for vertex in graph.vertices():
            if not self._check_probability(RED_EDGE_PROBABILITY):
                continue

            vertex_depth = graph.vertex_depth(vertex.id)
            candidates = graph.vertices_with_depth(vertex_depth + RED_EDGE_DEPTH_DIFFERENCE)
            if candidates:
                graph.add_edge(vertex.id, self._choose(candidates))
                count += 1

        self.logger.debug(f"{EdgeColor.RED.value}: {count} edges")


# =============================================================================
# Convenience Function
# =============================================================================

def generate_graph(
    target_depth: int,
    new_vertices_per_step: int,
    seed: Optional[int] = None,
) -> Graph:
    """
    Convenience function to generate a graph.

    Args:
        target_depth: Maximum number of layers
        new_vertices_per_step: Grey-edge trials per vertex and layer
        seed: Random seed for reproducibility

    Returns:
        Generated Graph

    Example:
        graph = generate_graph(target_depth=4, new_vertices_per_step=3, seed=42)
    """
    config = GraphConfig(
        target_depth=target_depth,
        new_vertices_per_step=new_vertices_per_step,
        seed=seed,
    )
    generator = GraphGenerator(config)
    return generator.generate()
