"""
    Organic layout: force-directed node placement followed by edge routing.

    Placement runs ``networkx.spring_layout`` on the diagram's topology and
    scales the result until the closest two nodes keep the configured
    minimum distance between their borders. Routing then gives parallel
    edges of the same node pair distinct, evenly spaced bends and turns
    self-loops into a small detour next to their node.
"""
import logging
from typing import Dict, List, Tuple

import networkx as nx
import numpy as np

from graph_api.models.edge import Edge
from graph_api.models.geometry import Point, Rect
from graph_api.models.graph import Graph
from graph_api.plugins import LayoutPlugin
from graph_platform.config import LayoutConfig

logger = logging.getLogger(__name__)


class OrganicLayoutPlugin(LayoutPlugin):

    def get_plugin_name(self) -> str:
        return "Organic Layout"

    def arrange(self, graph: Graph, config: LayoutConfig = None) -> None:
        config = config or LayoutConfig()
        nodes = graph.get_all_nodes()
        if not nodes:
            return

        centers = self._place_nodes(graph, config)
        for node in nodes:
            graph.set_node_layout(node, Rect.centered_at(centers[node.node_id], node.layout.size))

        self._route_edges(graph, config)
        logger.debug("Organic layout arranged %d nodes and %d edges.",
                     graph.get_number_of_nodes(), graph.get_number_of_edges())

    # ── placement ────────────────────────────────────────────────────────────

    def _place_nodes(self, graph: Graph, config: LayoutConfig) -> Dict[str, Point]:
        nodes = graph.get_all_nodes()
        topology = nx.DiGraph()
        topology.add_nodes_from(node.node_id for node in nodes)
        topology.add_edges_from(
            (edge.source_node.node_id, edge.target_node.node_id)
            for edge in graph.get_all_edges() if not edge.is_self_loop()
        )

        positions = nx.spring_layout(topology, iterations=config.iterations, seed=config.seed)
        ids = [node.node_id for node in nodes]
        coords = np.array([positions[node_id] for node_id in ids], dtype=float)

        if len(ids) > 1:
            largest_side = max(max(n.layout.width, n.layout.height) for n in nodes)
            required = config.min_node_distance + largest_side
            diffs = coords[:, None, :] - coords[None, :, :]
            distances = np.sqrt((diffs ** 2).sum(axis=-1))
            np.fill_diagonal(distances, np.inf)
            closest = max(float(distances.min()), 1e-9)
            coords = coords * (required / closest)

        # shift into positive coordinates, leaving room for the largest node
        margin = max(max(n.layout.width, n.layout.height) for n in nodes)
        coords = coords - coords.min(axis=0) + margin
        return {node_id: Point(float(x), float(y)) for node_id, (x, y) in zip(ids, coords)}

    # ── routing ──────────────────────────────────────────────────────────────

    def _route_edges(self, graph: Graph, config: LayoutConfig) -> None:
        bundles: Dict[Tuple[str, str], List[Edge]] = {}
        for edge in graph.get_all_edges():
            if not config.keep_existing_bends:
                graph.set_edge_bends(edge, [])
            if not config.route_all_edges and edge.bends:
                continue
            key = tuple(sorted((edge.source_node.node_id, edge.target_node.node_id)))
            bundles.setdefault(key, []).append(edge)

        for edges in bundles.values():
            if edges[0].is_self_loop():
                for i, edge in enumerate(edges):
                    graph.set_edge_bends(edge, self._self_loop_bends(edge, config, i))
            elif len(edges) > 1:
                for i, edge in enumerate(edges):
                    offset = (i - (len(edges) - 1) / 2) * config.min_edge_distance
                    graph.set_edge_bends(edge, [self._offset_midpoint(edge, offset)])

    @staticmethod
    def _offset_midpoint(edge: Edge, offset: float) -> Point:
        """Midpoint of the straight line, moved ``offset`` along its normal."""
        a = edge.source_node.layout.center
        b = edge.target_node.layout.center
        dx, dy = b.x - a.x, b.y - a.y
        length = float(np.hypot(dx, dy)) or 1.0
        # keep the normal stable for both directions of the pair
        if (edge.source_node.node_id, edge.target_node.node_id) > \
                (edge.target_node.node_id, edge.source_node.node_id):
            dx, dy = -dx, -dy
        nx_, ny_ = -dy / length, dx / length
        return Point((a.x + b.x) / 2 + nx_ * offset, (a.y + b.y) / 2 + ny_ * offset)

    @staticmethod
    def _self_loop_bends(edge: Edge, config: LayoutConfig, index: int) -> List[Point]:
        bounds = edge.source_node.layout
        reach = config.min_edge_distance * (index + 1)
        right = bounds.x + bounds.width + reach
        top = bounds.y - reach
        return [Point(bounds.center.x, top), Point(right, top), Point(right, bounds.center.y)]
