# graph_platform/services/graph_assembler.py
"""
    GraphAssembler — creates the visual nodes and edges from source records.

    Every node starts at the centre of the viewport and is then resized to
    a square that contains its measured main label, whatever shape it is
    drawn with. Edges are wired through an id → node lookup table; an edge
    whose endpoint is unknown is dropped.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from graph_api.models.geometry import Rect, Size
from graph_api.models.graph import Graph
from graph_api.models.label import EdgeLabelParameter, EdgeSide, InteriorLabelParameter
from graph_api.models.node import Node
from graph_api.plugins.base import TextMeasurer

from ..config import NodeStyleConfig
from .source_items import EdgeSourceItem, NodeSourceItem

logger = logging.getLogger(__name__)


@dataclass
class AssemblyResult:
    """Counts of what one assembly pass created or dropped."""
    nodes_created: int = 0
    edges_created: int = 0
    edges_skipped: int = 0
    edge_labels_attached: int = 0

    def to_dict(self) -> dict:
        return {
            'nodes_created': self.nodes_created,
            'edges_created': self.edges_created,
            'edges_skipped': self.edges_skipped,
            'edge_labels_attached': self.edge_labels_attached,
        }


class GraphAssembler:
    """
    Fills an already cleared graph with nodes and edges.

    Usage:
        assembler = GraphAssembler(graph, measurer, NodeStyleConfig(), Size(800, 600))
        result = assembler.assemble(node_items, edge_items, edge_labels)
    """

    def __init__(self,
                 graph: Graph,
                 text_measurer: TextMeasurer,
                 node_style: Optional[NodeStyleConfig] = None,
                 viewport: Optional[Size] = None,
                 edge_label_ratio: float = 0.5):
        self._graph = graph
        self._measurer = text_measurer
        self._node_style = node_style or NodeStyleConfig()
        self._viewport = viewport or Size(0.0, 0.0)
        self._edge_label_parameter = EdgeLabelParameter(edge_label_ratio, EdgeSide.ON_EDGE)

    @property
    def graph(self) -> Graph:
        return self._graph

    def assemble(self,
                 node_items: Sequence[NodeSourceItem],
                 edge_items: Sequence[EdgeSourceItem],
                 edge_labels: Optional[Sequence[Optional[str]]] = None) -> AssemblyResult:
        """
        Create the nodes, then the edges, on the graph.

        :param node_items: Unique node records
        :param edge_items: Edge records in row order
        :param edge_labels: EdgeLabel values per row, looked up by each edge's row index
        :return: What was created and what was skipped
        """
        result = AssemblyResult()
        if not node_items:
            return result

        node_lookup: Dict[str, Node] = {}
        for item in node_items:
            node_lookup[item.id] = self._create_node(item)
            result.nodes_created += 1

        if not edge_items:
            return result

        show_edge_labels = edge_labels is not None and len(edge_labels) > 0
        for item in edge_items:
            source = node_lookup.get(item.source_id)
            target = node_lookup.get(item.target_id)
            if source is None or target is None:
                # the data names an endpoint that is not a node id
                result.edges_skipped += 1
                continue

            edge = self._graph.create_edge(source, target)
            result.edges_created += 1

            label_text = self._edge_label_for(item, edge_labels)
            if label_text is not None:
                edge.tag = label_text
                if show_edge_labels:
                    self._graph.add_label(edge, label_text, self._edge_label_parameter)
                    result.edge_labels_attached += 1

        if result.edges_skipped:
            logger.debug("Dropped %d edge(s) with an unknown endpoint.", result.edges_skipped)
        return result

    def _create_node(self, item: NodeSourceItem) -> Node:
        style = self._node_style
        main_label = item.label or ''
        node = self._graph.create_node(
            Rect(self._viewport.width / 2, self._viewport.height / 2,
                 style.default_size.width, style.default_size.height),
            tag=item,
        )

        measured = self._measurer.measure_text(main_label, style.font)
        side = max(measured.width + style.label_margin, measured.height + style.label_margin)
        self._graph.set_node_layout(node, Rect.from_point_and_size(node.layout.top_left, Size(side, side)))

        self._graph.add_label(node, main_label, InteriorLabelParameter.CENTER)
        return node

    @staticmethod
    def _edge_label_for(item: EdgeSourceItem,
                        edge_labels: Optional[Sequence[Optional[str]]]) -> Optional[str]:
        if edge_labels is None or not 0 <= item.row_index < len(edge_labels):
            return None
        return edge_labels[item.row_index]
