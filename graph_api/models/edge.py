"""
    Edge model - representation of a directed edge between nodes.
"""
from typing import Dict, Any, List, Optional
from .geometry import Point
from .label import Label
from .node import Node


class Edge:
    """
        Class for a directed edge between two nodes.
        Bends are the intermediate points of the routed path.
    """

    def __init__(
            self,
            edge_id: Any,
            source_node: Node,
            target_node: Node,
            tag: Any = None,
            style: Optional[str] = None,
    ):
        """
        Initialize an edge.

        Args:
            edge_id: Unique identifier of the edge (will be converted to str)
            source_node: Source node
            target_node: Target node
            tag: Arbitrary payload, e.g. the edge label value of the row
            style: Optional style key understood by the renderer
        """
        # Ensure ID is always a string for consistency
        self.edge_id = str(edge_id)
        self.source_node = source_node
        self.target_node = target_node
        self.tag = tag
        self.style = style
        self.labels: List[Label] = []
        self.bends: List[Point] = []

    def is_self_loop(self) -> bool:
        return self.source_node == self.target_node

    def __repr__(self) -> str:
        """String representation of edge"""
        return f"Edge({self.source_node.node_id} -> {self.target_node.node_id})"

    def __eq__(self, other) -> bool:
        """Two edges are equal if they have the same ID"""
        if not isinstance(other, Edge):
            return False
        return self.edge_id == other.edge_id

    def __hash__(self) -> int:
        """Hash edge by ID"""
        return hash(self.edge_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert edge to dictionary for serialization."""
        return {
            'id': self.edge_id,
            'source': self.source_node.node_id,
            'target': self.target_node.node_id,
            'style': self.style,
            'tag': self.tag,
            'bends': [bend.to_dict() for bend in self.bends],
            'labels': [label.to_dict() for label in self.labels],
        }
