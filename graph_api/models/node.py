"""
    Node model - representation of a visual node in the graph
"""
from typing import Dict, Any, List, Optional
from .geometry import Rect
from .label import Label


class Node:
    """
    Visual node of the diagram.
    Each node has an ID, a layout rectangle, an opaque tag and its labels.
    """

    def __init__(self, node_id: Any, layout: Rect, tag: Any = None, style: Optional[str] = None):
        """
        Initialize a node.

        Args:
            node_id: Unique identifier of the node (will be converted to str)
            layout:  Bounds of the node
            tag:     Arbitrary payload used to correlate the node with its source record
            style:   Optional style key understood by the renderer
        """
        # Ensure ID is always a string for consistency in comparisons
        self.node_id = str(node_id)
        self.layout = layout
        self.tag = tag
        self.style = style
        self.labels: List[Label] = []

    @property
    def main_label(self) -> Optional[Label]:
        return self.labels[0] if self.labels else None

    def __repr__(self) -> str:
        return f"Node({self.node_id}, {self.layout})"

    def __eq__(self, other) -> bool:
        """Two nodes are equal if they have the same ID"""
        if not isinstance(other, Node):
            return False
        return self.node_id == other.node_id

    def __hash__(self) -> int:
        """Hash node by ID"""
        return hash(self.node_id)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert node to dictionary for serialization.
        The tag is reduced to its ``to_dict`` form when it has one.
        """
        tag = self.tag.to_dict() if hasattr(self.tag, 'to_dict') else self.tag
        return {
            'id': self.node_id,
            'layout': self.layout.to_dict(),
            'style': self.style,
            'tag': tag,
            'labels': [label.to_dict() for label in self.labels],
        }
