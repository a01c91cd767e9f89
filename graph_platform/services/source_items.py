# graph_platform/services/source_items.py
"""
    Source records produced by the projectors and consumed by the assembler.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class NodeSourceItem:
    """
    One unique entity of the data view.

    Attributes:
        id:          Deduplicated node identifier, unique within one projection.
        label:       Main label text; '' for an empty cell, None if no label role is bound.
        shape:       Shape name from the shape role.
        sub_label:   Secondary label text.
        top_label:   Label shown above the node.
        identity:    Selection handle built from the representative row.
        layer_index: Reserved for layered layouts; never filled by the projection.
        row_index:   The first row in which ``id`` occurs.
    """
    id: str
    label: Optional[str] = None
    shape: Optional[str] = None
    sub_label: Optional[str] = None
    top_label: Optional[str] = None
    identity: Any = None
    layer_index: Optional[int] = None
    row_index: int = -1

    def to_dict(self) -> Dict[str, Any]:
        identity = self.identity.to_dict() if hasattr(self.identity, 'to_dict') else self.identity
        return {
            'id': self.id,
            'label': self.label,
            'shape': self.shape,
            'subLabel': self.sub_label,
            'topLabel': self.top_label,
            'identity': identity,
            'layerIndex': self.layer_index,
            'rowIndex': self.row_index,
        }


@dataclass(frozen=True)
class EdgeSourceItem:
    """A relationship taken from one row; ``row_index`` is that row."""
    source_id: str
    target_id: str
    row_index: int = -1

    def to_dict(self) -> Dict[str, Any]:
        return {'sourceId': self.source_id, 'targetId': self.target_id, 'rowIndex': self.row_index}
