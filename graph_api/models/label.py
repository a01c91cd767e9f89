"""
    Label model - text attached to a node or an edge, plus its placement.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


class InteriorLabelParameter(Enum):
    """Placement of a label inside its node"""
    CENTER = "center"
    NORTH = "north"
    SOUTH = "south"

    def to_dict(self) -> Dict[str, Any]:
        return {'model': 'interior', 'position': self.value}


class EdgeSide(Enum):
    ON_EDGE = "on_edge"
    LEFT_OF_EDGE = "left_of_edge"
    RIGHT_OF_EDGE = "right_of_edge"


@dataclass(frozen=True)
class EdgeLabelParameter:
    """
    Placement of a label along its edge.

    Attributes:
        ratio: Position along the edge path, 0 at the source, 1 at the target.
        side:  Which side of the path the label sits on.
    """
    ratio: float = 0.5
    side: EdgeSide = EdgeSide.ON_EDGE

    def to_dict(self) -> Dict[str, Any]:
        return {'model': 'edge', 'ratio': self.ratio, 'side': self.side.value}


LabelParameter = Union[InteriorLabelParameter, EdgeLabelParameter]


@dataclass(frozen=True)
class Font:
    """Font used to render and measure labels; size in pixels"""
    family: str = "sans-serif"
    size: float = 12.0
    line_spacing: float = 1.2

    @property
    def line_height(self) -> float:
        return self.size * self.line_spacing


class Label:
    """A piece of text owned by a node or an edge"""

    def __init__(self, text: str, parameter: LabelParameter, owner_id: Any = None):
        self.text = text
        self.parameter = parameter
        self.owner_id = owner_id

    def __repr__(self) -> str:
        return f"Label({self.text!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {'text': self.text, 'owner': self.owner_id, 'placement': self.parameter.to_dict()}
