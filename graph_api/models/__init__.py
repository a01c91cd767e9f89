from .geometry import Point, Size, Rect
from .label import Label, Font, InteriorLabelParameter, EdgeLabelParameter, EdgeSide
from .node import Node
from .edge import Edge
from .graph import Graph
from .selection import SelectionId
from .data_view import (
    ColumnMetadata,
    CategoryColumn,
    ValueColumn,
    CategoricalData,
    DataView,
    VisualUpdateOptions,
)
