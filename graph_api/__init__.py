"""
Tabular Graph API — models, roles and plugin contracts.
"""
from .types import Role, ValueNormalizer
from .models.geometry import Point, Size, Rect
from .models.label import Label, Font, InteriorLabelParameter, EdgeLabelParameter, EdgeSide
from .models.node import Node
from .models.edge import Edge
from .models.graph import Graph
from .models.selection import SelectionId
from .models.data_view import (
    ColumnMetadata,
    CategoryColumn,
    ValueColumn,
    CategoricalData,
    DataView,
    VisualUpdateOptions,
)
from .plugins.base import DataSourcePlugin, LayoutPlugin, TextMeasurer, SelectionIdBuilder

__all__ = [
    'Role',
    'ValueNormalizer',
    'Point',
    'Size',
    'Rect',
    'Label',
    'Font',
    'InteriorLabelParameter',
    'EdgeLabelParameter',
    'EdgeSide',
    'Node',
    'Edge',
    'Graph',
    'SelectionId',
    'ColumnMetadata',
    'CategoryColumn',
    'ValueColumn',
    'CategoricalData',
    'DataView',
    'VisualUpdateOptions',
    'DataSourcePlugin',
    'LayoutPlugin',
    'TextMeasurer',
    'SelectionIdBuilder',
]
