"""
Graph Platform — turns tabular snapshots into a laid-out diagram.

Public API:
    GraphVisual         – per-visual controller (Facade)
    VisualSession       – live graph + cached projection state
    VisualConfig        – top-level configuration
    PluginLoader        – entry-point plugin discovery
"""
from .visual import (
    GraphVisual,
    UpdateResult,
    UpdateStatus,
    EVENT_GRAPH_REBUILT,
    EVENT_UPDATE_DEBOUNCED,
    EVENT_UPDATE_FAILED,
    EVENT_SESSION_RESET,
    EVENT_NODE_SELECTED,
)
from .session import VisualSession
from .config import VisualConfig, NodeStyleConfig, LayoutConfig, FailurePolicy
from .collaborators import ApproximateTextMeasurer, RowSelectionIdBuilder
from .plugin_loader import (
    PluginLoader,
    create_data_source_loader,
    create_layout_loader,
)

__all__ = [
    'GraphVisual',
    'UpdateResult',
    'UpdateStatus',
    'EVENT_GRAPH_REBUILT',
    'EVENT_UPDATE_DEBOUNCED',
    'EVENT_UPDATE_FAILED',
    'EVENT_SESSION_RESET',
    'EVENT_NODE_SELECTED',
    'VisualSession',
    'VisualConfig',
    'NodeStyleConfig',
    'LayoutConfig',
    'FailurePolicy',
    'ApproximateTextMeasurer',
    'RowSelectionIdBuilder',
    'PluginLoader',
    'create_data_source_loader',
    'create_layout_loader',
]
