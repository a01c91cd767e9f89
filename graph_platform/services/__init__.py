"""
Projection services — role resolution, column access, node / edge
projection, graph assembly and update debouncing.
"""
from .base_service import SourceProjector
from .role_resolver import RoleResolver, RoleMap, FieldBinding
from .column_accessor import ColumnAccessor
from .source_items import NodeSourceItem, EdgeSourceItem
from .node_projector import NodeProjector
from .edge_projector import EdgeProjector
from .graph_assembler import GraphAssembler, AssemblyResult
from .update_gate import UpdateGate, GateState
from .exceptions import ProjectionError, HighlightAlignmentError, DataViewFormatError

__all__ = [
    'SourceProjector',
    'RoleResolver',
    'RoleMap',
    'FieldBinding',
    'ColumnAccessor',
    'NodeSourceItem',
    'EdgeSourceItem',
    'NodeProjector',
    'EdgeProjector',
    'GraphAssembler',
    'AssemblyResult',
    'UpdateGate',
    'GateState',
    'ProjectionError',
    'HighlightAlignmentError',
    'DataViewFormatError',
]
