# graph_platform/services/edge_projector.py
"""
    EdgeProjector — pairs NodeId and TargetId row by row into edge records.

    Extends ``SourceProjector[EdgeSourceItem]`` (Template Method + Genericity).
"""
from typing import Any, Dict, List, Optional, Sequence

from graph_api.types import Role
from .base_service import SourceProjector
from .column_accessor import ColumnAccessor
from .source_items import EdgeSourceItem

RoleColumn = Optional[Sequence[Optional[str]]]


class EdgeProjector(SourceProjector[EdgeSourceItem]):
    """
    Emits one edge per row that has both a source and a target id.

    A row without a target is an entity with no outgoing relationship
    (e.g. the root of a tree); it produces no edge and no self-loop.
    """

    def project(self, source_ids: RoleColumn, target_ids: RoleColumn) -> List[EdgeSourceItem]:
        """
        :param source_ids: NodeId values per row
        :param target_ids: TargetId values per row
        :return: Edge records in row order, each remembering its row index
        """
        if not target_ids or source_ids is None:
            return []

        edges = []
        for row_index, source_id in enumerate(source_ids):
            target_id = target_ids[row_index] if row_index < len(target_ids) else None
            if target_id is None or source_id is None:
                continue
            edges.append(EdgeSourceItem(source_id, target_id, row_index))
        return edges

    def _fetch_columns(self, accessor: ColumnAccessor) -> Dict[str, Any]:
        return {
            'source_ids': accessor.get_role_values(Role.NODE_ID),
            'target_ids': accessor.get_role_values(Role.TARGET_ID),
        }
