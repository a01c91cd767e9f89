# graph_platform/services/node_projector.py
"""
    NodeProjector — turns the NodeId column into unique node records.

    Extends ``SourceProjector[NodeSourceItem]`` (Template Method + Genericity).
"""
from typing import Any, Callable, Dict, List, Optional, Sequence

from graph_api.plugins.base import SelectionIdBuilder
from graph_api.types import Role
from .base_service import SourceProjector
from .column_accessor import ColumnAccessor
from .source_items import NodeSourceItem

RoleColumn = Optional[Sequence[Optional[str]]]


class NodeProjector(SourceProjector[NodeSourceItem]):
    """
    Deduplicates the NodeId column: one record per distinct non-null id,
    in order of first occurrence.

    All attributes of a node (labels, shape, selection identity) come from
    the first row in which its id occurs. Rows repeating the id with other
    attribute values are ignored.
    """

    def __init__(self, builder_factory: Optional[Callable[[], SelectionIdBuilder]] = None):
        """
        :param builder_factory: Returns a fresh identity builder; without it
                                records carry no identity
        """
        self._builder_factory = builder_factory

    def project(self,
                ids: RoleColumn,
                labels: RoleColumn = None,
                shapes: RoleColumn = None,
                sub_labels: RoleColumn = None,
                top_labels: RoleColumn = None,
                identity_for_row: Optional[Callable[[int], Any]] = None) -> List[NodeSourceItem]:
        """
        Build one ``NodeSourceItem`` per distinct id.

        :param ids: NodeId values per row (``None`` if the role is absent)
        :param labels: NodeMainLabel values per row
        :param shapes: NodeShape values per row
        :param sub_labels: NodeSecondLabel values per row
        :param top_labels: NodeTopLabel values per row
        :param identity_for_row: Builds the selection identity of a row index
        :return: Node records, empty if there are no ids
        """
        if ids is None:
            return []

        first_rows: Dict[str, int] = {}
        for row_index, node_id in enumerate(ids):
            if node_id is not None and node_id not in first_rows:
                first_rows[node_id] = row_index

        items = []
        for node_id, row_index in first_rows.items():
            item = NodeSourceItem(id=node_id, row_index=row_index)
            if identity_for_row is not None:
                item.identity = identity_for_row(row_index)

            # a bound label role always yields text, an empty cell shows as ''
            if labels is not None and row_index < len(labels):
                item.label = '' if labels[row_index] is None else labels[row_index]
            item.shape = self._cell(shapes, row_index)
            item.sub_label = self._cell(sub_labels, row_index)
            item.top_label = self._cell(top_labels, row_index)
            items.append(item)
        return items

    def _fetch_columns(self, accessor: ColumnAccessor) -> Dict[str, Any]:
        return {
            'ids': accessor.get_role_values(Role.NODE_ID),
            'labels': accessor.get_role_values(Role.NODE_MAIN_LABEL),
            'shapes': accessor.get_role_values(Role.NODE_SHAPE),
            'sub_labels': accessor.get_role_values(Role.NODE_SECOND_LABEL),
            'top_labels': accessor.get_role_values(Role.NODE_TOP_LABEL),
            'identity_for_row': self._identity_factory(accessor),
        }

    def _identity_factory(self, accessor: ColumnAccessor) -> Optional[Callable[[int], Any]]:
        """Identities are keyed on the first category column and the row index."""
        categorical = accessor.data_view.categorical
        if self._builder_factory is None or categorical is None or not categorical.categories:
            return None
        category = categorical.categories[0]

        def build(row_index: int):
            return self._builder_factory().with_category(category, row_index).create_selection_id()

        return build

    @staticmethod
    def _cell(column: RoleColumn, row_index: int) -> Optional[str]:
        if column is None or row_index >= len(column):
            return None
        return column[row_index]
