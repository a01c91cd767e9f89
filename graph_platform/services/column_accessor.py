# graph_platform/services/column_accessor.py
"""
    ColumnAccessor — fetches the row values of a role from a data view.

    Values come either from the categorical column whose display name
    matches the role binding, or, for measures, from the first
    aggregate / highlight series. Row order is preserved in both cases,
    which is what lets values of different roles be paired by row index.
"""
from typing import List, Optional

from graph_api.models.data_view import DataView
from graph_api.types import Role, ValueNormalizer
from .exceptions import HighlightAlignmentError
from .role_resolver import RoleMap

RoleValues = Optional[List[Optional[str]]]


class ColumnAccessor:

    def __init__(self, data_view: DataView, role_map: RoleMap):
        self._data_view = data_view
        self._role_map = role_map

    @property
    def data_view(self) -> DataView:
        return self._data_view

    @property
    def role_map(self) -> RoleMap:
        return self._role_map

    def get_role_values(self, role) -> RoleValues:
        """
        Return the values of the given role, one per row.

        :param role: A ``Role`` or a role name
        :return: Strings (``None`` for missing cells), or ``None`` when the
                 role is unknown, unbound or its column cannot be found
        :raises HighlightAlignmentError: If a measure role does not match the
                 aggregate series
        """
        if Role.parse(role) is None:
            return None

        binding = self._role_map.get(role)
        if binding is None:
            return None

        categorical = self._data_view.categorical
        if categorical is None:
            return None

        if binding.is_measure:
            if not categorical.values:
                return None
            series = categorical.values[0]
            if series.source.display_name != binding.field_name:
                raise HighlightAlignmentError(
                    f"Aggregate series '{series.source.display_name}' does not match "
                    f"the measure '{binding.field_name}' bound to {Role.parse(role).value}."
                )
            return [ValueNormalizer.to_text(v) for v in series.values]

        index = self.get_categorical_index(binding.field_name)
        if index < 0:
            return None
        return [ValueNormalizer.to_text(v) for v in categorical.categories[index].values]

    def get_categorical_index(self, name: str) -> int:
        """Index of the first category with the given display name, -1 if none."""
        categorical = self._data_view.categorical
        if categorical is None:
            return -1
        for i, category in enumerate(categorical.categories):
            if category.source.display_name == name:
                return i
        return -1
