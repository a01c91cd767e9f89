"""
    Data view model - the flat tabular snapshot delivered by the host.

    A data view carries the column metadata (display name, role flags,
    measure flag) and the column data: categorical columns hold raw row
    values, value columns hold aggregate / highlight series.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .geometry import Size


@dataclass
class ColumnMetadata:
    """
    Description of one input column.

    Attributes:
        display_name: Name shown to the user; role bindings refer to it.
        roles:        Role name -> flag; a column fills every role flagged True.
        is_measure:   True when the column holds aggregates rather than raw values.
    """
    display_name: str
    roles: Dict[str, bool] = field(default_factory=dict)
    is_measure: bool = False


@dataclass
class CategoryColumn:
    source: ColumnMetadata
    values: List[Any] = field(default_factory=list)


@dataclass
class ValueColumn:
    """Aggregate series; positionally aligned with the categories"""
    source: ColumnMetadata
    values: List[Any] = field(default_factory=list)


@dataclass
class CategoricalData:
    categories: List[CategoryColumn] = field(default_factory=list)
    values: List[ValueColumn] = field(default_factory=list)


@dataclass
class DataView:
    """One tabular snapshot"""
    columns: List[ColumnMetadata] = field(default_factory=list)
    categorical: Optional[CategoricalData] = None

    @classmethod
    def from_rows(cls, columns: List[ColumnMetadata], rows: List[List[Any]]) -> 'DataView':
        """
        Build a data view from row-major data.
        Measure columns become value series, all others categories;
        rows shorter than the column list are padded with None.
        """
        categorical = CategoricalData()
        for index, column in enumerate(columns):
            values = [row[index] if index < len(row) else None for row in rows]
            if column.is_measure:
                categorical.values.append(ValueColumn(column, values))
            else:
                categorical.categories.append(CategoryColumn(column, values))
        return cls(list(columns), categorical)

    @property
    def row_count(self) -> int:
        if self.categorical is None or not self.categorical.categories:
            return 0
        return len(self.categorical.categories[0].values)

    def has_categories(self) -> bool:
        return self.categorical is not None and bool(self.categorical.categories)


@dataclass
class VisualUpdateOptions:
    """Payload of an update notification"""
    data_views: List[DataView] = field(default_factory=list)
    viewport: Optional[Size] = None

    @property
    def data_view(self) -> Optional[DataView]:
        return self.data_views[0] if self.data_views else None
