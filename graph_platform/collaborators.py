"""
    Default host collaborators: text measurement and row identities.

    A real host supplies its own; these keep the platform usable on its own
    and in tests.
"""
from typing import Optional

from graph_api.models.data_view import CategoryColumn
from graph_api.models.geometry import Size
from graph_api.models.label import Font
from graph_api.models.selection import SelectionId
from graph_api.plugins.base import SelectionIdBuilder, TextMeasurer


class ApproximateTextMeasurer(TextMeasurer):
    """
    Estimates text extents from the font size: every character is
    ``char_width_ratio`` of the font size wide, every line one line height tall.
    """

    def __init__(self, char_width_ratio: float = 0.6):
        self._char_width_ratio = char_width_ratio

    def measure_text(self, text: str, font: Font) -> Size:
        if not text:
            return Size(0.0, 0.0)
        lines = text.split('\n')
        longest = max(len(line) for line in lines)
        return Size(longest * font.size * self._char_width_ratio,
                    len(lines) * font.line_height)


class RowSelectionIdBuilder(SelectionIdBuilder):
    """Identity = category column name + row index (+ the cell value as key)."""

    def __init__(self):
        self._column: Optional[CategoryColumn] = None
        self._row_index: Optional[int] = None

    def with_category(self, column: CategoryColumn, row_index: int) -> 'RowSelectionIdBuilder':
        self._column = column
        self._row_index = row_index
        return self

    def create_selection_id(self) -> SelectionId:
        if self._column is None or self._row_index is None:
            raise ValueError("with_category() must be called before create_selection_id().")
        values = self._column.values
        key = values[self._row_index] if 0 <= self._row_index < len(values) else None
        return SelectionId(self._column.source.display_name, self._row_index, key)
