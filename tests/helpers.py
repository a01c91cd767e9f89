# tests/helpers.py
"""
Test doubles for the host collaborators plus small data-view builders.
"""
from typing import Any, List

from graph_api.models.data_view import ColumnMetadata, DataView
from graph_api.models.geometry import Size
from graph_api.models.graph import Graph
from graph_api.models.label import Font
from graph_api.plugins.base import LayoutPlugin, TextMeasurer


class FixedTextMeasurer(TextMeasurer):
    """Every character is 8px wide, every text 16px tall; '' measures 0x0."""

    def __init__(self):
        self.calls: List[str] = []

    def measure_text(self, text: str, font: Font) -> Size:
        self.calls.append(text)
        if not text:
            return Size(0.0, 0.0)
        return Size(8.0 * len(text), 16.0)


class RecordingLayout(LayoutPlugin):
    """Records every graph it was asked to arrange."""

    def __init__(self):
        self.calls: List[Graph] = []

    def get_plugin_name(self) -> str:
        return "Recording Layout"

    def arrange(self, graph: Graph, config: Any) -> None:
        self.calls.append(graph)


class FailingLayout(LayoutPlugin):

    def get_plugin_name(self) -> str:
        return "Failing Layout"

    def arrange(self, graph: Graph, config: Any) -> None:
        raise RuntimeError("layout engine crashed")


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def column(name: str, *roles: str, measure: bool = False) -> ColumnMetadata:
    return ColumnMetadata(display_name=name, roles={r: True for r in roles}, is_measure=measure)


def make_view(columns: List[ColumnMetadata], rows: List[List[Any]]) -> DataView:
    return DataView.from_rows(columns, rows)
