# tests/conftest.py
"""
Shared test fixtures.
Stub data view: a small org chart with 5 rows, 4 unique employees and
one employee reporting to two managers.
"""
import pytest

from graph_api.models.data_view import DataView
from graph_api.models.graph import Graph
from graph_platform.config import VisualConfig
from graph_platform.visual import GraphVisual

from tests.helpers import FakeClock, FixedTextMeasurer, RecordingLayout, column, make_view


# ── Column definitions ───────────────────────────────────────────
_COLUMNS = [
    column("Employee", "NodeId"),
    column("Manager", "TargetId"),
    column("Name", "NodeMainLabel"),
    column("Shape", "NodeShape"),
    column("Relation", "EdgeLabel"),
    column("Notes"),
]

# ── Rows (Employee, Manager, Name, Shape, Relation, Notes) ───────
_ROWS = [
    ["alice", None,    "Alice Smith", "ellipse",   None,          "CEO"],
    ["bob",   "alice", "Bob Jones",   "rectangle", "reports to",  None],
    ["carol", "alice", "Carol White", "rectangle", "reports to",  None],
    ["dave",  "bob",   "Dave Brown",  None,        "reports to",  "contractor"],
    ["dave",  "carol", "Dave B.",     "hexagon",   "dotted line", None],
]


def _build_view() -> DataView:
    return make_view(list(_COLUMNS), [list(row) for row in _ROWS])


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def org_view() -> DataView:
    """Org chart: 4 unique employees, 4 reporting lines, alice is the root."""
    return _build_view()


@pytest.fixture
def scenario_view() -> DataView:
    """rows A→B, A→C, B→∅: C is a target but never a NodeId."""
    return make_view(
        [column("id", "NodeId"), column("target", "TargetId")],
        [["A", "B"], ["A", "C"], ["B", None]],
    )


@pytest.fixture
def graph() -> Graph:
    return Graph("test")


@pytest.fixture
def measurer() -> FixedTextMeasurer:
    return FixedTextMeasurer()


@pytest.fixture
def layout() -> RecordingLayout:
    return RecordingLayout()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def visual(measurer, layout, clock) -> GraphVisual:
    """Visual with deterministic collaborators and the default config."""
    return GraphVisual(VisualConfig(), text_measurer=measurer, layout=layout, clock=clock)
