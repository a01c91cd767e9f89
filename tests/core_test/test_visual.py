# tests/core_test/test_visual.py
"""
Tests for the GraphVisual controller.

Covers:
    • rebuild: projection → assembly → layout on the live graph
    • update: debounce, missing data, viewport changes
    • Failure handling under both failure policies
    • reset, selection and observer hooks
    • Data-source plugins used through the visual
"""
import threading

import pytest

from graph_api.models.data_view import DataView, VisualUpdateOptions
from graph_api.models.geometry import Size
from graph_api.models.graph import Graph
from graph_api.models.selection import SelectionId
from graph_api.plugins.base import DataSourcePlugin, LayoutPlugin
from graph_platform.collaborators import RowSelectionIdBuilder
from graph_platform.config import FailurePolicy, VisualConfig
from graph_platform.services.exceptions import HighlightAlignmentError
from graph_platform.services.update_gate import GateState
from graph_platform.visual import (
    EVENT_GRAPH_REBUILT,
    EVENT_NODE_SELECTED,
    EVENT_SESSION_RESET,
    EVENT_UPDATE_DEBOUNCED,
    EVENT_UPDATE_FAILED,
    GraphVisual,
    UpdateStatus,
)

from tests.helpers import FailingLayout, column, make_view


class SwitchableLayout(LayoutPlugin):
    """Arranges nothing until told to fail."""

    def __init__(self):
        self.fail = False

    def get_plugin_name(self) -> str:
        return "Switchable Layout"

    def arrange(self, graph, config) -> None:
        if self.fail:
            raise RuntimeError("layout engine crashed")


class RefusingIdentityBuilder(RowSelectionIdBuilder):
    """A host identity builder that rejects every row."""

    def create_selection_id(self):
        raise RuntimeError("host refused identity")


class LockedIdentity:
    """Host identity carrying a handle that cannot be copied."""

    def __init__(self, key):
        self.key = key
        self.lock = threading.Lock()


class LockedIdentityBuilder(RowSelectionIdBuilder):

    def create_selection_id(self):
        return LockedIdentity(super().create_selection_id().key)


class RefusingSnapshotGraph(Graph):
    """Live graph whose snapshots fail once ``refuse`` is set."""

    def __init__(self):
        super().__init__("live")
        self.refuse = False

    def copy(self):
        if self.refuse:
            raise MemoryError("no room for a snapshot")
        return super().copy()


class StubDataSource(DataSourcePlugin):

    def __init__(self, view: DataView):
        self.view = view
        self.paths = []

    def get_plugin_name(self) -> str:
        return "Stub"

    def parse(self, file_path: str) -> DataView:
        self.paths.append(file_path)
        return self.view


@pytest.fixture
def switchable() -> SwitchableLayout:
    return SwitchableLayout()


def _visual(measurer, clock, layout, policy=FailurePolicy.KEEP_PREVIOUS) -> GraphVisual:
    return GraphVisual(VisualConfig(failure_policy=policy),
                       text_measurer=measurer, layout=layout, clock=clock)


def _misaligned_view() -> DataView:
    return make_view(
        [column("Employee", "NodeId"),
         column("Weight", measure=True),
         column("Score", "EdgeLabel", measure=True)],
        [["x", 1, 2]],
    )


def _node_ids(graph: Graph):
    return [node.tag.id for node in graph.get_all_nodes()]


# ═════════════════════════════════════════════════════════════════
#  REBUILD
# ═════════════════════════════════════════════════════════════════

class TestRebuild:

    def test_dangling_target_is_dropped(self, visual, scenario_view):
        result = visual.rebuild(scenario_view)

        assert result.success
        assert result.status is UpdateStatus.RENDERED
        assert _node_ids(visual.graph) == ["A", "B"]
        edges = visual.graph.get_all_edges()
        assert [(e.source_node.tag.id, e.target_node.tag.id) for e in edges] == [("A", "B")]
        assert result.data["edges_skipped"] == 1

    def test_org_chart(self, visual, org_view):
        result = visual.rebuild(org_view)

        assert _node_ids(visual.graph) == ["alice", "bob", "carol", "dave"]
        assert visual.graph.get_number_of_edges() == 4
        assert result.data["edge_labels_attached"] == 4
        assert [n.main_label.text for n in visual.graph.get_all_nodes()] == [
            "Alice Smith", "Bob Jones", "Carol White", "Dave Brown",
        ]

    def test_edge_labels_follow_their_rows(self, visual, org_view):
        visual.rebuild(org_view)
        by_pair = {
            (e.source_node.tag.id, e.target_node.tag.id): e.tag
            for e in visual.graph.get_all_edges()
        }
        assert by_pair == {
            ("bob", "alice"): "reports to",
            ("carol", "alice"): "reports to",
            ("dave", "bob"): "reports to",
            ("dave", "carol"): "dotted line",
        }

    def test_layout_receives_the_live_graph(self, visual, layout, org_view):
        visual.rebuild(org_view)
        assert layout.calls == [visual.graph]

    def test_layout_not_called_for_an_empty_graph(self, visual, layout):
        visual.rebuild(make_view([column("Name", "NodeMainLabel")], [["x"]]))
        assert layout.calls == []
        assert visual.graph.is_empty()

    def test_graph_instance_is_reused(self, visual, org_view, scenario_view):
        graph = visual.graph
        visual.rebuild(org_view)
        visual.rebuild(scenario_view)
        assert visual.graph is graph
        assert _node_ids(graph) == ["A", "B"]

    def test_rebuild_replaces_previous_content(self, visual, org_view):
        visual.rebuild(org_view)
        visual.rebuild(org_view)
        assert visual.graph.get_number_of_nodes() == 4
        assert [n.node_id for n in visual.graph.get_all_nodes()] == ["n0", "n1", "n2", "n3"]

    def test_session_keeps_the_sources(self, visual, org_view):
        visual.rebuild(org_view)
        session = visual.session
        assert session.data_view is org_view
        assert session.node_ids == ["alice", "bob", "carol", "dave", "dave"]
        assert [i.id for i in session.nodes_source] == ["alice", "bob", "carol", "dave"]
        assert len(session.edges_source) == 4
        assert session.role_map.to_dict()["NodeId"]["fieldName"] == "Employee"

    def test_graph_rebuilt_event(self, visual, org_view):
        received = []
        visual.subscribe(EVENT_GRAPH_REBUILT, lambda graph, result: received.append(result))
        visual.rebuild(org_view)
        assert received[0].nodes_created == 4


# ═════════════════════════════════════════════════════════════════
#  UPDATE
# ═════════════════════════════════════════════════════════════════

class TestUpdate:

    def test_first_update_is_debounced(self, visual, org_view):
        result = visual.update(VisualUpdateOptions([org_view]))
        assert result.status is UpdateStatus.DEBOUNCED
        assert not result.success
        assert visual.graph.is_empty()

    def test_burst_renders_once_after_the_window(self, visual, clock, layout, org_view):
        statuses = []
        for now in (0, 500, 1200):
            clock.now = now
            statuses.append(visual.update(VisualUpdateOptions([org_view])).status)

        assert statuses == [UpdateStatus.DEBOUNCED, UpdateStatus.DEBOUNCED, UpdateStatus.RENDERED]
        assert len(layout.calls) == 1
        assert visual.session.gate.state is GateState.IDLE

    def test_debounced_event_carries_deadline(self, visual, org_view):
        deadlines = []
        visual.subscribe(EVENT_UPDATE_DEBOUNCED, lambda deadline: deadlines.append(deadline))
        visual.update(VisualUpdateOptions([org_view]))
        assert deadlines == [1000]

    def test_missing_data_view(self, visual, clock):
        visual.update(None)
        clock.now = 1000
        result = visual.update(VisualUpdateOptions([]))
        assert result.status is UpdateStatus.NO_DATA

    def test_data_view_without_categories(self, visual, clock, org_view):
        visual.rebuild(org_view)
        visual.update(None)
        clock.now = 1000
        result = visual.update(VisualUpdateOptions([DataView()]))
        assert result.status is UpdateStatus.NO_DATA
        assert visual.graph.get_number_of_nodes() == 4

    def test_viewport_places_new_nodes(self, visual, clock, org_view):
        visual.update(None)
        clock.now = 1000
        visual.update(VisualUpdateOptions([org_view], viewport=Size(200, 100)))
        first = visual.graph.get_all_nodes()[0]
        assert (first.layout.x, first.layout.y) == (100, 50)

    def test_viewport_leaves_shared_config_alone(self, measurer, clock, layout, org_view):
        config = VisualConfig()
        first = GraphVisual(config, text_measurer=measurer, layout=layout, clock=clock)
        second = GraphVisual(config, text_measurer=measurer, layout=layout, clock=clock)

        first.update(None)
        clock.now = 1000
        first.update(VisualUpdateOptions([org_view], viewport=Size(200, 100)))
        second.rebuild(org_view)

        assert config.viewport == Size(800, 600)
        node = second.graph.get_all_nodes()[0]
        assert (node.layout.x, node.layout.y) == (400, 300)


# ═════════════════════════════════════════════════════════════════
#  FAILURES
# ═════════════════════════════════════════════════════════════════

class TestFailures:

    def test_alignment_fault_keeps_previous_render(self, visual, org_view):
        visual.rebuild(org_view)
        result = visual.rebuild(_misaligned_view())

        assert result.status is UpdateStatus.FAILED
        assert isinstance(result.error, HighlightAlignmentError)
        assert result.data["stage"] == "projection"
        assert _node_ids(visual.graph) == ["alice", "bob", "carol", "dave"]
        assert visual.session.data_view is org_view

    def test_layout_failure_restores_previous_graph(self, measurer, clock, switchable, org_view, scenario_view):
        visual = _visual(measurer, clock, switchable)
        graph = visual.graph
        visual.rebuild(org_view)

        switchable.fail = True
        result = visual.rebuild(scenario_view)

        assert result.status is UpdateStatus.FAILED
        assert result.data == {"stage": "layout", "policy": "keep_previous"}
        assert visual.graph is graph
        assert _node_ids(graph) == ["alice", "bob", "carol", "dave"]
        assert graph.get_number_of_edges() == 4
        assert [i.id for i in visual.session.nodes_source] == ["alice", "bob", "carol", "dave"]

    def test_restored_graph_keeps_working(self, measurer, clock, switchable, org_view, scenario_view):
        visual = _visual(measurer, clock, switchable)
        visual.rebuild(org_view)
        switchable.fail = True
        visual.rebuild(scenario_view)

        switchable.fail = False
        assert visual.rebuild(scenario_view).success
        assert _node_ids(visual.graph) == ["A", "B"]

    def test_failure_on_first_render_leaves_empty_graph(self, measurer, clock, org_view):
        visual = _visual(measurer, clock, FailingLayout())
        result = visual.rebuild(org_view)
        assert result.status is UpdateStatus.FAILED
        assert visual.graph.is_empty()

    def test_show_nothing_policy_clears_graph(self, measurer, clock, switchable, org_view):
        visual = _visual(measurer, clock, switchable, FailurePolicy.SHOW_NOTHING)
        visual.rebuild(org_view)

        switchable.fail = True
        result = visual.rebuild(org_view)

        assert result.data["policy"] == "show_nothing"
        assert visual.graph.is_empty()
        assert visual.session.nodes_source == []

    def test_failure_hook(self, measurer, clock, org_view):
        visual = _visual(measurer, clock, FailingLayout())
        failures = []
        visual.subscribe(EVENT_UPDATE_FAILED, lambda error, stage: failures.append((stage, str(error))))
        visual.rebuild(org_view)
        assert failures == [("layout", "layout engine crashed")]

    def test_failure_never_propagates_through_update(self, measurer, clock, org_view):
        visual = _visual(measurer, clock, FailingLayout())
        visual.update(VisualUpdateOptions([org_view]))
        clock.now = 1000
        result = visual.update(VisualUpdateOptions([org_view]))
        assert result.status is UpdateStatus.FAILED

    def test_broken_observer_does_not_break_rebuild(self, visual, org_view):
        def explode(**kwargs):
            raise RuntimeError("boom")

        visual.subscribe(EVENT_GRAPH_REBUILT, explode)
        assert visual.rebuild(org_view).success

    def test_identity_builder_failure_is_a_result(self, measurer, clock, layout, org_view):
        visual = GraphVisual(VisualConfig(), text_measurer=measurer, layout=layout, clock=clock,
                             builder_factory=RefusingIdentityBuilder)
        visual.update(VisualUpdateOptions([org_view]))
        clock.now = 1000
        result = visual.update(VisualUpdateOptions([org_view]))

        assert result.status is UpdateStatus.FAILED
        assert isinstance(result.error, RuntimeError)
        assert result.data["stage"] == "projection"

    def test_identity_builder_failure_keeps_previous_render(self, measurer, clock, layout, org_view, scenario_view):
        refuse = []

        def builders():
            return RefusingIdentityBuilder() if refuse else RowSelectionIdBuilder()

        visual = GraphVisual(VisualConfig(), text_measurer=measurer, layout=layout,
                             clock=clock, builder_factory=builders)
        visual.rebuild(org_view)
        refuse.append(True)

        assert visual.rebuild(scenario_view).data["stage"] == "projection"
        assert _node_ids(visual.graph) == ["alice", "bob", "carol", "dave"]

    def test_uncopyable_identities_render(self, measurer, clock, layout, org_view, scenario_view):
        visual = GraphVisual(VisualConfig(), text_measurer=measurer, layout=layout, clock=clock,
                             builder_factory=LockedIdentityBuilder)
        assert visual.rebuild(org_view).status is UpdateStatus.RENDERED
        assert visual.rebuild(scenario_view).status is UpdateStatus.RENDERED

    def test_restored_nodes_keep_host_identities(self, measurer, clock, switchable, org_view, scenario_view):
        visual = GraphVisual(VisualConfig(), text_measurer=measurer, layout=switchable,
                             clock=clock, builder_factory=LockedIdentityBuilder)
        visual.rebuild(org_view)
        tags = [node.tag for node in visual.graph.get_all_nodes()]

        switchable.fail = True
        assert visual.rebuild(scenario_view).data["stage"] == "layout"
        restored = [node.tag for node in visual.graph.get_all_nodes()]
        assert len(restored) == 4
        assert all(a is b for a, b in zip(restored, tags))

    def test_snapshot_failure_keeps_render_under_show_nothing(self, measurer, clock, layout, org_view, scenario_view):
        graph = RefusingSnapshotGraph()
        visual = GraphVisual(VisualConfig(failure_policy=FailurePolicy.SHOW_NOTHING),
                             text_measurer=measurer, layout=layout, clock=clock, graph=graph)
        visual.rebuild(org_view)

        graph.refuse = True
        result = visual.rebuild(scenario_view)

        assert result.status is UpdateStatus.FAILED
        assert result.data["stage"] == "snapshot"
        assert _node_ids(graph) == ["alice", "bob", "carol", "dave"]

    def test_projection_failure_keeps_render_under_show_nothing(self, measurer, clock, switchable, org_view):
        visual = _visual(measurer, clock, switchable, FailurePolicy.SHOW_NOTHING)
        visual.rebuild(org_view)

        result = visual.rebuild(_misaligned_view())

        assert result.data == {"stage": "projection", "policy": "show_nothing"}
        assert _node_ids(visual.graph) == ["alice", "bob", "carol", "dave"]
        assert [i.id for i in visual.session.nodes_source] == ["alice", "bob", "carol", "dave"]


# ═════════════════════════════════════════════════════════════════
#  RESET, SELECTION & OBSERVERS
# ═════════════════════════════════════════════════════════════════

class TestSessionAndSelection:

    def test_reset(self, visual, org_view):
        events = []
        visual.subscribe(EVENT_SESSION_RESET, lambda session: events.append(session))
        visual.rebuild(org_view)
        visual.update(VisualUpdateOptions([org_view]))

        visual.reset()

        assert visual.graph.is_empty()
        assert visual.session.nodes_source == []
        assert visual.session.data_view is None
        assert visual.session.gate.state is GateState.IDLE
        assert events == [visual.session]

    def test_find_node(self, visual, org_view):
        visual.rebuild(org_view)
        assert visual.find_node("carol").main_label.text == "Carol White"
        assert visual.find_node("nobody") is None

    def test_select_node_reports_identity(self, visual, org_view):
        visual.rebuild(org_view)
        selected = []
        visual.subscribe(EVENT_NODE_SELECTED, lambda node, identity: selected.append(identity))

        visual.select_node("bob")
        visual.select_node("nobody")

        assert selected == [SelectionId("Employee", 1, "bob")]

    def test_unsubscribe(self, visual, org_view):
        received = []
        callback = lambda **kwargs: received.append(kwargs)
        visual.subscribe(EVENT_GRAPH_REBUILT, callback)
        visual.unsubscribe(EVENT_GRAPH_REBUILT, callback)
        visual.rebuild(org_view)
        assert received == []


# ═════════════════════════════════════════════════════════════════
#  DATA SOURCES
# ═════════════════════════════════════════════════════════════════

class TestDataSources:

    def test_unknown_plugin(self, visual):
        with pytest.raises(ValueError, match="not found"):
            visual.load_data_view("no-such-plugin", "graph.csv")

    def test_registered_plugin_feeds_rebuild(self, visual, scenario_view):
        source = StubDataSource(scenario_view)
        visual.register_data_source("stub", source)

        result = visual.load_and_rebuild("stub", "rows.dat")

        assert "stub" in visual.get_data_source_names()
        assert source.paths == ["rows.dat"]
        assert result.success
        assert _node_ids(visual.graph) == ["A", "B"]

    def test_register_rejects_non_plugins(self, visual):
        with pytest.raises(TypeError):
            visual.register_data_source("bad", object())

    def test_registered_layout_is_used_by_name(self, measurer, clock, org_view):
        visual = GraphVisual(VisualConfig(default_layout="switch"), text_measurer=measurer, clock=clock)
        layout = SwitchableLayout()
        visual.register_layout("switch", layout)
        assert visual.get_layout() is layout
        layout.fail = True
        assert visual.rebuild(org_view).data["stage"] == "layout"
