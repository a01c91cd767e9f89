"""
    GraphVisual — the controller of one graph visual instance.

    Design Patterns applied
    ───────────────────────
    • Facade             – ``update`` / ``rebuild`` / ``reset`` hide role
                           resolution, projection, assembly and layout.
    • Strategy           – pluggable data sources, layouts, text measurer
                           and identity builder.
    • Memento            – the session snapshots the graph before a rebuild.
    • Observer (hooks)   – ``_listeners`` dict; ``update_failed`` is the
                           debugging hook for swallowed failures.

    Error boundary
    ──────────────
    ``rebuild`` is the only place where failures are turned into results.
    A failure before the live graph is cleared (projection, including the
    host identity builder, or the snapshot) leaves the graph untouched
    under every policy; a failure while assembling or arranging the graph
    is answered according to the configured ``FailurePolicy``. Nothing
    propagates to the host.
"""
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from graph_api.models.data_view import DataView, VisualUpdateOptions
from graph_api.models.graph import Graph
from graph_api.models.node import Node
from graph_api.plugins.base import DataSourcePlugin, LayoutPlugin, SelectionIdBuilder, TextMeasurer
from graph_api.types import Role

from .collaborators import ApproximateTextMeasurer, RowSelectionIdBuilder
from .config import FailurePolicy, VisualConfig
from .plugin_loader import PluginLoader, create_data_source_loader, create_layout_loader
from .session import VisualSession
from .services.column_accessor import ColumnAccessor
from .services.edge_projector import EdgeProjector
from .services.graph_assembler import AssemblyResult, GraphAssembler
from .services.node_projector import NodeProjector
from .services.role_resolver import RoleResolver

logger = logging.getLogger(__name__)


# ── Observer event types ─────────────────────────────────────────
EVENT_GRAPH_REBUILT = "graph_rebuilt"
EVENT_UPDATE_DEBOUNCED = "update_debounced"
EVENT_UPDATE_FAILED = "update_failed"
EVENT_SESSION_RESET = "session_reset"
EVENT_NODE_SELECTED = "node_selected"


class UpdateStatus(Enum):
    RENDERED = "rendered"
    DEBOUNCED = "debounced"
    NO_DATA = "no_data"
    FAILED = "failed"


@dataclass
class UpdateResult:
    """
    Value object returned by every update / rebuild.

    Attributes:
        success:  Whether the graph was rebuilt.
        status:   What happened to the update.
        message:  Human-readable summary.
        graph:    The live graph after the update.
        data:     Structured details (assembly counts, failing stage).
        error:    The exception behind a FAILED update.
    """
    success: bool
    status: UpdateStatus
    message: str
    graph: Optional[Graph] = None
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[BaseException] = None


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class GraphVisual:
    """
    One visual instance: owns a session and rebuilds its graph from
    every data view the debounce lets through.

    Usage:
        visual = GraphVisual()
        result = visual.update(VisualUpdateOptions([data_view]))
        result = visual.rebuild(data_view)      # bypasses the debounce
    """

    def __init__(self,
                 config: Optional[VisualConfig] = None,
                 text_measurer: Optional[TextMeasurer] = None,
                 builder_factory: Optional[Callable[[], SelectionIdBuilder]] = None,
                 layout: Optional[LayoutPlugin] = None,
                 clock: Optional[Callable[[], float]] = None,
                 graph: Optional[Graph] = None):
        """
        Args:
            config:          Visual configuration.
            text_measurer:   Measures node labels (defaults to an estimate from the font size).
            builder_factory: Returns fresh selection-id builders.
            layout:          Layout plugin; when omitted the one named by
                             ``config.default_layout`` is discovered.
            clock:           Current time in milliseconds, for the debounce.
            graph:           Live graph to draw into (a new one by default).
        """
        self._config: VisualConfig = config or VisualConfig()
        self._measurer = text_measurer or ApproximateTextMeasurer()
        self._builder_factory = builder_factory or RowSelectionIdBuilder
        self._layout = layout
        self._clock = clock or _monotonic_ms

        self._ds_loader: PluginLoader[DataSourcePlugin] = create_data_source_loader()
        self._layout_loader: PluginLoader[LayoutPlugin] = create_layout_loader()

        self._session = VisualSession(graph, self._config.debounce_delay_ms)
        self._role_resolver = RoleResolver()
        self._node_projector = NodeProjector(self._builder_factory)
        self._edge_projector = EdgeProjector()

        # Observer listeners: event_name → [callback, ...]
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

        logger.info("GraphVisual initialized (session %s).", self._session.session_id[:8])

    # ── Properties ───────────────────────────────────────────────

    @property
    def config(self) -> VisualConfig:
        return self._config

    @property
    def session(self) -> VisualSession:
        return self._session

    @property
    def graph(self) -> Graph:
        return self._session.graph

    # ── Update entry points ──────────────────────────────────────

    def update(self, options: Optional[VisualUpdateOptions]) -> UpdateResult:
        """
        Handle an update notification from the host.

        The debounce runs first; an admitted notification without a
        categorical data view leaves the graph as it is.
        """
        if not self._session.gate.admit(self._clock()):
            logger.debug("Update debounced (deadline %s).", self._session.gate.deadline)
            self._notify(EVENT_UPDATE_DEBOUNCED, deadline=self._session.gate.deadline)
            return UpdateResult(False, UpdateStatus.DEBOUNCED, "Update debounced.", self.graph)

        if options is None or options.data_view is None:
            return UpdateResult(False, UpdateStatus.NO_DATA, "No data view.", self.graph)

        if options.viewport is not None:
            self._session.viewport = options.viewport

        data_view = options.data_view
        if not data_view.has_categories():
            return UpdateResult(False, UpdateStatus.NO_DATA, "Data view has no categories.", self.graph)

        return self.rebuild(data_view)

    def rebuild(self, data_view: DataView) -> UpdateResult:
        """
        Project the data view and rebuild the graph from scratch.
        Never raises; failures come back as a FAILED result.
        """
        session = self._session
        try:
            role_map = self._role_resolver.resolve(data_view.columns)
            accessor = ColumnAccessor(data_view, role_map)
            node_ids = accessor.get_role_values(Role.NODE_ID)
            nodes_source = self._node_projector.execute(accessor)
            edges_source = self._edge_projector.execute(accessor)
            edge_labels = accessor.get_role_values(Role.EDGE_LABEL)
        except Exception as exc:
            return self._fail(exc, "projection", snapshot=None)

        snapshot = None
        stage = "snapshot"
        try:
            snapshot = session.snapshot()
            stage = "assembly"
            session.graph.clear()
            assembly = self._create_assembler().assemble(nodes_source, edges_source, edge_labels)
            stage = "layout"
            self._arrange()
        except Exception as exc:
            return self._fail(exc, stage, snapshot=snapshot)

        session.data_view = data_view
        session.role_map = role_map
        session.node_ids = node_ids
        session.nodes_source = nodes_source
        session.edges_source = edges_source

        logger.info("Graph rebuilt: %d nodes, %d edges (%d dropped).",
                    assembly.nodes_created, assembly.edges_created, assembly.edges_skipped)
        self._notify(EVENT_GRAPH_REBUILT, graph=session.graph, result=assembly)
        return UpdateResult(
            True,
            UpdateStatus.RENDERED,
            f"Rendered {assembly.nodes_created} nodes and {assembly.edges_created} edges.",
            session.graph,
            data=assembly.to_dict(),
        )

    def reset(self) -> None:
        """Clear the graph, the cached sources and the debounce."""
        self._session.reset()
        self._notify(EVENT_SESSION_RESET, session=self._session)

    # ── Data sources ─────────────────────────────────────────────

    def get_data_source_names(self) -> List[str]:
        return self._ds_loader.get_names()

    def register_data_source(self, name: str, plugin: DataSourcePlugin) -> None:
        self._ds_loader.register(name, plugin)

    def load_data_view(self, plugin_name: str, file_path: str) -> DataView:
        """
        Load a data view through a data-source plugin.

        Raises:
            ValueError: If the plugin is not found.
        """
        plugin = self._ds_loader.get(plugin_name)
        if plugin is None:
            raise ValueError(
                f"Data source plugin '{plugin_name}' not found. "
                f"Available: {self._ds_loader.get_names()}"
            )
        data_view = plugin.parse(file_path)
        logger.info("Data view loaded via '%s' from '%s' (%d rows).",
                    plugin_name, file_path, data_view.row_count)
        return data_view

    def load_and_rebuild(self, plugin_name: str, file_path: str) -> UpdateResult:
        return self.rebuild(self.load_data_view(plugin_name, file_path))

    # ── Layout ───────────────────────────────────────────────────

    def register_layout(self, name: str, plugin: LayoutPlugin) -> None:
        self._layout_loader.register(name, plugin)

    def get_layout(self) -> Optional[LayoutPlugin]:
        if self._layout is not None:
            return self._layout
        return self._layout_loader.get(self._config.default_layout)

    def _arrange(self) -> None:
        if self.graph.is_empty():
            return
        layout = self.get_layout()
        if layout is None:
            logger.warning("Layout plugin '%s' not found; graph left unarranged.",
                           self._config.default_layout)
            return
        layout.arrange(self.graph, self._config.layout)

    # ── Selection ────────────────────────────────────────────────

    def find_node(self, item_id: str) -> Optional[Node]:
        """The rendered node whose source record has the given id."""
        for node in self.graph.get_all_nodes():
            if getattr(node.tag, 'id', None) == item_id:
                return node
        return None

    def select_node(self, item_id: str) -> None:
        """
        Signal that a node has been selected; subscribers receive the
        node and the selection identity of its representative row.
        """
        node = self.find_node(item_id)
        if node is not None:
            self._notify(EVENT_NODE_SELECTED, node=node, identity=node.tag.identity)

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for a visual event.

        Events:
            - graph_rebuilt
            - update_debounced
            - update_failed
            - session_reset
            - node_selected
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove a previously registered callback."""
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire all callbacks registered for the given event."""
        for cb in self._listeners.get(event, []):
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)

    # ── Internal helpers ─────────────────────────────────────────

    def _create_assembler(self) -> GraphAssembler:
        return GraphAssembler(
            self.graph,
            self._measurer,
            self._config.node_style,
            self._session.viewport or self._config.viewport,
            self._config.edge_label_ratio,
        )

    def _fail(self, exc: Exception, stage: str, snapshot: Optional[Graph]) -> UpdateResult:
        logger.error("Update failed during %s: %s", stage, exc)
        self._notify(EVENT_UPDATE_FAILED, error=exc, stage=stage)

        # without a snapshot the live graph was never cleared and stays as it is
        if snapshot is not None:
            if self._config.failure_policy is FailurePolicy.SHOW_NOTHING:
                self._session.graph.clear()
                self._session.clear_sources()
            else:
                self._session.restore(snapshot)

        return UpdateResult(
            False,
            UpdateStatus.FAILED,
            f"Update failed during {stage}: {exc}",
            self.graph,
            data={'stage': stage, 'policy': self._config.failure_policy.value},
            error=exc,
        )

    def __repr__(self) -> str:
        return (
            f"GraphVisual(session={self._session.session_id[:8]}, "
            f"nodes={self.graph.get_number_of_nodes()}, "
            f"edges={self.graph.get_number_of_edges()})"
        )
