"""
    VisualSession — the state one graph visual keeps between updates.

    Design Pattern: Memento (simplified)
    ─────────────────────────────────────
    Before a rebuild clears the live graph, the session takes a snapshot
    of it so a failed rebuild can put the previous render back.

    Each session holds:
        • graph          – the live graph, one instance for the whole session
        • gate           – the update debounce
        • viewport       – the last viewport reported by the host
        • role_map       – role bindings of the last projection
        • nodes_source   – node records of the last projection
        • edges_source   – edge records of the last projection
        • data_view      – the last data view that was projected
"""
import logging
import uuid
from typing import List, Optional

from graph_api.models.data_view import DataView
from graph_api.models.geometry import Size
from graph_api.models.graph import Graph

from .services.role_resolver import RoleMap
from .services.source_items import EdgeSourceItem, NodeSourceItem
from .services.update_gate import UpdateGate

logger = logging.getLogger(__name__)


class VisualSession:

    def __init__(self, graph: Optional[Graph] = None, debounce_delay_ms: float = 1000.0):
        self.session_id: str = str(uuid.uuid4())
        self.graph: Graph = graph if graph is not None else Graph(f"visual-{self.session_id[:8]}")
        self.gate = UpdateGate(debounce_delay_ms)
        self.viewport: Optional[Size] = None

        self.role_map: Optional[RoleMap] = None
        self.node_ids: Optional[List[Optional[str]]] = None
        self.nodes_source: List[NodeSourceItem] = []
        self.edges_source: List[EdgeSourceItem] = []
        self.data_view: Optional[DataView] = None

    # ── Snapshot management ──────────────────────────────────────

    def snapshot(self) -> Graph:
        """Structural copy of the live graph as it is now; tags are shared."""
        return self.graph.copy()

    def restore(self, snapshot: Graph) -> None:
        """Put a snapshot back into the live graph instance."""
        self.graph.restore(snapshot)
        logger.info("Session %s: previous graph restored (%d nodes)",
                    self.session_id[:8], self.graph.get_number_of_nodes())

    # ── Lifecycle ────────────────────────────────────────────────

    def clear_sources(self) -> None:
        self.role_map = None
        self.node_ids = None
        self.nodes_source = []
        self.edges_source = []

    def reset(self) -> None:
        """Forget everything: empty graph, no cached sources, idle gate."""
        self.graph.clear()
        self.gate.reset()
        self.clear_sources()
        self.data_view = None
        logger.info("Session %s: reset", self.session_id[:8])

    def to_dict(self) -> dict:
        """Serialize session metadata (not the full graph)."""
        return {
            'session_id': self.session_id,
            'graph_id': self.graph.graph_id,
            'nodes': self.graph.get_number_of_nodes(),
            'edges': self.graph.get_number_of_edges(),
            'roles': self.role_map.to_dict() if self.role_map is not None else {},
            'gate': self.gate.state.value,
        }

    def __repr__(self) -> str:
        return (
            f"VisualSession(id={self.session_id[:8]}, "
            f"nodes={self.graph.get_number_of_nodes()}, "
            f"edges={self.graph.get_number_of_edges()})"
        )
