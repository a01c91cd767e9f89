"""
    Graph model - the live diagram model.
    Nodes and edges are created through the graph so it can hand out ids.
"""
from typing import Any, Dict, List, Optional
from .geometry import Point, Rect
from .label import Label, LabelParameter
from .node import Node
from .edge import Edge


class Graph:
    """
        Class for the diagram graph.
        Owns its nodes, edges and their labels; directed edges only.
    """

    def __init__(self, graph_id: str):
        """
        Initialize a graph.
        Args:
            graph_id: Unique identifier of the graph
        """
        self.graph_id = graph_id
        self.nodes: Dict[str, Node] = {}  # node_id -> Node
        self.edges: Dict[str, Edge] = {}  # edge_id -> Edge
        self._adjacency_list: Dict[str, List[Edge]] = {}  # node_id -> [Edges]
        self._node_counter = 0
        self._edge_counter = 0

    # ── Creation ─────────────────────────────────────────────────

    def create_node(self, layout: Rect, tag: Any = None, style: Optional[str] = None) -> Node:
        """Create a node with the given bounds and add it to the graph"""
        node = Node(f"n{self._node_counter}", layout, tag=tag, style=style)
        self._node_counter += 1
        self.nodes[node.node_id] = node
        self._adjacency_list[node.node_id] = []
        return node

    def create_edge(self, source: Node, target: Node, tag: Any = None,
                    style: Optional[str] = None) -> Edge:
        """Create a directed edge between two nodes of this graph"""
        self._check_node(source, "Source node")
        self._check_node(target, "Target node")

        edge = Edge(f"e{self._edge_counter}", source, target, tag=tag, style=style)
        self._edge_counter += 1
        self.edges[edge.edge_id] = edge

        self._adjacency_list[source.node_id].append(edge)
        if source.node_id != target.node_id:
            self._adjacency_list[target.node_id].append(edge)
        return edge

    def add_label(self, owner, text: str, parameter: LabelParameter) -> Label:
        """Attach a label to a node or an edge of this graph"""
        if isinstance(owner, Node):
            self._check_node(owner)
            owner_id = owner.node_id
        elif isinstance(owner, Edge):
            self._check_edge(owner)
            owner_id = owner.edge_id
        else:
            raise TypeError(f"Labels can only be added to nodes or edges, not {type(owner).__name__}")

        label = Label(text, parameter, owner_id)
        owner.labels.append(label)
        return label

    # ── Mutation ─────────────────────────────────────────────────

    def set_node_layout(self, node: Node, layout: Rect) -> None:
        self._check_node(node)
        node.layout = layout

    def set_edge_bends(self, edge: Edge, bends: List[Point]) -> None:
        self._check_edge(edge)
        edge.bends = list(bends)

    def clear(self) -> None:
        """Remove every node and edge; ids restart from zero"""
        self.nodes.clear()
        self.edges.clear()
        self._adjacency_list.clear()
        self._node_counter = 0
        self._edge_counter = 0

    def copy(self) -> 'Graph':
        """
        Structural copy for snapshots: new node, edge and label objects with
        the same ids, layouts and bends. Tags are shared, not copied.
        """
        duplicate = Graph(self.graph_id)
        for node in self.nodes.values():
            twin = Node(node.node_id, node.layout, tag=node.tag, style=node.style)
            twin.labels = [Label(l.text, l.parameter, l.owner_id) for l in node.labels]
            duplicate.nodes[twin.node_id] = twin
            duplicate._adjacency_list[twin.node_id] = []

        for edge in self.edges.values():
            source = duplicate.nodes[edge.source_node.node_id]
            target = duplicate.nodes[edge.target_node.node_id]
            twin = Edge(edge.edge_id, source, target, tag=edge.tag, style=edge.style)
            twin.labels = [Label(l.text, l.parameter, l.owner_id) for l in edge.labels]
            twin.bends = list(edge.bends)
            duplicate.edges[twin.edge_id] = twin
            duplicate._adjacency_list[source.node_id].append(twin)
            if source is not target:
                duplicate._adjacency_list[target.node_id].append(twin)

        duplicate._node_counter = self._node_counter
        duplicate._edge_counter = self._edge_counter
        return duplicate

    def restore(self, snapshot: 'Graph') -> None:
        """
        Replace the content of this graph with the content of a snapshot
        (typically one taken with ``copy``), keeping this instance.
        """
        self.nodes = snapshot.nodes
        self.edges = snapshot.edges
        self._adjacency_list = snapshot._adjacency_list
        self._node_counter = snapshot._node_counter
        self._edge_counter = snapshot._edge_counter

    # ── Queries ──────────────────────────────────────────────────

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_all_nodes(self) -> List[Node]:
        return list(self.nodes.values())

    def get_all_edges(self) -> List[Edge]:
        return list(self.edges.values())

    def get_outgoing_edges(self, node: Node) -> List[Edge]:
        return [e for e in self._adjacency_list.get(node.node_id, []) if e.source_node == node]

    def get_incoming_edges(self, node: Node) -> List[Edge]:
        return [e for e in self._adjacency_list.get(node.node_id, []) if e.target_node == node]

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.nodes

    # ── Membership ───────────────────────────────────────────────

    def _check_node(self, node: Node, role: str = "Node") -> None:
        """The node must be this graph's own instance, not only share its id"""
        if self.nodes.get(node.node_id) is not node:
            raise ValueError(f"{role} {node.node_id} not in graph")

    def _check_edge(self, edge: Edge) -> None:
        if self.edges.get(edge.edge_id) is not edge:
            raise ValueError(f"Edge {edge.edge_id} not in graph")

    def __repr__(self) -> str:
        return f"Graph({self.graph_id}, nodes={len(self.nodes)}, edges={len(self.edges)})"

    def to_dict(self) -> Dict:
        return {
            'id': self.graph_id,
            'nodes': [node.to_dict() for node in self.nodes.values()],
            'edges': [edge.to_dict() for edge in self.edges.values()]
        }
