"""
    Visual configuration — node sizing, layout distances, debounce window.

    Provides typed configuration objects that control how a data view is
    projected, how nodes are sized around their labels, how the layout
    collaborator spaces things out and what happens when an update fails.
"""
from dataclasses import dataclass, field
from enum import Enum

from graph_api.models.geometry import Size
from graph_api.models.label import Font


class FailurePolicy(Enum):
    """What the graph shows after a failed rebuild"""
    KEEP_PREVIOUS = "keep_previous"
    SHOW_NOTHING = "show_nothing"


@dataclass
class NodeStyleConfig:
    """
    Controls node placement and sizing.

    Attributes:
        default_size:  Size of a freshly created node, before it is fitted to its label.
        label_margin:  Added to the measured label width and height.
        font:          Font the main label is rendered and measured with.
    """
    default_size: Size = field(default_factory=lambda: Size(30.0, 30.0))
    label_margin: float = 15.0
    font: Font = field(default_factory=Font)


@dataclass
class LayoutConfig:
    """
    Controls the organic layout and the edge router that follows it.

    Attributes:
        min_node_distance:    Minimum distance between node centres.
        min_edge_distance:    Spacing between parallel edges of the same node pair.
        keep_existing_bends:  Whether bends from a previous routing survive.
        route_all_edges:      Route every edge, not only the ones without bends.
        iterations:           Iterations of the force-directed placement.
        seed:                 Random seed so equal graphs get equal layouts.
    """
    min_node_distance: float = 150.0
    min_edge_distance: float = 50.0
    keep_existing_bends: bool = False
    route_all_edges: bool = True
    iterations: int = 50
    seed: int = 42


@dataclass
class VisualConfig:
    """
    Top-level configuration of a graph visual.

    Attributes:
        debounce_delay_ms:  Cooldown window of the update gate.
        viewport:           Size of the drawing surface; new nodes start at its centre.
        node_style:         Node sizing settings.
        layout:             Layout settings handed to the layout plugin.
        edge_label_ratio:   Where along the edge an edge label sits (0.5 = midpoint).
        failure_policy:     Whether a failed rebuild keeps the previous render.
        default_layout:     Entry-point name of the layout plugin to use.
    """
    debounce_delay_ms: float = 1000.0
    viewport: Size = field(default_factory=lambda: Size(800.0, 600.0))
    node_style: NodeStyleConfig = field(default_factory=NodeStyleConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    edge_label_ratio: float = 0.5
    failure_policy: FailurePolicy = FailurePolicy.KEEP_PREVIOUS
    default_layout: str = "organic"
