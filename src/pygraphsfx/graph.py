"""
Graph container: node ownership and edge reconciliation.

This module implements the Graph class which provides:
- Node attach/detach with name-ordered listing
- Edge creation/removal driven by node adjacency changes
- Draggability and zoom scale queried by the drag controller
- Event system (node/edge added and removed, node renamed)
- Array snapshots of centers and edge segments for renderers
"""

from __future__ import annotations

import logging
import math
from enum import IntEnum
from typing import Callable, Iterator, Optional, Sequence, TypedDict, Union
import numpy as np

from .exceptions import NodeOwnershipError
from .node import GraphNode
from .node_index import NodeIndex
from .observable import DerivedValue

log = logging.getLogger(__name__)


class GraphEventType(IntEnum):
    """
    The graph fires five events:
    - node_added: a node was attached with add_node
    - node_removed: a node was detached with remove_node
    - node_renamed: an attached node changed its name
    - edge_added: an edge was created for a new adjacency
    - edge_removed: an edge was removed for a dropped adjacency
    """
    node_added = 0
    node_removed = 1
    node_renamed = 2
    edge_added = 3
    edge_removed = 4


class GraphEvent(TypedDict, total=False):
    """Event dictionary passed to event listeners."""
    type: GraphEventType
    node: Optional[GraphNode]
    edge: Optional[Edge]


class Edge:
    """
    Directed connection between two nodes.

    The endpoint coordinates are bound to the node centers, so a renderer
    listening on them is told whenever either node moves.

    Attributes:
        source: Node the edge starts at
        target: Node the edge ends at
    """

    def __init__(self, source: GraphNode, target: GraphNode):
        self.source = source
        self.target = target
        self.start_x = DerivedValue(
            lambda: source.center_x, [source.center_x_property], name="start_x"
        )
        self.start_y = DerivedValue(
            lambda: source.center_y, [source.center_y_property], name="start_y"
        )
        self.end_x = DerivedValue(
            lambda: target.center_x, [target.center_x_property], name="end_x"
        )
        self.end_y = DerivedValue(
            lambda: target.center_y, [target.center_y_property], name="end_y"
        )

    @property
    def key(self) -> tuple[GraphNode, GraphNode]:
        return (self.source, self.target)

    def segment(self) -> tuple[float, float, float, float]:
        """Current endpoints as (x1, y1, x2, y2)."""
        return (self.start_x.get(), self.start_y.get(), self.end_x.get(), self.end_y.get())

    def dispose(self) -> None:
        """Stop tracking the node centers."""
        for value in (self.start_x, self.start_y, self.end_x, self.end_y):
            value.dispose()

    def __repr__(self) -> str:
        return f"Edge({self.source!r} -> {self.target!r})"


GraphListener = Callable[[GraphEvent], None]


class Graph:
    """
    Owner of nodes and edges.

    Edges are never created or removed on the graph's own initiative: nodes
    report adjacency changes and the graph mirrors them. Configuration uses
    a fluent API where calling a setter without arguments returns the
    current value.
    """

    def __init__(
        self,
        draggable: bool = True,
        scale: Sequence[float] = (1.0, 1.0)
    ):
        """Initialize an empty graph."""
        self._draggable: bool = bool(draggable)
        self._scale: list[float] = self._check_scale(scale)
        self._nodes = NodeIndex()
        self._edges: dict[tuple[GraphNode, GraphNode], Edge] = {}

        # Event system - can be overridden by subclasses
        self.event: Optional[dict[GraphEventType, list[GraphListener]]] = None

    # Events ------------------------------------------------------------------

    def on(self, e: Union[GraphEventType, str], listener: GraphListener) -> Graph:
        """
        Subscribe a listener to an event.

        Args:
            e: Event type (GraphEventType enum or string name)
            listener: Function to call when event fires

        Returns:
            self for method chaining
        """
        if self.event is None:
            self.event = {}

        event_type = GraphEventType[e] if isinstance(e, str) else e
        self.event.setdefault(event_type, []).append(listener)
        return self

    def trigger(self, e: GraphEvent) -> None:
        """
        Trigger an event by calling registered listeners in subscription order.

        Args:
            e: Event to trigger
        """
        if self.event and e['type'] in self.event:
            for listener in list(self.event[e['type']]):
                listener(e)

    # Configuration -----------------------------------------------------------

    def draggable(self, v: Optional[bool] = None) -> Union[bool, Graph]:
        """
        Get or set whether nodes of this graph may be dragged.

        Args:
            v: New flag, or None to read

        Returns:
            Current flag if v is None, otherwise self for chaining
        """
        if v is None:
            return self._draggable
        self._draggable = bool(v)
        return self

    def is_draggable(self) -> bool:
        return self._draggable

    def scale(self, v: Optional[Sequence[float]] = None) -> Union[list[float], Graph]:
        """
        Get or set the [x, y] zoom scale of the view showing this graph.

        Raises:
            ValueError: if a factor is not a positive finite number
        """
        if v is None:
            return list(self._scale)
        self._scale = self._check_scale(v)
        return self

    @property
    def scale_x(self) -> float:
        return self._scale[0]

    @property
    def scale_y(self) -> float:
        return self._scale[1]

    @staticmethod
    def _check_scale(v: Sequence[float]) -> list[float]:
        if len(v) != 2:
            raise ValueError(f"scale needs two factors, got {len(v)}")
        sx, sy = float(v[0]), float(v[1])
        for factor in (sx, sy):
            if not math.isfinite(factor) or factor <= 0:
                raise ValueError(f"scale factor must be positive and finite, got {factor}")
        return [sx, sy]

    # Nodes -------------------------------------------------------------------

    def add_node(self, node: GraphNode) -> bool:
        """
        Attach node to this graph.

        Adjacencies the node already has are not turned into edges; only
        adjacency changes made while attached are.

        Returns:
            False if node is already attached to this graph

        Raises:
            NodeOwnershipError: if node belongs to another graph
        """
        if node in self._nodes:
            return False
        if node.graph is not None and node.graph is not self:
            raise NodeOwnershipError(f"{node!r} already belongs to another graph")

        node.graph = self
        self._nodes.add(node)
        log.debug("attached %r", node)
        self.trigger({'type': GraphEventType.node_added, 'node': node})
        return True

    def remove_node(self, node: GraphNode) -> bool:
        """
        Detach node, dropping every adjacency into or out of it.

        The adjacency removals go through the nodes, so the matching edges
        disappear through the usual event path before the node is detached.
        The back-reference is cleared only if it still points at this graph.
        A node whose reference was cleared by hand and then renamed keeps a
        stale position in `nodes` until the next reindex.

        Returns:
            False if node is not attached to this graph
        """
        if node not in self._nodes:
            return False

        for other in list(node.adjacencies):
            node.remove_adjacency(other)
        for other in list(self._nodes):
            if node in other.adjacencies:
                other.remove_adjacency(node)

        # Edges created directly on the graph, not through adjacency
        for key in [k for k in self._edges if node in k]:
            self.remove_edge_unidirectional(*key)

        self._nodes.remove(node)
        if node.graph is self:
            node.graph = None
        log.debug("detached %r", node)
        self.trigger({'type': GraphEventType.node_removed, 'node': node})
        return True

    def node_name_changed(self) -> None:
        """Re-sort nodes after an attached node was renamed."""
        self._nodes.reindex()
        self.trigger({'type': GraphEventType.node_renamed})

    @property
    def nodes(self) -> list[GraphNode]:
        """Attached nodes ordered by name."""
        return list(self._nodes)

    def find_node(self, name: Optional[str]) -> Optional[GraphNode]:
        return self._nodes.find(name)

    def connect(self, a: GraphNode, b: GraphNode, bidirectional: bool = False) -> None:
        """Make b adjacent to a, and a to b if bidirectional."""
        if bidirectional:
            a.add_bidirectional_adjacency(b)
        else:
            a.add_adjacency(b)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    # Edges -------------------------------------------------------------------

    def create_edge_unidirectional(self, source: GraphNode, target: GraphNode) -> Edge:
        """
        Create the edge source -> target.

        Returns:
            The new edge, or the existing one if it is already present
        """
        key = (source, target)
        edge = self._edges.get(key)
        if edge is not None:
            return edge

        edge = Edge(source, target)
        self._edges[key] = edge
        log.debug("created %r", edge)
        self.trigger({'type': GraphEventType.edge_added, 'edge': edge})
        return edge

    def remove_edge_unidirectional(self, source: GraphNode, target: GraphNode) -> bool:
        """
        Remove the edge source -> target.

        Returns:
            False if there was no such edge
        """
        edge = self._edges.pop((source, target), None)
        if edge is None:
            return False

        edge.dispose()
        log.debug("removed %r", edge)
        self.trigger({'type': GraphEventType.edge_removed, 'edge': edge})
        return True

    @property
    def edges(self) -> list[Edge]:
        """Edges in creation order."""
        return list(self._edges.values())

    def get_edge(self, source: GraphNode, target: GraphNode) -> Optional[Edge]:
        return self._edges.get((source, target))

    def has_edge(self, source: GraphNode, target: GraphNode) -> bool:
        return (source, target) in self._edges

    # Renderer snapshots ------------------------------------------------------

    def center_array(self) -> np.ndarray:
        """
        Node centers as an (n, 2) array in node order.

        Returns:
            Array of [center_x, center_y] rows
        """
        centers = [(n.center_x, n.center_y) for n in self._nodes]
        return np.array(centers, dtype=float).reshape(-1, 2)

    def edge_segments(self) -> np.ndarray:
        """
        Edge endpoints as an (m, 4) array in edge order.

        Returns:
            Array of [x1, y1, x2, y2] rows
        """
        segments = [e.segment() for e in self._edges.values()]
        return np.array(segments, dtype=float).reshape(-1, 4)
