"""
Graph node: identity, adjacency set, center binding and drag handling.

A GraphNode owns a Pane (what the renderer draws), a Label, a set of
adjacent nodes and the geometry/drag helpers. Changes to the adjacency set
are forwarded to the owning graph, which turns them into edges.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .drag import DragController
from .geometry import CenterBinding, Point
from .observable import DerivedValue, ObservableSet, ObservableValue, SetChange, SetView
from .pane import Label, Pane, PaneTheme

if TYPE_CHECKING:
    from .graph import Graph


class GraphNode:
    """
    Vertex of a Graph.

    Nodes hash by identity, so two nodes with the same label are distinct
    members of an adjacency set.

    Attributes:
        label: Label shown next to the pane
        drag_controller: Pointer-drag handler for this node
    """

    def __init__(
        self,
        label: str,
        pane: Optional[Pane] = None,
        theme: Optional[PaneTheme] = None
    ):
        """
        Initialize node.

        Args:
            label: Text for the node's label
            pane: Pane to render the node with; a themed pane is created
                when omitted
            theme: Theme for the default pane, ignored when pane is given
        """
        self.label = Label(label)
        self._pane = pane if pane is not None else Pane.themed(theme)
        self._graph: Optional[Graph] = None

        self._name: ObservableValue[Optional[str]] = ObservableValue(None, "name")
        self._name.add_listener(self._on_name_changed)

        self._adjacencies: ObservableSet[GraphNode] = ObservableSet()
        self._adjacencies.add_listener(self._on_adjacency_changed)

        self._center = CenterBinding(self._pane)
        self.drag_controller = DragController(self)

    # Adjacency ---------------------------------------------------------------

    def add_adjacency(self, node: GraphNode) -> None:
        """Add node to the adjacency set. No-op if already present."""
        self._adjacencies.add(node)

    def add_bidirectional_adjacency(self, node: GraphNode) -> None:
        """
        Add node to this adjacency set and this node to node's set.

        The graph observes this node's addition first, then node's.
        """
        self.add_adjacency(node)
        node.add_adjacency(self)

    def remove_adjacency(self, node: GraphNode) -> bool:
        """
        Remove node from the adjacency set.

        Returns:
            True if node was adjacent and has been removed
        """
        return self._adjacencies.remove(node)

    @property
    def adjacencies(self) -> SetView[GraphNode]:
        """Live read-only view of the adjacency set."""
        return self._adjacencies.view()

    def get_adjacencies(self) -> SetView[GraphNode]:
        return self.adjacencies

    def _on_adjacency_changed(self, change: SetChange[GraphNode]) -> None:
        graph = self._graph
        if graph is None:
            return
        if change.was_added:
            graph.create_edge_unidirectional(self, change.element)
        elif change.was_removed:
            graph.remove_edge_unidirectional(self, change.element)

    # Identity ----------------------------------------------------------------

    @property
    def name(self) -> Optional[str]:
        return self._name.get()

    @name.setter
    def name(self, name: Optional[str]) -> None:
        self._name.set(name)

    def set_name(self, name: Optional[str]) -> None:
        self.name = name

    def get_name(self) -> Optional[str]:
        return self.name

    def _on_name_changed(self, _source: ObservableValue) -> None:
        graph = self._graph
        if graph is not None:
            self.label.text = self.name or ""
            graph.node_name_changed()

    @property
    def label_text(self) -> str:
        return self.label.text

    # Graph back-reference ----------------------------------------------------

    @property
    def graph(self) -> Optional[Graph]:
        """Owning graph. Setting it performs no validation or reconciliation."""
        return self._graph

    @graph.setter
    def graph(self, graph: Optional[Graph]) -> None:
        self._graph = graph

    def set_graph(self, graph: Optional[Graph]) -> None:
        self.graph = graph

    def get_graph(self) -> Optional[Graph]:
        return self.graph

    # Pane and geometry -------------------------------------------------------

    @property
    def pane(self) -> Pane:
        return self._pane

    @pane.setter
    def pane(self, pane: Pane) -> None:
        self._pane = pane
        self._center.rebind(pane)
        self.drag_controller.reset()

    @property
    def position(self) -> Point:
        return Point(self._pane.layout_x, self._pane.layout_y)

    @property
    def center(self) -> Point:
        return self._center.point()

    @property
    def center_x(self) -> float:
        return self._center.x.get()

    @property
    def center_y(self) -> float:
        return self._center.y.get()

    @property
    def center_x_property(self) -> DerivedValue[float]:
        return self._center.x

    @property
    def center_y_property(self) -> DerivedValue[float]:
        return self._center.y

    # Drag --------------------------------------------------------------------

    def drag(self, screen_x: float, screen_y: float) -> bool:
        """Forward a pointer move to the drag controller."""
        return self.drag_controller.drag(screen_x, screen_y)

    def release(self) -> None:
        """Forward a pointer release to the drag controller."""
        self.drag_controller.release()

    def __repr__(self) -> str:
        return f"GraphNode({self.label_text!r})"
