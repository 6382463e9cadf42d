"""
Pointer-drag handling for nodes.

A drag gesture is a press, any number of moves and a release. The controller
turns screen-space pointer deltas into layout position updates, honoring the
owning graph's draggable flag and dividing by its scale factors so a node
follows the pointer at any zoom level.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING

from .exceptions import NodeNotAttachedError

if TYPE_CHECKING:
    from .node import GraphNode

log = logging.getLogger(__name__)


class DragPhase(IntEnum):
    """
    Drag controller states:
    - idle: no gesture in progress, the next pointer event starts one
    - dragging: a gesture is in progress and moves translate the node
    """
    idle = 0
    dragging = 1


class DragState:
    """
    Per-node state for one drag gesture.

    Attributes:
        valid: True while a gesture is in progress
        last_x: Screen x of the previous pointer event
        last_y: Screen y of the previous pointer event
    """

    def __init__(self):
        self.valid: bool = False
        self.last_x: float = 0.0
        self.last_y: float = 0.0

    def delta_x(self, screen_x: float) -> float:
        """
        Previous minus current screen x, then remember current.

        Dragging to the right therefore yields a negative delta.
        """
        delta = self.last_x - screen_x
        self.last_x = screen_x
        return delta

    def delta_y(self, screen_y: float) -> float:
        """Previous minus current screen y, then remember current."""
        delta = self.last_y - screen_y
        self.last_y = screen_y
        return delta

    def record(self, screen_x: float, screen_y: float) -> None:
        self.last_x = screen_x
        self.last_y = screen_y


class DragController:
    """
    Translates pointer events into moves of a node's pane.

    The controller holds a back-reference to its node and reads the node's
    graph and pane on every event, so it follows pane replacement and
    attach/detach without being rebuilt.
    """

    def __init__(self, node: GraphNode):
        self.node = node
        self.state = DragState()

    @property
    def phase(self) -> DragPhase:
        return DragPhase.dragging if self.state.valid else DragPhase.idle

    def press(self, screen_x: float, screen_y: float) -> None:
        """
        Start a gesture at the given pointer position.

        The node does not move on press.
        """
        self.state.valid = True
        self.state.record(screen_x, screen_y)
        log.debug("drag start on %r at (%s, %s)", self.node, screen_x, screen_y)

    def drag(self, screen_x: float, screen_y: float) -> bool:
        """
        Handle a pointer move.

        The in-progress gesture is cancelled for this event if the owning
        graph is not draggable; the pointer position is still recorded so
        dragging resumes smoothly once the graph allows it again.

        Args:
            screen_x: Pointer x in screen coordinates
            screen_y: Pointer y in screen coordinates

        Returns:
            True if the node was moved

        Raises:
            NodeNotAttachedError: if a gesture is in progress and the node
                has no graph to read scale factors from
        """
        state = self.state
        graph = self.node.graph
        if graph is not None:
            state.valid = state.valid and graph.is_draggable()

        if not state.valid:
            state.valid = True
            state.record(screen_x, screen_y)
            return False

        if graph is None:
            raise NodeNotAttachedError(
                f"{self.node!r} must be attached to a graph before it can be dragged"
            )

        dx = state.delta_x(screen_x) / graph.scale_x
        dy = state.delta_y(screen_y) / graph.scale_y

        pane = self.node.pane
        pane.layout_x = pane.layout_x - dx
        pane.layout_y = pane.layout_y - dy
        return True

    def release(self) -> None:
        """End the gesture unconditionally."""
        if self.state.valid:
            log.debug("drag end on %r", self.node)
        self.state.valid = False

    def reset(self) -> None:
        """Forget any gesture in progress and the last pointer position."""
        self.state = DragState()
