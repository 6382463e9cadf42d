"""
Geometry binding for node centers.

The center of a node is derived from its pane: the top-left layout position
plus half of the measured size, or half of the preferred size while the pane
has not been measured yet. Edges anchor on this center.
"""

from __future__ import annotations

from .observable import DerivedValue
from .pane import Pane


class Point:
    """2D point."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


def half_extent(measured: float, preferred: float) -> float:
    """
    Half of a pane extent, falling back to the preferred extent.

    Args:
        measured: Measured width or height (0 when not yet measured)
        preferred: Preferred width or height

    Returns:
        Half of measured if it is positive, otherwise half of preferred
    """
    return (measured if measured > 0 else preferred) / 2


class CenterBinding:
    """
    Read-only center coordinates bound to a pane.

    x is invalidated by changes of layout_x only and y by changes of layout_y
    only. Resizing a pane without moving it leaves an already computed center
    untouched; the new size is picked up on the next move.
    """

    def __init__(self, pane: Pane):
        self.pane = pane
        self.x = DerivedValue(
            self._compute_x, [pane.layout_x_property], name="center_x"
        )
        self.y = DerivedValue(
            self._compute_y, [pane.layout_y_property], name="center_y"
        )

    def _compute_x(self) -> float:
        return self.pane.layout_x + half_extent(self.pane.width, self.pane.pref_width)

    def _compute_y(self) -> float:
        return self.pane.layout_y + half_extent(self.pane.height, self.pane.pref_height)

    def rebind(self, pane: Pane) -> None:
        """Track a different pane, keeping the same center observables."""
        self.pane = pane
        self.x.rebind([pane.layout_x_property])
        self.y.rebind([pane.layout_y_property])

    def point(self) -> Point:
        return Point(self.x.get(), self.y.get())
