"""
Renderer-facing panel and label.

A Pane is what an external renderer draws for a node. The model never draws;
it only keeps the layout position, the measured and preferred sizes and a
style hint the renderer can interpret.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .observable import ObservableValue


@dataclass(frozen=True)
class PaneTheme:
    """
    Default look for panes created without a caller-supplied pane.

    Attributes:
        width: Preferred width
        height: Preferred height, also used as the corner radius
        border_width: Border stroke width
        border_color: Border color
        background_color: Fill color
    """
    width: float = 20.0
    height: float = 20.0
    border_width: float = 3.0
    border_color: str = "#1565C0"
    background_color: str = "#E2E2E2"

    def style(self) -> str:
        """Render the theme as a style-hint string."""
        return (
            f"-fx-border-style: solid; -fx-border-radius: {self.height}"
            f"; -fx-background-radius: {self.height}"
            f"; -fx-border-width: {self.border_width}"
            f"; -fx-border-color: {self.border_color}"
            f"; -fx-background-color: {self.background_color}"
        )


DEFAULT_THEME = PaneTheme()


class Pane:
    """
    Rectangular panel with a top-left layout position.

    width and height stay 0 until the renderer measures the pane and calls
    resize(); until then consumers fall back to the preferred size.
    """

    def __init__(
        self,
        pref_width: float = 0.0,
        pref_height: float = 0.0,
        style: str = "",
        layout_x: float = 0.0,
        layout_y: float = 0.0
    ):
        self.layout_x_property = ObservableValue(float(layout_x), "layout_x")
        self.layout_y_property = ObservableValue(float(layout_y), "layout_y")
        self.width_property = ObservableValue(0.0, "width")
        self.height_property = ObservableValue(0.0, "height")
        self.pref_width = float(pref_width)
        self.pref_height = float(pref_height)
        self.style = style

    @classmethod
    def themed(cls, theme: Optional[PaneTheme] = None) -> Pane:
        """Create a pane sized and styled by theme (DEFAULT_THEME if None)."""
        theme = theme or DEFAULT_THEME
        return cls(theme.width, theme.height, theme.style())

    @property
    def layout_x(self) -> float:
        return self.layout_x_property.get()

    @layout_x.setter
    def layout_x(self, x: float) -> None:
        self.layout_x_property.set(float(x))

    @property
    def layout_y(self) -> float:
        return self.layout_y_property.get()

    @layout_y.setter
    def layout_y(self, y: float) -> None:
        self.layout_y_property.set(float(y))

    @property
    def width(self) -> float:
        return self.width_property.get()

    @property
    def height(self) -> float:
        return self.height_property.get()

    def set_pref_size(self, width: float, height: float) -> None:
        self.pref_width = float(width)
        self.pref_height = float(height)

    def relocate(self, x: float, y: float) -> None:
        """Move the top-left corner to (x, y)."""
        self.layout_x = x
        self.layout_y = y

    def resize(self, width: float, height: float) -> None:
        """Record the size measured by the renderer."""
        self.width_property.set(float(width))
        self.height_property.set(float(height))

    def __repr__(self) -> str:
        return (
            f"Pane(x={self.layout_x}, y={self.layout_y}, "
            f"w={self.width}, h={self.height})"
        )


class Label:
    """Text shown next to a node's pane."""

    def __init__(self, text: str = ""):
        self.text_property = ObservableValue(text, "text")

    @property
    def text(self) -> str:
        return self.text_property.get()

    @text.setter
    def text(self, text: str) -> None:
        self.text_property.set(text)

    def __repr__(self) -> str:
        return f"Label({self.text!r})"
