"""Tests for panes and center bindings."""

import pytest
from pygraphsfx.geometry import Point, CenterBinding, half_extent
from pygraphsfx.pane import Pane, Label, PaneTheme, DEFAULT_THEME


class TestPoint:
    """Test Point class."""

    def test_create_point(self):
        """Test point creation."""
        p = Point(3.5, 4.2)
        assert p.x == 3.5
        assert p.y == 4.2

    def test_default_point(self):
        """Test default point at origin."""
        p = Point()
        assert p == Point(0.0, 0.0)

    def test_unpack(self):
        """Test point unpacks to x, y."""
        x, y = Point(1, 2)
        assert (x, y) == (1, 2)


class TestHalfExtent:
    """Test measured/preferred fallback."""

    def test_measured(self):
        assert half_extent(40, 20) == 20

    def test_unmeasured_uses_preferred(self):
        assert half_extent(0, 20) == 10


class TestPane:
    """Test Pane class."""

    def test_defaults(self):
        """Test a fresh pane is unmeasured at the origin."""
        pane = Pane(20, 30)
        assert pane.layout_x == 0.0
        assert pane.layout_y == 0.0
        assert pane.width == 0.0
        assert pane.height == 0.0
        assert pane.pref_width == 20.0
        assert pane.pref_height == 30.0

    def test_relocate_and_resize(self):
        """Test moving and measuring."""
        pane = Pane()
        pane.relocate(5, 6)
        pane.resize(40, 50)
        assert (pane.layout_x, pane.layout_y) == (5.0, 6.0)
        assert (pane.width, pane.height) == (40.0, 50.0)

    def test_themed_pane(self):
        """Test default theme sizing and style hint."""
        pane = Pane.themed()
        assert pane.pref_width == DEFAULT_THEME.width == 20.0
        assert pane.pref_height == DEFAULT_THEME.height == 20.0
        assert pane.style == (
            "-fx-border-style: solid; -fx-border-radius: 20.0"
            "; -fx-background-radius: 20.0"
            "; -fx-border-width: 3.0"
            "; -fx-border-color: #1565C0"
            "; -fx-background-color: #E2E2E2"
        )

    def test_custom_theme(self):
        """Test custom theme."""
        theme = PaneTheme(width=30.0, height=10.0, border_color="#000000")
        pane = Pane.themed(theme)
        assert pane.pref_width == 30.0
        assert pane.pref_height == 10.0
        assert "-fx-border-color: #000000" in pane.style
        assert "-fx-border-radius: 10.0" in pane.style

    def test_label_text(self):
        """Test label text property."""
        label = Label("a")
        seen = []
        label.text_property.add_listener(seen.append)
        label.text = "b"
        assert label.text == "b"
        assert len(seen) == 1


class TestCenterBinding:
    """Test CenterBinding class."""

    def test_unmeasured_uses_preferred_size(self):
        """Test position (10,10), size unknown, preferred (20,20) -> (20,20)."""
        pane = Pane(20, 20)
        pane.relocate(10, 10)
        center = CenterBinding(pane)
        assert center.point() == Point(20.0, 20.0)

    def test_measured_size(self):
        """Test position (10,10), measured (40,40) -> (30,30)."""
        pane = Pane(20, 20)
        pane.resize(40, 40)
        center = CenterBinding(pane)
        pane.relocate(10, 10)
        assert center.point() == Point(30.0, 30.0)

    def test_y_uses_height(self):
        """Test y center uses the measured height, not the width."""
        pane = Pane(20, 20)
        pane.resize(100, 40)
        center = CenterBinding(pane)
        pane.relocate(0, 0)
        assert center.x.get() == 50.0
        assert center.y.get() == 20.0

    def test_y_fallback_uses_preferred_height(self):
        """Test unmeasured y center uses the preferred height."""
        pane = Pane(100, 40)
        center = CenterBinding(pane)
        assert center.y.get() == 20.0

    def test_tracks_position(self):
        """Test center follows moves."""
        pane = Pane(20, 20)
        center = CenterBinding(pane)
        assert center.x.get() == 10.0

        pane.layout_x = 50
        assert center.x.get() == 60.0
        pane.layout_y = -10
        assert center.y.get() == 0.0

    def test_axes_invalidate_independently(self):
        """Test x depends only on layout_x and y only on layout_y."""
        pane = Pane(20, 20)
        center = CenterBinding(pane)
        center.x.get()
        center.y.get()

        pane.layout_y = 5
        assert center.x.is_valid
        assert not center.y.is_valid

    def test_resize_alone_keeps_cached_center(self):
        """Test a size-only change does not recompute a cached center."""
        pane = Pane(20, 20)
        center = CenterBinding(pane)
        assert center.x.get() == 10.0

        pane.resize(100, 100)
        assert center.x.get() == 10.0

        pane.layout_x = 0.5
        assert center.x.get() == pytest.approx(50.5)

    def test_read_only(self):
        """Test center cannot be written."""
        center = CenterBinding(Pane())
        with pytest.raises(AttributeError):
            center.x.set(1.0)

    def test_rebind(self):
        """Test binding to another pane keeps observers informed."""
        first = Pane(20, 20)
        second = Pane(20, 20, layout_x=100)
        center = CenterBinding(first)
        assert center.x.get() == 10.0
        seen = []
        center.x.add_listener(seen.append)

        center.rebind(second)
        assert seen
        assert center.x.get() == 110.0

        first.layout_x = 999
        assert center.x.get() == 110.0
