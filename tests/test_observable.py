"""Tests for reactive primitives."""

import pytest
from pygraphsfx.observable import (
    ObservableValue, DerivedValue, ObservableSet,
    SetChange, SetChangeType, SetView
)
from pygraphsfx.exceptions import ReadOnlyPropertyError


class TestObservableValue:
    """Test ObservableValue class."""

    def test_get_and_set(self):
        """Test reading back a set value."""
        v = ObservableValue(1.0, "v")
        v.set(2.0)
        assert v.get() == 2.0
        assert v.value == 2.0

    def test_value_setter(self):
        """Test setting through the value property."""
        v = ObservableValue(0)
        v.value = 5
        assert v.get() == 5

    def test_notifies_on_change(self):
        """Test listener is called once per change."""
        v = ObservableValue(0)
        seen = []
        v.add_listener(seen.append)

        v.set(1)
        assert seen == [v]

    def test_no_notification_for_same_value(self):
        """Test setting an equal value is silent."""
        v = ObservableValue("a")
        seen = []
        v.add_listener(seen.append)

        v.set("a")
        assert seen == []

    def test_remove_listener(self):
        """Test removed listener is not called."""
        v = ObservableValue(0)
        seen = []
        listener = v.add_listener(seen.append)

        assert v.remove_listener(listener)
        v.set(1)
        assert seen == []
        assert not v.remove_listener(listener)


class TestDerivedValue:
    """Test DerivedValue class."""

    def test_lazy_compute(self):
        """Test value is computed on first read only."""
        calls = []
        src = ObservableValue(2)

        def compute():
            calls.append(1)
            return src.get() * 10

        d = DerivedValue(compute, [src])
        assert calls == []
        assert d.get() == 20
        assert d.get() == 20
        assert len(calls) == 1

    def test_dependency_invalidates(self):
        """Test a dependency change forces recompute."""
        src = ObservableValue(2)
        d = DerivedValue(lambda: src.get() + 1, [src])
        assert d.get() == 3

        src.set(7)
        assert not d.is_valid
        assert d.get() == 8

    def test_undeclared_state_does_not_invalidate(self):
        """Test state outside the dependencies leaves the cache alone."""
        src = ObservableValue(1)
        extra = {'k': 1}
        d = DerivedValue(lambda: src.get() + extra['k'], [src])
        assert d.get() == 2

        extra['k'] = 100
        assert d.get() == 2

        src.set(2)
        assert d.get() == 102

    def test_listener_notified_on_dependency_change(self):
        """Test listeners hear about invalidation."""
        src = ObservableValue(0)
        d = DerivedValue(src.get, [src])
        seen = []
        d.add_listener(seen.append)

        src.set(1)
        assert seen == [d]

    def test_chained_bindings(self):
        """Test invalidation propagates through derived values."""
        src = ObservableValue(1)
        middle = DerivedValue(lambda: src.get() * 2, [src])
        top = DerivedValue(lambda: middle.get() + 1, [middle])
        assert top.get() == 3

        src.set(5)
        assert top.get() == 11

    def test_read_only(self):
        """Test setting a derived value raises."""
        d = DerivedValue(lambda: 1)
        with pytest.raises(ReadOnlyPropertyError):
            d.set(2)
        with pytest.raises(AttributeError):
            d.value = 2

    def test_rebind(self):
        """Test switching dependencies."""
        a = ObservableValue(1)
        b = ObservableValue(10)
        holder = {'src': a}
        d = DerivedValue(lambda: holder['src'].get(), [a])
        assert d.get() == 1

        holder['src'] = b
        d.rebind([b])
        assert d.get() == 10
        assert d.dependencies == [b]

        a.set(2)
        assert d.is_valid
        b.set(20)
        assert d.get() == 20

    def test_dispose(self):
        """Test disposed value stops tracking."""
        src = ObservableValue(1)
        d = DerivedValue(src.get, [src])
        assert d.get() == 1

        d.dispose()
        src.set(2)
        assert d.get() == 1

    def test_invalidate(self):
        """Test manual invalidation."""
        box = [1]
        d = DerivedValue(lambda: box[0])
        assert d.get() == 1
        box[0] = 2
        d.invalidate()
        assert d.get() == 2


class TestObservableSet:
    """Test ObservableSet class."""

    def test_add_emits_added(self):
        """Test add reports one added change."""
        s = ObservableSet()
        changes = []
        s.add_listener(changes.append)

        assert s.add('a')
        assert len(changes) == 1
        assert changes[0].was_added
        assert changes[0].element == 'a'
        assert changes[0].source is s

    def test_duplicate_add_is_silent(self):
        """Test adding an existing element emits nothing."""
        s = ObservableSet(['a'])
        changes = []
        s.add_listener(changes.append)

        assert not s.add('a')
        assert changes == []
        assert len(s) == 1

    def test_remove_emits_removed(self):
        """Test remove reports one removed change."""
        s = ObservableSet(['a'])
        changes = []
        s.add_listener(changes.append)

        assert s.remove('a')
        assert [c.type for c in changes] == [SetChangeType.removed]

    def test_remove_missing_is_silent(self):
        """Test removing an absent element returns False and emits nothing."""
        s = ObservableSet()
        changes = []
        s.add_listener(changes.append)

        assert not s.remove('a')
        assert changes == []

    def test_change_applied_before_event(self):
        """Test listeners see the set already mutated."""
        s = ObservableSet()
        seen = []
        s.add_listener(lambda c: seen.append(c.element in c.source))

        s.add('x')
        s.remove('x')
        assert seen == [True, False]

    def test_clear(self):
        """Test clear emits one removal per element."""
        s = ObservableSet([1, 2, 3])
        changes = []
        s.add_listener(changes.append)

        s.clear()
        assert len(s) == 0
        assert sorted(c.element for c in changes) == [1, 2, 3]
        assert all(c.was_removed for c in changes)

    def test_change_repr(self):
        """Test change repr names the kind."""
        change = SetChange(SetChangeType.added, 'a', ObservableSet())
        assert repr(change) == "SetChange(added, 'a')"


class TestSetView:
    """Test SetView class."""

    def test_view_is_live(self):
        """Test view reflects later mutations."""
        s = ObservableSet()
        view = s.view()
        s.add(1)
        assert 1 in view
        assert len(view) == 1
        assert list(view) == [1]

    def test_view_is_read_only(self):
        """Test view exposes no mutators."""
        view = SetView({1})
        assert not hasattr(view, 'add')
        assert not hasattr(view, 'remove')
        assert not hasattr(view, 'discard')

    def test_view_set_operations(self):
        """Test view supports set comparisons."""
        view = SetView({1, 2})
        assert view == {1, 2}
        assert view & {2, 3} == {2}
