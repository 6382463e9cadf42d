"""
Reactive primitives used by the node/edge model.

This module provides the small observer toolkit the rest of the package is
built on:
- ObservableValue: a settable value that notifies listeners on change
- DerivedValue: a lazily computed, read-only value bound to dependencies
- ObservableSet: a set that emits one ordered change event per mutation
- SetView: a live, read-only view over a set

All notification is synchronous; a mutation has fully propagated to every
listener by the time the mutating call returns.
"""

from __future__ import annotations

from collections.abc import Set
from enum import IntEnum
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from .exceptions import ReadOnlyPropertyError

T = TypeVar("T")

InvalidationListener = Callable[["Observable"], None]


class Observable:
    """Base class for values that notify listeners when they become stale."""

    def __init__(self, name: str = ""):
        self.name = name
        self._listeners: list[InvalidationListener] = []

    def add_listener(self, listener: InvalidationListener) -> InvalidationListener:
        """
        Register a listener.

        Args:
            listener: Called with this observable whenever it changes

        Returns:
            The listener, so it can later be passed to remove_listener
        """
        self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: InvalidationListener) -> bool:
        """Unregister a listener. Returns False if it was not registered."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def _notify(self) -> None:
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(self)

    def get(self) -> Any:
        raise NotImplementedError

    @property
    def value(self) -> Any:
        return self.get()


class ObservableValue(Observable, Generic[T]):
    """
    A settable value.

    Listeners are only notified when the new value differs from the old one.
    """

    def __init__(self, value: T = None, name: str = ""):
        super().__init__(name)
        self._value = value

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        self._notify()

    @Observable.value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def __repr__(self) -> str:
        return f"ObservableValue({self.name!r}, {self._value!r})"


class DerivedValue(Observable, Generic[T]):
    """
    A read-only value computed from other observables.

    The value is computed on first read and cached. A change in any declared
    dependency invalidates the cache and notifies listeners; the value is
    recomputed on the next read. State read by the compute function that is
    not a declared dependency does not invalidate the cache.
    """

    def __init__(
        self,
        compute: Callable[[], T],
        dependencies: Iterable[Observable] = (),
        name: str = ""
    ):
        super().__init__(name)
        self._compute = compute
        self._dependencies: list[Observable] = list(dependencies)
        self._cached: Optional[T] = None
        self._valid = False
        for dep in self._dependencies:
            dep.add_listener(self._on_dependency_changed)

    @property
    def dependencies(self) -> list[Observable]:
        return list(self._dependencies)

    @property
    def is_valid(self) -> bool:
        """True if a cached value is held and no dependency changed since."""
        return self._valid

    def get(self) -> T:
        if not self._valid:
            self._cached = self._compute()
            self._valid = True
        return self._cached

    def set(self, value: Any) -> None:
        raise ReadOnlyPropertyError(f"{self.name or 'derived value'} is read-only")

    @Observable.value.setter
    def value(self, value: Any) -> None:
        self.set(value)

    def invalidate(self) -> None:
        """Drop the cached value and notify listeners."""
        if self._valid:
            self._valid = False
            self._notify()

    def rebind(self, dependencies: Iterable[Observable]) -> None:
        """Replace the declared dependencies and invalidate."""
        for dep in self._dependencies:
            dep.remove_listener(self._on_dependency_changed)
        self._dependencies = list(dependencies)
        for dep in self._dependencies:
            dep.add_listener(self._on_dependency_changed)
        self._on_dependency_changed(self)

    def dispose(self) -> None:
        """Detach from all dependencies. The value is frozen afterwards."""
        for dep in self._dependencies:
            dep.remove_listener(self._on_dependency_changed)
        self._dependencies = []

    def _on_dependency_changed(self, _source: Observable) -> None:
        # Notify even before the first read
        self._valid = False
        self._notify()

    def __repr__(self) -> str:
        state = repr(self._cached) if self._valid else "<invalid>"
        return f"DerivedValue({self.name!r}, {state})"


class SetChangeType(IntEnum):
    """Kind of mutation reported by an ObservableSet."""
    added = 0
    removed = 1


class SetChange(Generic[T]):
    """
    A single set mutation.

    Attributes:
        type: Whether the element was added or removed
        element: The element involved
        source: The set that changed
    """

    def __init__(self, change_type: SetChangeType, element: T, source: "ObservableSet[T]"):
        self.type = change_type
        self.element = element
        self.source = source

    @property
    def was_added(self) -> bool:
        return self.type == SetChangeType.added

    @property
    def was_removed(self) -> bool:
        return self.type == SetChangeType.removed

    def __repr__(self) -> str:
        return f"SetChange({self.type.name}, {self.element!r})"


SetChangeListener = Callable[[SetChange], None]


class SetView(Set, Generic[T]):
    """Live read-only view over a set."""

    __slots__ = ("_items",)

    def __init__(self, items: set):
        self._items = items

    @classmethod
    def _from_iterable(cls, it: Iterable[T]) -> frozenset:
        # Set operators build plain frozensets, never new views
        return frozenset(it)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SetView({self._items!r})"


class ObservableSet(Generic[T]):
    """
    A set that reports each effective mutation to its listeners.

    Every mutating call applies the change first and then emits at most one
    SetChange. Calls that do not change the set emit nothing.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: set[T] = set(items)
        self._listeners: list[SetChangeListener] = []

    def add_listener(self, listener: SetChangeListener) -> SetChangeListener:
        self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: SetChangeListener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def add(self, item: T) -> bool:
        """Insert item. Returns True if the set changed."""
        if item in self._items:
            return False
        self._items.add(item)
        self._fire(SetChange(SetChangeType.added, item, self))
        return True

    def remove(self, item: T) -> bool:
        """Remove item. Returns True if the set changed."""
        if item not in self._items:
            return False
        self._items.remove(item)
        self._fire(SetChange(SetChangeType.removed, item, self))
        return True

    def clear(self) -> None:
        """Remove every element, one removal event per element."""
        for item in list(self._items):
            self.remove(item)

    def view(self) -> SetView[T]:
        return SetView(self._items)

    def _fire(self, change: SetChange[T]) -> None:
        for listener in list(self._listeners):
            listener(change)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ObservableSet({self._items!r})"
