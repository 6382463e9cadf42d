"""
Name-ordered node index backed by sortedcontainers.SortedKeyList.

Keeps a graph's nodes sorted by name, then label text, for listing and
lookup. Both are mutable, so the owner calls reindex() after a rename.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional
from sortedcontainers import SortedKeyList

if TYPE_CHECKING:
    from .node import GraphNode


def name_key(node: GraphNode) -> tuple[str, str]:
    """Sort key for a node: name, then label text. Unnamed nodes sort first."""
    return (node.name or "", node.label_text or "")


class NodeIndex:
    """
    Sorted collection of nodes.

    Nodes with equal keys keep their insertion order. Membership is tracked
    by identity so it stays correct even if a key went stale, e.g. after a
    node detached with `node.graph = None` is renamed.
    """

    def __init__(self):
        self._data = SortedKeyList(key=name_key)
        self._members: set[GraphNode] = set()

    def add(self, node: GraphNode) -> bool:
        """Insert node. Returns False if it is already indexed."""
        if node in self._members:
            return False
        self._data.add(node)
        self._members.add(node)
        return True

    def remove(self, node: GraphNode) -> bool:
        """Remove node. Returns False if it was not indexed."""
        if node not in self._members:
            return False
        self._members.remove(node)
        try:
            self._data.remove(node)
        except ValueError:
            # Renamed without a reindex; its stored position no longer matches
            self._data = SortedKeyList(
                (n for n in self._data if n is not node), key=name_key
            )
        return True

    def reindex(self) -> None:
        """Re-sort after node names changed."""
        self._data = SortedKeyList(self._data, key=name_key)

    def find(self, name: Optional[str]) -> Optional[GraphNode]:
        """
        Find the first node with the given name.

        Args:
            name: Node name to look up; None finds the first unnamed node

        Returns:
            The node, or None if no node has that name
        """
        prefix = name or ""
        start = self._data.bisect_key_left((prefix,))
        for node in self._data.islice(start):
            if name_key(node)[0] != prefix:
                break
            if node.name == name:
                return node
        return None

    def __contains__(self, node: object) -> bool:
        return node in self._members

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> GraphNode:
        return self._data[index]
