"""Custom exceptions for pygraphsfx."""


class GraphsFXError(Exception):
    """Base exception for graph model errors."""


class NodeNotAttachedError(GraphsFXError, RuntimeError):
    """Raised when an operation needs the node's graph but none is attached."""


class NodeOwnershipError(GraphsFXError, ValueError):
    """Raised when a node already owned by one graph is added to another."""


class ReadOnlyPropertyError(GraphsFXError, AttributeError):
    """Raised on an attempt to set a derived value."""
