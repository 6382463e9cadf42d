"""
pygraphsfx: Reactive node/edge model for interactive graph views

Nodes are draggable panes, edges follow node centers, and a Graph keeps its
edge set in step with the nodes' adjacency sets.
"""

import logging

from .exceptions import (
    GraphsFXError,
    NodeNotAttachedError,
    NodeOwnershipError,
    ReadOnlyPropertyError
)
from .observable import (
    ObservableValue,
    DerivedValue,
    ObservableSet,
    SetChange,
    SetChangeType,
    SetView
)
from .pane import Pane, Label, PaneTheme, DEFAULT_THEME
from .geometry import Point, CenterBinding
from .drag import DragController, DragPhase, DragState
from .node import GraphNode
from .graph import Graph, Edge, GraphEvent, GraphEventType

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GraphsFXError", "NodeNotAttachedError", "NodeOwnershipError", "ReadOnlyPropertyError",
    "ObservableValue", "DerivedValue", "ObservableSet", "SetChange", "SetChangeType", "SetView",
    "Pane", "Label", "PaneTheme", "DEFAULT_THEME",
    "Point", "CenterBinding",
    "DragController", "DragPhase", "DragState",
    "GraphNode",
    "Graph", "Edge", "GraphEvent", "GraphEventType",
]
