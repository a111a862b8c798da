"""Textual widgets for the graph zoom/help overlay."""

from .dismissal import DismissalController, DismissalState
from .graph_controls import GraphControls
from .pointer_hub import PointerHub, PointerHubApp

__all__ = [
    "DismissalController",
    "DismissalState",
    "GraphControls",
    "PointerHub",
    "PointerHubApp",
]
