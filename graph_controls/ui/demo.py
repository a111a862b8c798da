"""
Demo host for GraphControls.

ZoomCanvas stands in for a zoomable graph view: it owns the zoom level and
applies the requests coming from the controls, but only shows the current
magnification instead of drawing a graph.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static

from ..config.ui_config import ControlsConfig
from .graph_controls import GraphControls
from .pointer_hub import PointerHubApp

logger = logging.getLogger(__name__)


class ZoomCanvas(Static):
    """Placeholder canvas that tracks a zoom level within bounds."""

    DEFAULT_CSS = """
    ZoomCanvas {
        height: 1fr;
        content-align: center middle;
        border: round $primary;
    }
    """

    def __init__(
        self,
        zoom_level: float,
        config: ControlsConfig,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.zoom_level = zoom_level
        self.controls: Optional[GraphControls] = None

    def on_mount(self) -> None:
        self._update_display()

    def modify_zoom(self, delta: float) -> bool:
        """Apply a relative zoom change. Out-of-bounds results are refused."""
        next_zoom = self.zoom_level + delta
        if not self.config.bounds.contains(next_zoom):
            logger.debug("Refusing zoom %.4f outside configured bounds", next_zoom)
            return False
        self._set_zoom(next_zoom)
        return True

    def zoom_to_fit(self, event: Any) -> None:
        bounds = self.config.bounds
        fit = min(max(self.config.fit_zoom, bounds.min_zoom), bounds.max_zoom)
        logger.debug("Zoom to fit (%s): %.4f", type(event).__name__, fit)
        self._set_zoom(fit)

    def _set_zoom(self, zoom_level: float) -> None:
        self.zoom_level = zoom_level
        if self.controls is not None:
            self.controls.set_zoom_level(zoom_level)
        self._update_display()

    def _update_display(self) -> None:
        self.update(f"zoom {self.zoom_level:.2f}x")


class GraphControlsDemoApp(PointerHubApp):
    """Canvas placeholder with the zoom/help overlay underneath it."""

    TITLE = "graph-controls"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("f", "fit", "Fit"),
    ]

    def __init__(
        self,
        config: Optional[ControlsConfig] = None,
        zoom_level: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.controls_config = (config or ControlsConfig()).validate()
        self.initial_zoom = self.controls_config.fit_zoom if zoom_level is None else zoom_level

    def compose(self) -> ComposeResult:
        canvas = ZoomCanvas(self.initial_zoom, self.controls_config, id="canvas")
        controls = GraphControls(
            self.initial_zoom,
            modify_zoom=canvas.modify_zoom,
            zoom_to_fit=canvas.zoom_to_fit,
            show_help=self.controls_config.show_help,
            allow_multi_select=self.controls_config.allow_multi_select,
            config=self.controls_config,
            id="graph-controls",
        )
        canvas.controls = controls
        yield canvas
        yield controls
        yield Footer()

    def action_fit(self) -> None:
        self.query_one(ZoomCanvas).zoom_to_fit(None)
