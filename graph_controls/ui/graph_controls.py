"""Zoom slider, zoom-to-fit button and help overlay for a zoomable view.

GraphControls does not own the zoom level. The host passes it in (and
updates it with ``set_zoom_level``), and receives zoom requests through the
``modify_zoom`` and ``zoom_to_fit`` callbacks:

    ┌──────────────────────────────────────────┐
    │ - ━━━━━━━━●──────────── +   ⤢   ?        │
    └──────────────────────────────────────────┘
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Button, Static

from ..config.ui_config import ControlsConfig
from ..zoom.mapping import ZoomBounds, slider_range, zoom_delta_for_position, zoom_to_slider
from .dismissal import DismissalController
from .help_text import render_help
from .pointer_hub import PointerHub, find_pointer_hub, is_within
from .widgets.zoom_slider import ZoomSlider

logger = logging.getLogger(__name__)

ModifyZoomFn = Callable[[float], bool]
ZoomToFitFn = Callable[[Any], None]


class HelpMenu(Static):
    """Keyboard/mouse cheat sheet shown under the help button."""

    DEFAULT_CSS = """
    HelpMenu {
        width: 52;
        height: auto;
        padding: 0 1;
        background: $surface;
        border: round $primary;
        display: none;
    }
    """

    def __init__(self, allow_multi_select: bool = False, **kwargs: Any) -> None:
        super().__init__(render_help(allow_multi_select), **kwargs)
        self.allow_multi_select = allow_multi_select


class HelpContainer(Vertical):
    """Anchor region for the help overlay: the toggle button plus the menu.

    Clicks anywhere outside this container close the menu.
    """

    DEFAULT_CSS = """
    HelpContainer {
        width: auto;
        height: auto;
    }

    HelpContainer .help-button.help-showing {
        background: $accent;
    }
    """

    def __init__(self, allow_multi_select: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.allow_multi_select = allow_multi_select
        self.controller: Optional[DismissalController] = None

    def compose(self) -> ComposeResult:
        yield Button("?", id="help-button", classes="help-button")
        yield HelpMenu(self.allow_multi_select, id="help-menu")

    @property
    def help_showing(self) -> bool:
        return self.controller is not None and self.controller.is_open

    def on_mount(self) -> None:
        hub = find_pointer_hub(self)
        if hub is None:
            logger.warning(
                "App %s does not publish pointer events; help menu only closes via its button",
                type(self.app).__name__,
            )
            hub = PointerHub()
        self.controller = DismissalController(
            hub,
            contains=self._contains,
            on_change=self._sync_display,
        )

    def on_unmount(self) -> None:
        if self.controller is not None:
            self.controller.dispose()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help-button":
            event.stop()
            self.toggle_help()

    def toggle_help(self) -> None:
        if self.controller is not None:
            self.controller.toggle()

    def _contains(self, target: Any) -> Optional[bool]:
        return is_within(target, self if self.is_attached else None)

    def _sync_display(self, showing: bool) -> None:
        self.query_one("#help-button", Button).set_class(showing, "help-showing")
        self.query_one(HelpMenu).display = showing


class GraphControls(Widget):
    """Zoom controls overlay for a zoomable canvas."""

    DEFAULT_CSS = """
    GraphControls {
        layout: horizontal;
        width: 100%;
        height: auto;
        padding: 0 1;
        background: $panel;
    }

    GraphControls .slider-wrapper {
        width: 1fr;
        height: 1;
        margin-right: 1;
    }

    GraphControls .zoom-sign {
        width: 3;
        content-align: center middle;
    }

    GraphControls Button {
        min-width: 5;
        width: 5;
        height: 1;
        border: none;
        margin-left: 1;
    }
    """

    def __init__(
        self,
        zoom_level: float,
        *,
        modify_zoom: ModifyZoomFn,
        zoom_to_fit: ZoomToFitFn,
        min_zoom: Optional[float] = None,
        max_zoom: Optional[float] = None,
        show_help: bool = False,
        allow_multi_select: bool = False,
        config: Optional[ControlsConfig] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        """Create the controls.

        Args:
            zoom_level: Current zoom level of the host view
            modify_zoom: Called with a relative zoom delta; return value ignored
            zoom_to_fit: Called with the fit button's Pressed event
            min_zoom: Lower zoom bound, defaults to config.min_zoom
            max_zoom: Upper zoom bound, defaults to config.max_zoom
            show_help: Whether to build the help button and menu at all
            allow_multi_select: Adds the multi-select line to the help menu
            config: Defaults and slider resolution

        Raises:
            ConfigurationError: If the config is unusable (e.g. slider_steps <= 0)
            InvalidZoomBoundsError: If max_zoom <= min_zoom
        """
        config = (config or ControlsConfig()).validate()
        bounds = ZoomBounds(
            config.min_zoom if min_zoom is None else min_zoom,
            config.max_zoom if max_zoom is None else max_zoom,
        ).validate()
        super().__init__(name=name, id=id, classes=classes)
        self.config = config
        self._bounds = bounds
        self._zoom_level = zoom_level
        self._modify_zoom = modify_zoom
        self._zoom_to_fit = zoom_to_fit
        self.show_help = show_help
        self.allow_multi_select = allow_multi_select

    @property
    def steps(self) -> int:
        return self.config.slider_steps

    @property
    def bounds(self) -> ZoomBounds:
        return self._bounds

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @property
    def slider_position(self) -> float:
        """Slider position for the current zoom level, recomputed on every read."""
        return zoom_to_slider(
            self._zoom_level, self._bounds.min_zoom, self._bounds.max_zoom, self.steps
        )

    @property
    def slider_bounds(self) -> Tuple[float, float]:
        """Slider (min, max): the zoom bounds mapped through the same transform."""
        return slider_range(self._bounds, self.steps)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="slider-wrapper"):
            yield Static("-", classes="zoom-sign")
            yield ZoomSlider(
                lambda: self.slider_position,
                steps=self.steps,
                limits=lambda: self.slider_bounds,
                id="zoom-slider",
            )
            yield Static("+", classes="zoom-sign")
        yield Button("⤢", id="fit-button", classes="slider-button")
        if self.show_help:
            yield HelpContainer(self.allow_multi_select, id="help-container")

    def set_zoom_level(self, zoom_level: float) -> None:
        """Host notification that its zoom level changed."""
        self._zoom_level = zoom_level
        self._refresh_slider()

    def set_bounds(self, min_zoom: float, max_zoom: float) -> None:
        """Replace the zoom bounds.

        Raises:
            InvalidZoomBoundsError: If max_zoom <= min_zoom
        """
        self._bounds = ZoomBounds(min_zoom, max_zoom).validate()
        self._refresh_slider()

    def on_zoom_slider_changed(self, event: ZoomSlider.Changed) -> None:
        event.stop()
        self.request_position(event.position)

    def request_position(self, position: float) -> None:
        """Forward the zoom delta for a raw slider position, if it is in range."""
        delta = zoom_delta_for_position(position, self._zoom_level, self._bounds, self.steps)
        if delta is None:
            return
        logger.debug("Requesting zoom delta %.4f (position %s)", delta, position)
        self._modify_zoom(delta)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "fit-button":
            event.stop()
            self._zoom_to_fit(event)

    def _refresh_slider(self) -> None:
        if self.is_mounted:
            self.query_one(ZoomSlider).refresh()
