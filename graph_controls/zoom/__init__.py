"""Zoom level <-> slider position mapping."""

from .mapping import (
    ZoomBounds,
    slider_range,
    slider_to_zoom,
    zoom_delta_for_position,
    zoom_to_slider,
)

__all__ = [
    "ZoomBounds",
    "slider_range",
    "slider_to_zoom",
    "zoom_delta_for_position",
    "zoom_to_slider",
]
