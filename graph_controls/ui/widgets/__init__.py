"""graph-controls widgets package."""

from .zoom_slider import ZoomSlider

__all__ = [
    "ZoomSlider",
]
