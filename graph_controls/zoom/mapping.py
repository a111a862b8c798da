"""Bidirectional mapping between a zoom factor and a slider position.

A zoom level is a continuous magnification in ``[min_zoom, max_zoom]``; a
slider position is a value in ``[0, steps]``. Both directions use the same
linear transform, so mapping a position to a zoom level and back yields the
original position (modulo floating-point rounding).

None of these functions clamp. Callers validate the bounds with
``ZoomBounds.validate()`` before mapping, and ``zoom_delta_for_position``
drops requests that land outside the bounds instead of clamping them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.constants import DEFAULT_MAX_ZOOM, DEFAULT_MIN_ZOOM, SLIDER_STEPS
from ..exceptions import InvalidZoomBoundsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoomBounds:
    """Inclusive zoom range supplied by the host view."""

    min_zoom: float = DEFAULT_MIN_ZOOM
    max_zoom: float = DEFAULT_MAX_ZOOM

    def validate(self) -> "ZoomBounds":
        """Raise InvalidZoomBoundsError unless min_zoom < max_zoom.

        Returns self so construction and validation can be chained.
        """
        if not (math.isfinite(self.min_zoom) and math.isfinite(self.max_zoom)):
            raise InvalidZoomBoundsError(
                "zoom bounds must be finite numbers",
                min_zoom=self.min_zoom,
                max_zoom=self.max_zoom,
            )
        if self.max_zoom <= self.min_zoom:
            raise InvalidZoomBoundsError(min_zoom=self.min_zoom, max_zoom=self.max_zoom)
        return self

    @property
    def span(self) -> float:
        return self.max_zoom - self.min_zoom

    def contains(self, zoom_level: float) -> bool:
        """Inclusive bounds check."""
        return self.min_zoom <= zoom_level <= self.max_zoom


def zoom_to_slider(
    zoom_level: float,
    min_zoom: float,
    max_zoom: float,
    steps: int = SLIDER_STEPS,
) -> float:
    """Convert a zoom level to a slider position in ``[0, steps]``."""
    return ((zoom_level - min_zoom) / (max_zoom - min_zoom)) * steps


def slider_to_zoom(
    position: float,
    min_zoom: float,
    max_zoom: float,
    steps: int = SLIDER_STEPS,
) -> float:
    """Convert a slider position (0..steps) back to the zoom range."""
    return (position * (max_zoom - min_zoom)) / steps + min_zoom


def slider_range(bounds: ZoomBounds, steps: int = SLIDER_STEPS) -> Tuple[float, float]:
    """Slider (min, max) obtained by mapping the bounds themselves."""
    return (
        zoom_to_slider(bounds.min_zoom, bounds.min_zoom, bounds.max_zoom, steps),
        zoom_to_slider(bounds.max_zoom, bounds.min_zoom, bounds.max_zoom, steps),
    )


def zoom_delta_for_position(
    position: float,
    zoom_level: float,
    bounds: ZoomBounds,
    steps: int = SLIDER_STEPS,
) -> Optional[float]:
    """Zoom delta a slider change should request, or None to ignore it.

    The delta is relative to the current zoom level. Positions that map
    outside the bounds are discarded rather than clamped: a slider can only
    report such a position when the bounds changed between render and
    event dispatch.

    Args:
        position: Raw position reported by the slider
        zoom_level: Current zoom level of the host view
        bounds: Current zoom bounds (assumed valid)
        steps: Slider resolution

    Returns:
        ``next_zoom - zoom_level`` or None when next_zoom is out of bounds
    """
    next_zoom = slider_to_zoom(position, bounds.min_zoom, bounds.max_zoom, steps)
    if not bounds.contains(next_zoom):
        logger.debug(
            "Ignoring slider position %s: zoom %.4f outside [%s, %s]",
            position,
            next_zoom,
            bounds.min_zoom,
            bounds.max_zoom,
        )
        return None
    return next_zoom - zoom_level
