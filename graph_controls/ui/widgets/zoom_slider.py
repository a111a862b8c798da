"""Zoom slider widget.

A one-line range input with step 1, normally over ``[0, steps]``:

    ━━━━━━━━━━━━●─────────────────

The slider does not store its position. It reads it from a callable on
every render, so what it shows always matches the host's zoom level. User
input never moves the thumb directly; it posts ``ZoomSlider.Changed`` with
the requested position and the owner decides what to do with it.
"""

import logging
import math
from typing import Callable, Optional, Tuple

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget

from ...config.constants import SLIDER_STEPS

logger = logging.getLogger(__name__)


class ZoomSlider(Widget, can_focus=True):
    """Keyboard and mouse driven range input for the zoom level."""

    DEFAULT_CSS = """
    ZoomSlider {
        height: 1;
        width: 1fr;
        min-width: 10;
    }

    ZoomSlider:focus {
        background: $boost;
    }
    """

    BINDINGS = [
        Binding("left", "step(-1)", "Zoom out", show=False),
        Binding("right", "step(1)", "Zoom in", show=False),
        Binding("minus", "step(-1)", "Zoom out", show=False),
        Binding("plus", "step(1)", "Zoom in", show=False),
        Binding("home", "jump_to_start", "Min zoom", show=False),
        Binding("end", "jump_to_end", "Max zoom", show=False),
    ]

    TRACK_FILLED = "━"
    TRACK_EMPTY = "─"
    THUMB = "●"

    class Changed(Message):
        """The user asked for a new slider position."""

        def __init__(self, slider: "ZoomSlider", position: int) -> None:
            super().__init__()
            self.slider = slider
            self.position = position

        @property
        def control(self) -> "ZoomSlider":
            return self.slider

    def __init__(
        self,
        position: Callable[[], float],
        steps: int = SLIDER_STEPS,
        limits: Optional[Callable[[], Tuple[float, float]]] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        super().__init__(name=name, id=id, classes=classes)
        self._position = position
        self.steps = steps
        self._limits = limits or (lambda: (0, self.steps))

    @property
    def min(self) -> int:
        return round(self._limits()[0])

    @property
    def max(self) -> int:
        return round(self._limits()[1])

    @property
    def value(self) -> int:
        """Current position, snapped to the step grid."""
        position = self._position()
        if math.isnan(position):
            return self.min
        if math.isinf(position):
            return self.max if position > 0 else self.min
        return round(position)

    def render(self) -> Text:
        width = max(self.size.width, 1)
        # Display only: an out-of-range zoom pins the thumb to the track end
        low, high = self.min, self.max
        value = min(max(self.value, low), high)
        span = high - low
        thumb = round((value - low) / span * (width - 1)) if width > 1 and span > 0 else 0

        text = Text()
        text.append(self.TRACK_FILLED * thumb, style="bold")
        text.append(self.THUMB, style="bold reverse" if self.has_focus else "bold")
        text.append(self.TRACK_EMPTY * (width - thumb - 1), style="dim")
        return text

    def request_position(self, position: int) -> None:
        """Post a Changed message for position, clamped to the slider range."""
        position = min(max(position, self.min), self.max)
        if position == self.value:
            return
        logger.debug("Slider requested position %d", position)
        self.post_message(self.Changed(self, position))

    def position_at(self, x: int) -> int:
        """Slider position under column x of the track."""
        width = self.size.width
        if width <= 1:
            return self.value
        low, high = self.min, self.max
        return low + round(x / (width - 1) * (high - low))

    def action_step(self, delta: int) -> None:
        self.request_position(self.value + delta)

    def action_jump_to_start(self) -> None:
        self.request_position(self.min)

    def action_jump_to_end(self) -> None:
        self.request_position(self.max)

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.request_position(self.position_at(event.x))
