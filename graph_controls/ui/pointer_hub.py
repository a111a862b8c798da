"""
Global pointer-down listener registry for Textual apps.

Textual has no document-level addEventListener, so PointerHubApp feeds every
raw MouseDown into a PointerHub before normal dispatch, resolving the widget
under the pointer. Widgets that need outside-click detection register a
listener on the hub instead of on the document.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from textual import events
from textual.app import App
from textual.dom import DOMNode
from textual.errors import NoWidget
from textual.widget import Widget

from .protocols import PointerListener

logger = logging.getLogger(__name__)


class PointerHub:
    """Set of listeners called with the target of every pointer-down."""

    def __init__(self) -> None:
        self._listeners: List[PointerListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: PointerListener) -> None:
        # Bound methods compare equal, so re-adding the same handler is a no-op
        if listener in self._listeners:
            return
        self._listeners.append(listener)

    def remove_listener(self, listener: PointerListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def dispatch(self, target: Any) -> None:
        """Call every listener with target. Listeners may unregister themselves."""
        for listener in list(self._listeners):
            listener(target)


class PointerHubApp(App):
    """App base class that publishes pointer-downs on ``self.pointer_hub``."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.pointer_hub = PointerHub()

    async def on_event(self, event: events.Event) -> None:
        # Forwarded events may bubble back up to the app, only publish raw ones
        if isinstance(event, events.MouseDown) and not event.is_forwarded:
            self.pointer_hub.dispatch(self._widget_under(event))
        await super().on_event(event)

    def _widget_under(self, event: events.MouseEvent) -> Optional[Widget]:
        try:
            widget, _region = self.screen.get_widget_at(event.screen_x, event.screen_y)
        except NoWidget:
            return None
        return widget



def find_pointer_hub(node: DOMNode) -> Optional[PointerHub]:
    """Hub of the app running node, or None when the app does not publish one."""
    hub = getattr(node.app, "pointer_hub", None)
    return hub if isinstance(hub, PointerHub) else None


def is_within(target: Any, anchor: Optional[DOMNode]) -> Optional[bool]:
    """Whether target sits in the DOM subtree rooted at anchor.

    Returns None when the answer is unknown: no anchor, or a target that is
    not part of a DOM.
    """
    if anchor is None or not isinstance(target, DOMNode):
        return None
    return anchor in target.ancestors_with_self
