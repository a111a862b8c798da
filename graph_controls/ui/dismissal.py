"""
Open/closed state of an auxiliary panel that closes on outside interaction.

The controller owns one resource: a listener registered on a global
PointerEventSource. The listener is attached exactly when the panel opens
and detached exactly when it closes or the controller is disposed, so a
panel torn down while open does not leak its listener.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional

from .protocols import PointerEventSource

logger = logging.getLogger(__name__)

ContainsFn = Callable[[Any], Optional[bool]]
"""Returns whether a pointer target is inside the anchor region, None if unknown."""


class DismissalState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class DismissalController:
    """State machine for a panel dismissed by clicks outside its anchor region.

    Transitions:
        CLOSED --toggle/open--> OPEN            (attach outside listener)
        OPEN   --toggle/close--> CLOSED         (detach outside listener)
        OPEN   --outside pointer--> CLOSED      (detach outside listener)

    Pointer events while CLOSED never reach the controller because the
    listener is not registered.

    Example:
        ```python
        controller = DismissalController(hub, contains=lambda t: is_within(t, panel))
        controller.toggle()     # open, listener attached
        hub.dispatch(elsewhere) # outside: closed, listener detached
        controller.dispose()    # no-op, already closed
        ```
    """

    def __init__(
        self,
        source: PointerEventSource,
        contains: ContainsFn,
        on_change: Optional[Callable[[bool], None]] = None,
    ):
        """Create a closed controller.

        Args:
            source: Where the outside-interaction listener is registered
            contains: Containment test for the anchor region
            on_change: Called with the new open flag after every transition
        """
        self._source = source
        self._contains = contains
        self._on_change = on_change
        self._state = DismissalState.CLOSED
        self._listener_attached = False
        self._disposed = False

    @property
    def state(self) -> DismissalState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is DismissalState.OPEN

    @property
    def listener_attached(self) -> bool:
        return self._listener_attached

    @property
    def disposed(self) -> bool:
        return self._disposed

    def toggle(self) -> None:
        """Flip between open and closed."""
        if self.is_open:
            self.close()
        else:
            self.open()

    def open(self) -> None:
        if self._disposed:
            logger.debug("Ignoring open() on a disposed dismissal controller")
            return
        if self.is_open:
            return
        self._state = DismissalState.OPEN
        self._attach()
        self._notify()

    def close(self) -> None:
        if not self.is_open:
            return
        self._state = DismissalState.CLOSED
        self._detach()
        self._notify()

    def handle_pointer(self, target: Any) -> None:
        """Outside-interaction listener: close unless target is in the anchor region."""
        if not self.is_open:
            return
        if target is None:
            logger.debug("Pointer event without a target, leaving panel open")
            return
        inside = self._contains(target)
        if inside is None:
            # Containment unknown (anchor not mounted): leave the state alone
            logger.debug("Cannot determine containment for %r, leaving panel open", target)
            return
        if not inside:
            logger.debug("Pointer outside anchor region (%r), closing panel", target)
            self.close()

    def dispose(self) -> None:
        """Release the listener. The controller cannot be reopened afterwards."""
        if self._disposed:
            return
        self._disposed = True
        self._detach()
        self._state = DismissalState.CLOSED

    def __enter__(self) -> "DismissalController":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()

    def _attach(self) -> None:
        if self._listener_attached:
            return
        self._source.add_listener(self.handle_pointer)
        self._listener_attached = True

    def _detach(self) -> None:
        if not self._listener_attached:
            return
        self._source.remove_listener(self.handle_pointer)
        self._listener_attached = False

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.is_open)
