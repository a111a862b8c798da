"""
Protocols for the overlay's collaborators.

DismissalController only needs somewhere to register a global pointer
listener; PointerHub is the Textual implementation.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

PointerListener = Callable[[Any], None]
"""Called with the widget under the pointer (or None) on every pointer-down."""


@runtime_checkable
class PointerEventSource(Protocol):
    """A registry of global pointer-down listeners (the document, in a browser)."""

    def add_listener(self, listener: PointerListener) -> None:
        """Start calling listener on every pointer-down."""
        ...

    def remove_listener(self, listener: PointerListener) -> None:
        """Stop calling listener. Unknown listeners are ignored."""
        ...

