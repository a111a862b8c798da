"""Custom exception hierarchy for graph-controls.

Exception Hierarchy:
    GraphControlsError (base)
    └── ConfigurationError - Settings/configuration issues
        └── InvalidZoomBoundsError - max_zoom <= min_zoom, or non-finite bounds

Only configuration problems are raised. Runtime anomalies (a slider
position outside the bounds, a pointer event whose containment cannot be
decided) are logged and ignored by the widgets.

Usage:
    from graph_controls.exceptions import InvalidZoomBoundsError

    try:
        bounds.validate()
    except InvalidZoomBoundsError as e:
        console.print(f"Invalid zoom bounds: {e}")
"""

from typing import Any, Optional


class GraphControlsError(Exception):
    """Base exception for all graph-controls errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., the offending values)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GraphControlsError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


class InvalidZoomBoundsError(ConfigurationError):
    """Zoom bounds that the slider cannot map (max must be greater than min)."""

    def __init__(
        self,
        message: str = "max_zoom must be greater than min_zoom",
        *,
        min_zoom: Optional[float] = None,
        max_zoom: Optional[float] = None,
        **context: Any,
    ) -> None:
        context["min_zoom"] = min_zoom
        context["max_zoom"] = max_zoom
        super().__init__(message, setting="zoom_bounds", **context)
