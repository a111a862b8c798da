"""
graph-controls UI configuration.

Handles the zoom bounds, slider resolution and help overlay flags.
Config is stored in ~/.config/graph-controls/ui_config.json
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..exceptions import ConfigurationError
from ..zoom.mapping import ZoomBounds
from .constants import (
    DEFAULT_FIT_ZOOM,
    DEFAULT_MAX_ZOOM,
    DEFAULT_MIN_ZOOM,
    GRAPH_CONTROLS_CONFIG_DIR,
    SLIDER_STEPS,
    UI_CONFIG_FILENAME,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "min_zoom": DEFAULT_MIN_ZOOM,
    "max_zoom": DEFAULT_MAX_ZOOM,
    "slider_steps": SLIDER_STEPS,
    "fit_zoom": DEFAULT_FIT_ZOOM,
    "show_help": True,
    "allow_multi_select": False,
}


@dataclass(frozen=True)
class ControlsConfig:
    """Effective settings for a GraphControls overlay."""

    min_zoom: float = DEFAULT_MIN_ZOOM
    max_zoom: float = DEFAULT_MAX_ZOOM
    slider_steps: int = SLIDER_STEPS
    fit_zoom: float = DEFAULT_FIT_ZOOM
    show_help: bool = True
    allow_multi_select: bool = False

    @property
    def bounds(self) -> ZoomBounds:
        return ZoomBounds(self.min_zoom, self.max_zoom)

    def validate(self) -> "ControlsConfig":
        """Reject settings the slider cannot work with."""
        self.bounds.validate()
        if self.slider_steps <= 0:
            raise ConfigurationError(
                "slider_steps must be a positive integer",
                setting="slider_steps",
                value=self.slider_steps,
            )
        return self


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/graph-controls/ui_config.json
    """
    GRAPH_CONTROLS_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return GRAPH_CONTROLS_CONFIG_DIR / UI_CONFIG_FILENAME


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                logger.warning("Ignoring %s: expected a JSON object", path)
                return DEFAULT_CONFIG.copy()
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read %s, using defaults: %s", path, e)
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.warning("Could not write %s: %s", path, e)


def get_controls_config() -> ControlsConfig:
    """
    Build the effective controls configuration.

    Returns:
        Validated ControlsConfig

    Raises:
        ConfigurationError: If the stored values are unusable
    """
    raw = load_ui_config()
    try:
        config = ControlsConfig(
            min_zoom=float(raw["min_zoom"]),
            max_zoom=float(raw["max_zoom"]),
            slider_steps=int(raw["slider_steps"]),
            fit_zoom=float(raw["fit_zoom"]),
            show_help=bool(raw["show_help"]),
            allow_multi_select=bool(raw["allow_multi_select"]),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError("Malformed UI config", path=str(get_ui_config_path())) from e
    return config.validate()


def set_zoom_bounds(min_zoom: float, max_zoom: float) -> None:
    """
    Validate and persist zoom bounds.

    Args:
        min_zoom: Lower zoom bound
        max_zoom: Upper zoom bound

    Raises:
        InvalidZoomBoundsError: If max_zoom <= min_zoom
    """
    ZoomBounds(min_zoom, max_zoom).validate()
    config = load_ui_config()
    config["min_zoom"] = min_zoom
    config["max_zoom"] = max_zoom
    save_ui_config(config)
