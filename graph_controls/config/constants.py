"""
Centralized constants for graph-controls.

Zoom bounds and slider resolution live here so the mapper, the widgets and
the CLI agree on the same defaults. User overrides are read from the UI
config file (see ui_config.py).
"""

import os
from pathlib import Path

# =============================================================================
# ZOOM BOUNDS
# =============================================================================

DEFAULT_MIN_ZOOM = 0.15  # Smallest magnification the slider can reach
DEFAULT_MAX_ZOOM = 1.5  # Largest magnification the slider can reach
DEFAULT_FIT_ZOOM = 1.0  # Zoom used by the demo canvas for "fit to view"

# =============================================================================
# SLIDER
# =============================================================================

SLIDER_STEPS = 100  # Slider resolution: positions run 0..SLIDER_STEPS, step 1

# =============================================================================
# PATHS
# =============================================================================

GRAPH_CONTROLS_CONFIG_DIR = Path(
    os.environ.get("GRAPH_CONTROLS_CONFIG_DIR", Path.home() / ".config" / "graph-controls")
)
UI_CONFIG_FILENAME = "ui_config.json"
TUI_LOG_FILENAME = "tui.log"
