"""
graph-controls - zoom slider, fit button and help overlay for zoomable Textual canvases
"""

__version__ = "0.1.0"
