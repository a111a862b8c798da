#!/usr/bin/env python3
"""
Main CLI entry point for graph-controls
"""

from dataclasses import asdict, replace
from typing import Optional

import typer
from rich.table import Table

from graph_controls import __version__
from graph_controls.config.constants import GRAPH_CONTROLS_CONFIG_DIR, TUI_LOG_FILENAME
from graph_controls.config.ui_config import ControlsConfig, get_controls_config
from graph_controls.exceptions import ConfigurationError
from graph_controls.utils.logging_utils import setup_logging, setup_tui_logging
from graph_controls.utils.output import console, print_json
from graph_controls.zoom.mapping import (
    ZoomBounds,
    slider_to_zoom,
    zoom_delta_for_position,
    zoom_to_slider,
)

app = typer.Typer(
    help="Zoom slider and help overlay for zoomable Textual canvases.",
    no_args_is_help=True,
)

_state = {"verbose": False}


def _load_config(min_zoom: Optional[float], max_zoom: Optional[float]) -> ControlsConfig:
    """Effective config with command-line bound overrides, or exit 1."""
    try:
        config = get_controls_config()
        overrides = {}
        if min_zoom is not None:
            overrides["min_zoom"] = min_zoom
        if max_zoom is not None:
            overrides["max_zoom"] = max_zoom
        return replace(config, **overrides).validate()
    except ConfigurationError as e:
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    graph-controls - zoom slider, fit button and help overlay for graph views

    [bold]Examples:[/bold]

    Run the demo canvas:
        [cyan]graph-controls demo --multi-select[/cyan]

    Where does zoom 1.2 sit on the slider?
        [cyan]graph-controls to-slider 1.2[/cyan]
    """
    _state["verbose"] = verbose
    setup_logging(verbose)


@app.command()
def version():
    """Show graph-controls version"""
    typer.echo(f"graph-controls version {__version__}")


@app.command()
def demo(
    zoom: Optional[float] = typer.Option(None, "--zoom", "-z", help="Initial zoom level"),
    min_zoom: Optional[float] = typer.Option(None, "--min-zoom", help="Lower zoom bound"),
    max_zoom: Optional[float] = typer.Option(None, "--max-zoom", help="Upper zoom bound"),
    help_overlay: Optional[bool] = typer.Option(
        None, "--help-overlay/--no-help-overlay", help="Show the help button and menu"
    ),
    multi_select: Optional[bool] = typer.Option(
        None, "--multi-select/--no-multi-select", help="Document multi-select in the help menu"
    ),
):
    """Run the demo canvas with the controls overlay."""
    from graph_controls.ui.demo import GraphControlsDemoApp

    config = _load_config(min_zoom, max_zoom)
    if help_overlay is not None:
        config = replace(config, show_help=help_overlay)
    if multi_select is not None:
        config = replace(config, allow_multi_select=multi_select)

    setup_tui_logging(GRAPH_CONTROLS_CONFIG_DIR / TUI_LOG_FILENAME, verbose=_state["verbose"])
    try:
        GraphControlsDemoApp(config=config, zoom_level=zoom).run()
    except KeyboardInterrupt:
        pass


@app.command("to-slider")
def to_slider(
    zoom_level: float = typer.Argument(..., help="Zoom level to convert"),
    min_zoom: Optional[float] = typer.Option(None, "--min-zoom", help="Lower zoom bound"),
    max_zoom: Optional[float] = typer.Option(None, "--max-zoom", help="Upper zoom bound"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Map a zoom level to its slider position."""
    config = _load_config(min_zoom, max_zoom)
    bounds = config.bounds
    position = zoom_to_slider(zoom_level, bounds.min_zoom, bounds.max_zoom, config.slider_steps)
    result = {
        "zoom_level": zoom_level,
        "slider_position": position,
        "in_range": 0 <= position <= config.slider_steps,
        **_bounds_dict(bounds, config.slider_steps),
    }
    _emit(result, json_output, title="Zoom → slider")


@app.command("to-zoom")
def to_zoom(
    position: float = typer.Argument(..., help="Slider position to convert"),
    current: Optional[float] = typer.Option(
        None, "--current", "-c", help="Current zoom level, to show the requested delta"
    ),
    min_zoom: Optional[float] = typer.Option(None, "--min-zoom", help="Lower zoom bound"),
    max_zoom: Optional[float] = typer.Option(None, "--max-zoom", help="Upper zoom bound"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Map a slider position to its zoom level."""
    config = _load_config(min_zoom, max_zoom)
    bounds = config.bounds
    zoom_level = slider_to_zoom(position, bounds.min_zoom, bounds.max_zoom, config.slider_steps)
    result = {
        "slider_position": position,
        "zoom_level": zoom_level,
        "in_range": bounds.contains(zoom_level),
        **_bounds_dict(bounds, config.slider_steps),
    }
    if current is not None:
        result["delta"] = zoom_delta_for_position(position, current, bounds, config.slider_steps)
    _emit(result, json_output, title="Slider → zoom")


@app.command("config")
def show_config(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the effective controls configuration."""
    config = _load_config(None, None)
    _emit(asdict(config), json_output, title="graph-controls config")


def _bounds_dict(bounds: ZoomBounds, steps: int) -> dict:
    return {"min_zoom": bounds.min_zoom, "max_zoom": bounds.max_zoom, "slider_steps": steps}


def _emit(data: dict, json_output: bool, title: str) -> None:
    if json_output:
        print_json(data)
        return
    table = Table(title=title)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in data.items():
        if isinstance(value, float):
            value = f"{value:.4f}"
        elif value is None:
            value = "ignored (out of range)"
        table.add_row(key, str(value))
    console.print(table)


def run():
    """Entry point for the graph-controls console script."""
    app()


if __name__ == "__main__":
    run()
