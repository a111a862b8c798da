"""Tests for the demo host app."""

import pytest

from graph_controls.config.ui_config import ControlsConfig
from graph_controls.exceptions import InvalidZoomBoundsError
from graph_controls.ui.demo import GraphControlsDemoApp, ZoomCanvas
from graph_controls.ui.graph_controls import GraphControls, HelpContainer
from graph_controls.ui.widgets.zoom_slider import ZoomSlider

CONFIG = ControlsConfig(min_zoom=1.0, max_zoom=2.0, fit_zoom=1.5)


class TestZoomCanvas:
    @pytest.mark.asyncio
    async def test_slider_drives_canvas(self) -> None:
        async with GraphControlsDemoApp(config=CONFIG).run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            slider = pilot.app.query_one(ZoomSlider)
            slider.post_message(ZoomSlider.Changed(slider, 80))
            await pilot.pause()
            canvas = pilot.app.query_one(ZoomCanvas)
            assert canvas.zoom_level == pytest.approx(1.8)
            assert slider.value == 80

    @pytest.mark.asyncio
    async def test_fit_resets_zoom(self) -> None:
        async with GraphControlsDemoApp(config=CONFIG, zoom_level=1.1).run_test(
            size=(100, 24)
        ) as pilot:
            await pilot.pause()
            await pilot.click("#fit-button")
            await pilot.pause()
            assert pilot.app.query_one(ZoomCanvas).zoom_level == pytest.approx(1.5)
            assert pilot.app.query_one(GraphControls).zoom_level == pytest.approx(1.5)

    @pytest.mark.asyncio
    async def test_modify_zoom_refuses_out_of_bounds(self) -> None:
        async with GraphControlsDemoApp(config=CONFIG).run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            canvas = pilot.app.query_one(ZoomCanvas)
            assert canvas.modify_zoom(1.0) is False
            assert canvas.zoom_level == pytest.approx(1.5)
            assert canvas.modify_zoom(-0.25) is True
            assert canvas.zoom_level == pytest.approx(1.25)

    @pytest.mark.asyncio
    async def test_help_overlay_follows_config(self) -> None:
        config = ControlsConfig(min_zoom=1.0, max_zoom=2.0, show_help=False)
        async with GraphControlsDemoApp(config=config).run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            assert len(pilot.app.query(HelpContainer)) == 0


def test_demo_rejects_invalid_config():
    with pytest.raises(InvalidZoomBoundsError):
        GraphControlsDemoApp(config=ControlsConfig(min_zoom=2.0, max_zoom=1.0))
