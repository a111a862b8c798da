"""Tests for the controls configuration (ui_config.py)."""

import json

import pytest

from graph_controls.config.constants import DEFAULT_MAX_ZOOM, DEFAULT_MIN_ZOOM, SLIDER_STEPS
from graph_controls.config.ui_config import (
    DEFAULT_CONFIG,
    ControlsConfig,
    get_controls_config,
    load_ui_config,
    save_ui_config,
    set_zoom_bounds,
)
from graph_controls.exceptions import ConfigurationError, InvalidZoomBoundsError


def test_defaults_without_config_file(ui_config_path):
    """Missing config file yields the built-in defaults."""
    assert not ui_config_path.exists()
    config = get_controls_config()
    assert config == ControlsConfig()
    assert config.min_zoom == DEFAULT_MIN_ZOOM
    assert config.max_zoom == DEFAULT_MAX_ZOOM
    assert config.slider_steps == SLIDER_STEPS


def test_partial_config_merges_with_defaults(ui_config_path):
    ui_config_path.write_text(json.dumps({"max_zoom": 3.0}) + "\n")
    config = get_controls_config()
    assert config.max_zoom == 3.0
    assert config.min_zoom == DEFAULT_MIN_ZOOM


def test_invalid_json_falls_back_to_defaults(ui_config_path):
    ui_config_path.write_text("{not json")
    assert load_ui_config() == DEFAULT_CONFIG


def test_non_object_json_falls_back_to_defaults(ui_config_path):
    ui_config_path.write_text("[1, 2]")
    assert load_ui_config() == DEFAULT_CONFIG


def test_save_and_load_round_trip(ui_config_path):
    config = {**DEFAULT_CONFIG, "allow_multi_select": True}
    save_ui_config(config)
    assert load_ui_config()["allow_multi_select"] is True


def test_set_zoom_bounds_persists(ui_config_path):
    set_zoom_bounds(0.5, 2.5)
    bounds = get_controls_config().bounds
    assert (bounds.min_zoom, bounds.max_zoom) == (0.5, 2.5)
    assert json.loads(ui_config_path.read_text())["min_zoom"] == 0.5


def test_set_zoom_bounds_rejects_invalid(ui_config_path):
    with pytest.raises(InvalidZoomBoundsError):
        set_zoom_bounds(2.0, 2.0)
    assert not ui_config_path.exists()


def test_stored_invalid_bounds_raise(ui_config_path):
    ui_config_path.write_text(json.dumps({"min_zoom": 2.0, "max_zoom": 1.0}))
    with pytest.raises(InvalidZoomBoundsError):
        get_controls_config()


def test_malformed_values_raise_configuration_error(ui_config_path):
    ui_config_path.write_text(json.dumps({"slider_steps": "many"}))
    with pytest.raises(ConfigurationError):
        get_controls_config()


def test_non_positive_steps_rejected():
    with pytest.raises(ConfigurationError) as exc_info:
        ControlsConfig(slider_steps=0).validate()
    assert exc_info.value.context["setting"] == "slider_steps"


def test_bounds_property():
    bounds = ControlsConfig(min_zoom=0.25, max_zoom=4.0).bounds
    assert (bounds.min_zoom, bounds.max_zoom) == (0.25, 4.0)
