"""Shared pytest fixtures for graph-controls tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def ui_config_path(tmp_path, monkeypatch) -> Path:
    """Point the UI config at a temporary file so tests never touch ~/.config."""
    path = tmp_path / "ui_config.json"
    monkeypatch.setattr(
        "graph_controls.config.ui_config.get_ui_config_path",
        lambda: path,
    )
    return path


class RecordingSource:
    """PointerEventSource that records every attach and detach."""

    def __init__(self) -> None:
        self.listeners = []
        self.attached = 0
        self.detached = 0

    def add_listener(self, listener) -> None:
        self.attached += 1
        self.listeners.append(listener)

    def remove_listener(self, listener) -> None:
        self.detached += 1
        self.listeners.remove(listener)

    def fire(self, target) -> None:
        for listener in list(self.listeners):
            listener(target)


@pytest.fixture
def source() -> RecordingSource:
    return RecordingSource()
