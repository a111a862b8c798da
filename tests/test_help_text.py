"""Tests for the help menu content."""

from graph_controls.ui.help_text import help_entries, render_help


def test_base_entries():
    labels = [label for label, _ in help_entries()]
    assert labels == ["Create Node", "Create Edge"]


def test_multi_select_entry_is_gated():
    labels = [label for label, _ in help_entries(allow_multi_select=True)]
    assert labels[-1] == "Select Multiple Nodes"
    assert len(labels) == 3


def test_render_help_plain_text():
    text = render_help(allow_multi_select=True).plain
    assert "Create Node: Shift+Click" in text
    assert "[Ctrl/Cmd]+Shift+Click and drag" in text
    assert "Select Multiple Nodes" not in render_help().plain
