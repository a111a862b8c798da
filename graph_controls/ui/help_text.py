"""Help overlay content."""

from typing import List, Tuple

from rich.text import Text

HelpEntry = Tuple[str, str]

_BASE_ENTRIES: List[HelpEntry] = [
    ("Create Node", "Shift+Click"),
    ("Create Edge", "Shift+Click on node, drag mouse to target node"),
]

_MULTI_SELECT_ENTRY: HelpEntry = ("Select Multiple Nodes", "[Ctrl/Cmd]+Shift+Click and drag")


def help_entries(allow_multi_select: bool = False) -> List[HelpEntry]:
    """(label, keys) pairs shown in the help menu."""
    entries = list(_BASE_ENTRIES)
    if allow_multi_select:
        entries.append(_MULTI_SELECT_ENTRY)
    return entries


def render_help(allow_multi_select: bool = False) -> Text:
    text = Text()
    for i, (label, keys) in enumerate(help_entries(allow_multi_select)):
        if i:
            text.append("\n")
        text.append("• ")
        text.append(f"{label}:", style="bold")
        text.append(f" {keys}")
    return text
