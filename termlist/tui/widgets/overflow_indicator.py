"""Default "N more" overflow indicators."""

from __future__ import annotations

from rich.text import Text

from termlist.constants import INDICATOR_PADDING


def default_overflow_top(count: int) -> Text:
    return Text(f"{' ' * INDICATOR_PADDING}▲ {count} more", style="dim")


def default_overflow_bottom(count: int) -> Text:
    return Text(f"{' ' * INDICATOR_PADDING}▼ {count} more", style="dim")
