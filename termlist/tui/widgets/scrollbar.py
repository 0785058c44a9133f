"""Built-in scrollbar renderers.

Any ``Callable[[ViewportState], RenderableType]`` can be passed as
``render_scrollbar``; these are the ones shipped with the package.
"""

from __future__ import annotations

from typing import Callable

from rich.text import Text

from termlist.core.viewport import ViewportState

TRACK_CHAR = "│"
THUMB_CHAR = "█"


def position_scrollbar(viewport: ViewportState) -> Text:
    """One-line position readout, e.g. ``[11-20/100]``."""
    if viewport.total_count == 0 or viewport.visible_count == 0:
        return Text(f"[0/{viewport.total_count}]", style="dim")
    first = viewport.offset + 1
    last = viewport.end
    return Text(f"[{first}-{last}/{viewport.total_count}]", style="dim")


def thumb_position(viewport: ViewportState, track_length: int) -> tuple[int, int]:
    """Return (start, length) of the thumb on a track of track_length cells.

    The thumb covers the visible fraction of the list (at least one cell) and
    reaches the last cell exactly when the viewport is at max_offset.
    """
    if track_length <= 0:
        return (0, 0)
    if viewport.total_count <= viewport.visible_count or viewport.total_count == 0:
        return (0, track_length)
    length = max(1, (viewport.visible_count * track_length) // viewport.total_count)
    travel = track_length - length
    start = (viewport.offset * travel + viewport.max_offset // 2) // viewport.max_offset
    return (min(start, travel), length)


def horizontal_scrollbar(track_length: int) -> Callable[[ViewportState], Text]:
    """Build a renderer drawing a one-line track with a proportional thumb."""

    def _render(viewport: ViewportState) -> Text:
        start, length = thumb_position(viewport, track_length)
        bar = Text()
        bar.append(TRACK_CHAR * start, style="dim")
        bar.append(THUMB_CHAR * length)
        bar.append(TRACK_CHAR * (track_length - start - length), style="dim")
        return bar

    return _render
