"""Overflow accounting: how many items are hidden above and below."""

from __future__ import annotations

from dataclasses import dataclass

from termlist.core.viewport import ViewportState


@dataclass(frozen=True)
class OverflowCounts:
    """Hidden item counts derived from a ViewportState."""

    above: int
    below: int

    @property
    def total_hidden(self) -> int:
        return self.above + self.below


def overflow_counts(viewport: ViewportState) -> OverflowCounts:
    """Derive hidden counts; always recomputed, never stored."""
    return OverflowCounts(
        above=viewport.offset,
        below=max(0, viewport.total_count - viewport.offset - viewport.visible_count),
    )


def should_show_indicator(count: int) -> bool:
    """Indicators show whenever something is hidden on that side."""
    return count > 0
