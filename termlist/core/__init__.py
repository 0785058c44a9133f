"""Windowing core: capacity, viewport engine and overflow accounting."""

from termlist.core.capacity import (
    Capacity,
    ConfigurationError,
    HeightMode,
    resolve_capacity,
    resolve_height,
    validate_item_height,
)
from termlist.core.overflow import OverflowCounts, overflow_counts, should_show_indicator
from termlist.core.viewport import (
    Alignment,
    ViewportEngine,
    ViewportHandle,
    ViewportListener,
    ViewportState,
    clamp_offset,
    max_offset,
    minimal_scroll_offset,
)

__all__ = [
    "Alignment",
    "Capacity",
    "ConfigurationError",
    "HeightMode",
    "OverflowCounts",
    "ViewportEngine",
    "ViewportHandle",
    "ViewportListener",
    "ViewportState",
    "clamp_offset",
    "max_offset",
    "minimal_scroll_offset",
    "overflow_counts",
    "resolve_capacity",
    "resolve_height",
    "should_show_indicator",
    "validate_item_height",
]
