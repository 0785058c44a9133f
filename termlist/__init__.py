"""termlist - windowed rendering of large lists in a terminal viewport."""

from termlist.config.schema import VirtualListConfig
from termlist.core import (
    Alignment,
    Capacity,
    ConfigurationError,
    HeightMode,
    OverflowCounts,
    ViewportEngine,
    ViewportHandle,
    ViewportState,
    overflow_counts,
    resolve_capacity,
    validate_item_height,
)
from termlist.terminal.size import TerminalSize, TerminalSizeSource, read_terminal_size
from termlist.tui.views.virtual_list import RenderedRow, RenderItemProps, VirtualListView

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "Capacity",
    "ConfigurationError",
    "HeightMode",
    "OverflowCounts",
    "RenderItemProps",
    "RenderedRow",
    "TerminalSize",
    "TerminalSizeSource",
    "ViewportEngine",
    "ViewportHandle",
    "ViewportState",
    "VirtualListConfig",
    "VirtualListView",
    "overflow_counts",
    "read_terminal_size",
    "resolve_capacity",
    "validate_item_height",
]
