"""Terminal-independent list views."""

from termlist.tui.views.base import BaseView
from termlist.tui.views.virtual_list import (
    RenderedRow,
    RenderItemProps,
    VirtualListView,
    default_render_item,
    render_to_lines,
)

__all__ = [
    "BaseView",
    "RenderItemProps",
    "RenderedRow",
    "VirtualListView",
    "default_render_item",
    "render_to_lines",
]
