"""Line browser application built on the VirtualList widget."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static

from termlist.config.schema import VirtualListConfig
from termlist.core.viewport import Alignment
from termlist.tui.widgets.scrollbar import position_scrollbar
from termlist.tui.widgets.virtual_list import VirtualList

logger = logging.getLogger(__name__)


class ListBrowserApp(App[Optional[str]]):
    """Browse a list of lines; Enter returns the selected line."""

    CSS = """
    #browser-header {
        height: 1;
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("enter", "choose", "Choose", key_display="↵"),
        Binding("t", "align('top')", "Top"),
        Binding("c", "align('center')", "Center"),
        Binding("b", "align('bottom')", "Bottom"),
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
    ]

    def __init__(self, lines: Sequence[str], config: VirtualListConfig | None = None, title: str = "") -> None:
        super().__init__()
        self.lines = lines
        self.list_config = config or VirtualListConfig()
        self.header_title = title

    def compose(self) -> ComposeResult:
        yield Static(self.header_title, id="browser-header")
        yield VirtualList(
            self.lines,
            config=self.list_config,
            render_scrollbar=position_scrollbar,
            id="browser-list",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#browser-list", VirtualList).focus()

    def on_virtual_list_viewport_changed(self, message: VirtualList.ViewportChanged) -> None:
        viewport = message.viewport
        logger.debug(
            "Viewport changed: offset=%d visible=%d total=%d",
            viewport.offset,
            viewport.visible_count,
            viewport.total_count,
        )

    def action_align(self, alignment: str) -> None:
        virtual_list = self.query_one("#browser-list", VirtualList)
        virtual_list.handle.scroll_to_index(virtual_list.selected_index, Alignment.parse(alignment))

    def action_choose(self) -> None:
        virtual_list = self.query_one("#browser-list", VirtualList)
        selected = virtual_list.selected_item
        self.exit(str(selected) if selected is not None else None)
