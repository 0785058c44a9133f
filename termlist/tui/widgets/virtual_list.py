"""Textual widget rendering a VirtualListView."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable, Generic, Optional, TypeVar

from rich.text import Text
from textual.binding import Binding
from textual.events import Resize
from textual.geometry import Size
from textual.message import Message
from textual.widget import Widget

from termlist.config.schema import VirtualListConfig
from termlist.constants import DEFAULT_COLUMNS
from termlist.core.viewport import ViewportHandle, ViewportState
from termlist.tui.base import TermlistMixin
from termlist.tui.views.virtual_list import (
    KeyExtractor,
    OverflowRenderer,
    RenderItem,
    ScrollbarRenderer,
    VirtualListView,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VirtualList(TermlistMixin, Widget, Generic[T], can_focus=True):
    """Windowed list for large item sequences.

    Only the visible slice is rendered. In fill mode the capacity follows the
    terminal height (minus ``reserved_lines``) and is recomputed on resize.
    """

    class ViewportChanged(Message):
        """Posted once on mount and whenever the visible window changes."""

        def __init__(self, virtual_list: VirtualList[Any], viewport: ViewportState) -> None:
            super().__init__()
            self.virtual_list = virtual_list
            self.viewport = viewport

        @property
        def control(self) -> VirtualList[Any]:
            return self.virtual_list

    class SelectionChanged(Message):
        """Posted when the selected index moves."""

        def __init__(self, virtual_list: VirtualList[Any], index: int, item: object) -> None:
            super().__init__()
            self.virtual_list = virtual_list
            self.index = index
            self.item = item

        @property
        def control(self) -> VirtualList[Any]:
            return self.virtual_list

    DEFAULT_CSS = """
    VirtualList {
        width: 100%;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("up", "cursor_up", "Up", key_display="↑", show=False),
        Binding("down", "cursor_down", "Down", key_display="↓", show=False),
        Binding("pageup", "page_up", "Page up", show=False),
        Binding("pagedown", "page_down", "Page down", show=False),
        Binding("home", "first", "First", show=False),
        Binding("end", "last", "Last", show=False),
    ]

    def __init__(
        self,
        items: Sequence[T] = (),
        *,
        config: VirtualListConfig | None = None,
        render_item: Optional[RenderItem[T]] = None,
        key_extractor: Optional[KeyExtractor[T]] = None,
        render_overflow_top: Optional[OverflowRenderer] = None,
        render_overflow_bottom: Optional[OverflowRenderer] = None,
        render_scrollbar: Optional[ScrollbarRenderer] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        # Notifications are held back until mount; on_mount posts the initial state
        self._live = False
        self.view: VirtualListView[T] = VirtualListView(
            items,
            config=config,
            render_item=render_item,
            key_extractor=key_extractor,
            render_overflow_top=render_overflow_top,
            render_overflow_bottom=render_overflow_bottom,
            render_scrollbar=render_scrollbar,
            on_viewport_change=self._on_viewport_change,
        )

    # --- Public API ---

    @property
    def handle(self) -> ViewportHandle:
        """Imperative handle: scroll_to_index, get_viewport, remeasure."""
        return self.view.handle

    @property
    def selected_index(self) -> int:
        return self.view.selected_index

    @property
    def selected_item(self) -> T | None:
        return self.view.selected_item

    def select(self, index: int) -> None:
        self._move_selection(lambda: self.view.select(index))

    def _move_selection(self, move: Callable[[], ViewportState]) -> None:
        previous = self.view.selected_index
        move()
        self.refresh(layout=True)
        if self._live and self.view.selected_index != previous:
            self.post_message(self.SelectionChanged(self, self.view.selected_index, self.view.selected_item))

    def set_items(self, items: Sequence[T], selected_index: int | None = None) -> None:
        self.view.set_items(items, selected_index)
        self.refresh(layout=True)

    def configure(self, config: VirtualListConfig) -> None:
        self.view.configure(config)
        self.refresh(layout=True)

    # --- Lifecycle ---

    def on_mount(self) -> None:
        self._sync_environment(self.app.size.height)
        self._live = True
        self.post_message(self.ViewportChanged(self, self.view.viewport))

    def on_unmount(self) -> None:
        self._live = False

    def on_resize(self, _event: Resize) -> None:
        self._sync_environment(self.app.size.height)

    def _sync_environment(self, rows: int) -> None:
        self.view.set_environment_rows(rows)

    def _on_viewport_change(self, viewport: ViewportState) -> None:
        if not self._live:
            return
        self.refresh(layout=True)
        # Layout-time changes run under the screen; the message must be built
        # on this widget's queue so it bubbles past the screen.
        self.call_later(self._post_viewport_changed, viewport)

    def _post_viewport_changed(self, viewport: ViewportState) -> None:
        if self._live:
            self.post_message(self.ViewportChanged(self, viewport))

    # --- Rendering ---

    def get_content_height(self, container: Size, viewport: Size, width: int) -> int:
        # Layout runs again after every terminal resize, so fill mode tracks it here
        self._sync_environment(viewport.height)
        return len(self.view.render_text_lines(width))

    def render(self) -> Text:
        width = self.size.width or DEFAULT_COLUMNS
        return Text("\n", no_wrap=True, overflow="crop").join(self.view.render_text_lines(width))

    # --- Actions ---

    def action_cursor_up(self) -> None:
        self._move_selection(self.view.move_up)

    def action_cursor_down(self) -> None:
        self._move_selection(self.view.move_down)

    def action_page_up(self) -> None:
        self._move_selection(self.view.page_up)

    def action_page_down(self) -> None:
        self._move_selection(self.view.page_down)

    def action_first(self) -> None:
        self._move_selection(self.view.home)

    def action_last(self) -> None:
        self._move_selection(self.view.end)
