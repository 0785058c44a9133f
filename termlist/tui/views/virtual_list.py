"""Virtual list view: maps the visible slice to keyed, cropped rows.

The view owns a ViewportEngine and feeds it the caller's items, selection and
resolved capacity. Rendering goes through rich, so row callbacks may return
any rich renderable; each row is cropped to exactly ``item_height`` lines and
never wraps.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from rich.console import Console, RenderableType
from rich.segment import Segment
from rich.text import Text

from termlist.config.schema import VirtualListConfig
from termlist.constants import DEFAULT_COLUMNS, DEFAULT_ROWS
from termlist.core.capacity import Capacity, resolve_capacity, validate_item_height
from termlist.core.overflow import OverflowCounts, overflow_counts, should_show_indicator
from termlist.core.viewport import ViewportEngine, ViewportHandle, ViewportListener, ViewportState
from termlist.tui.views.base import BaseView
from termlist.tui.widgets.overflow_indicator import default_overflow_bottom, default_overflow_top
from termlist.utils import clamp

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RenderItemProps(Generic[T]):
    """Arguments passed to render_item for each visible item."""

    item: T
    index: int
    is_selected: bool


@dataclass(frozen=True)
class RenderedRow:
    """One visible item after rendering."""

    key: str
    index: int
    is_selected: bool
    lines: list[Text]


RenderItem = Callable[[RenderItemProps[T]], RenderableType]
KeyExtractor = Callable[[T, int], str]
OverflowRenderer = Callable[[int], RenderableType]
ScrollbarRenderer = Callable[[ViewportState], RenderableType]


def default_render_item(props: RenderItemProps[object]) -> Text:
    """Plain text of the item; the selected row is shown in reverse video."""
    return Text(str(props.item), style="reverse" if props.is_selected else "")


class VirtualListView(BaseView, Generic[T]):
    """Windowed list of items rendered through rich.

    Only ``items[offset:offset + visible_count]`` is ever rendered.
    ``on_viewport_change`` is called once with the initial viewport and then
    once per transition that changes it.
    """

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
        on_viewport_change: Optional[ViewportListener] = None,
        environment_rows: int = DEFAULT_ROWS,
    ) -> None:
        self.config = config or VirtualListConfig()
        # model_construct() skips validation; item height must still fail fast
        validate_item_height(self.config.item_height)
        self.render_item: RenderItem[T] = render_item or default_render_item  # type: ignore[assignment]
        self.key_extractor = key_extractor
        self.render_overflow_top: OverflowRenderer = render_overflow_top or default_overflow_top
        self.render_overflow_bottom: OverflowRenderer = render_overflow_bottom or default_overflow_bottom
        self.render_scrollbar = render_scrollbar
        self.on_viewport_change = on_viewport_change

        self._items: Sequence[T] = items
        self._selected_index = self.config.selected_index
        self._environment_rows = environment_rows
        self._capacity = self._resolve_capacity()
        self.engine = ViewportEngine(
            total_count=len(items),
            visible_count=self._capacity.visible_count,
            selected_index=self._selected_index,
        )
        self.engine.add_listener(self._handle_viewport_change)
        self._handle_viewport_change(self.engine.get_viewport())

    # --- State ---

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def selected_index(self) -> int:
        """Selection clamped into the list bounds."""
        return clamp(self._selected_index, 0, len(self._items) - 1)

    @property
    def selected_item(self) -> T | None:
        if not self._items:
            return None
        return self._items[self.selected_index]

    @property
    def capacity(self) -> Capacity:
        return self._capacity

    @property
    def viewport(self) -> ViewportState:
        return self.engine.get_viewport()

    @property
    def overflow(self) -> OverflowCounts:
        return overflow_counts(self.engine.get_viewport())

    @property
    def handle(self) -> ViewportHandle:
        """Imperative scroll handle (scroll_to_index, get_viewport, remeasure)."""
        return self.engine

    # --- Inputs ---

    def set_items(self, items: Sequence[T], selected_index: int | None = None) -> ViewportState:
        """Replace the list; the offset is kept where still valid."""
        self._items = items
        if selected_index is not None:
            self._selected_index = selected_index
        return self._apply()

    def configure(self, config: VirtualListConfig) -> ViewportState:
        """Swap configuration (height, item height, indicators)."""
        validate_item_height(config.item_height)
        self.config = config
        self._capacity = self._resolve_capacity()
        return self._apply()

    def set_environment_rows(self, rows: int) -> ViewportState:
        """Feed a new terminal height (only changes capacity in fill mode)."""
        if rows == self._environment_rows:
            return self.viewport
        self._environment_rows = rows
        self._capacity = self._resolve_capacity()
        return self._apply()

    def select(self, index: int) -> ViewportState:
        """Move the selection and scroll minimally to keep it visible."""
        self._selected_index = clamp(index, 0, len(self._items) - 1)
        return self.engine.sync_selection(self._selected_index)

    def move_up(self) -> ViewportState:
        return self.select(self.selected_index - 1)

    def move_down(self) -> ViewportState:
        return self.select(self.selected_index + 1)

    def page_up(self) -> ViewportState:
        return self.select(self.selected_index - max(1, self._capacity.visible_count))

    def page_down(self) -> ViewportState:
        return self.select(self.selected_index + max(1, self._capacity.visible_count))

    def home(self) -> ViewportState:
        return self.select(0)

    def end(self) -> ViewportState:
        return self.select(len(self._items) - 1)

    # --- Rendering ---

    def rows(self, width: int = DEFAULT_COLUMNS) -> list[RenderedRow]:
        """Render the visible slice into keyed rows of exactly item_height lines."""
        viewport = self.engine.get_viewport()
        selected = self.selected_index
        item_height = self._capacity.item_height
        rendered: list[RenderedRow] = []
        for index in viewport.visible_indices():
            item = self._items[index]
            key = self.key_extractor(item, index) if self.key_extractor else str(index)
            props = RenderItemProps(item=item, index=index, is_selected=index == selected)
            lines = render_to_lines(self.render_item(props), width, height=item_height)
            rendered.append(RenderedRow(key=key, index=index, is_selected=props.is_selected, lines=lines))
        return rendered

    def render_text_lines(self, width: int = DEFAULT_COLUMNS) -> list[Text]:
        """Full output as styled lines: indicators, rows, then scrollbar."""
        viewport = self.engine.get_viewport()
        counts = overflow_counts(viewport)
        show_indicators = self.config.show_overflow_indicators
        lines: list[Text] = []

        if show_indicators and should_show_indicator(counts.above):
            lines.extend(render_to_lines(self.render_overflow_top(counts.above), width, height=1))

        for row in self.rows(width):
            lines.extend(row.lines)

        if show_indicators and should_show_indicator(counts.below):
            lines.extend(render_to_lines(self.render_overflow_bottom(counts.below), width, height=1))

        if self.render_scrollbar is not None:
            lines.extend(render_to_lines(self.render_scrollbar(viewport), width))

        return lines

    def get_render_lines(self, width: int, height: int | None = None) -> list[str]:
        """Return plain lines this view would render.

        Args:
            width: Terminal width
            height: Terminal height; updates the environment rows used in fill mode
        """
        if height is not None:
            self.set_environment_rows(height)
        return [line.plain.rstrip() for line in self.render_text_lines(width)]

    # --- Internals ---

    def _resolve_capacity(self) -> Capacity:
        return resolve_capacity(
            self.config.height_mode,
            item_height=self.config.item_height,
            indicators_enabled=self.config.show_overflow_indicators,
            environment_rows=self._environment_rows,
            reserved_lines=self.config.reserved_lines,
        )

    def _apply(self) -> ViewportState:
        return self.engine.update(
            total_count=len(self._items),
            visible_count=self._capacity.visible_count,
            selected_index=self.selected_index,
        )

    def _handle_viewport_change(self, viewport: ViewportState) -> None:
        if self.on_viewport_change is not None:
            self.on_viewport_change(viewport)


def render_to_lines(renderable: RenderableType, width: int, height: int | None = None) -> list[Text]:
    """Render a rich renderable into at most height lines cropped to width.

    Text never wraps: long lines are cut at the right edge and content beyond
    ``height`` lines is dropped. Shorter output is padded to ``height``.
    """
    width = max(1, width)
    if isinstance(renderable, str):
        renderable = Text(renderable)
    console = Console(
        file=io.StringIO(),
        width=width,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )
    options = console.options.update(width=width, height=height, no_wrap=True, overflow="crop")
    rendered = console.render_lines(renderable, options, pad=False)
    return [_segments_to_text(line) for line in rendered]


def _segments_to_text(segments: list[Segment]) -> Text:
    line = Text(no_wrap=True, overflow="crop")
    for segment in segments:
        if segment.control:
            continue
        line.append(segment.text, style=segment.style)
    return line
