"""Viewport engine: which contiguous slice of the list is visible.

The engine is a small state machine whose only state is ``offset`` (the first
visible index). Every transition produces a new offset and re-clamps it into
``[0, max_offset]`` where ``max_offset = max(0, total_count - visible_count)``.

Transitions:
- ``sync_selection``: minimal scroll. The viewport moves the least amount
  needed to bring the selection into view and stays put when it already is.
- ``scroll_to_index``: imperative scroll with an alignment policy.
- ``remeasure``: clamp the offset after the list or viewport shrank.
- ``update``: apply new counts and selection together, in a fixed order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol, TypeVar, runtime_checkable

from termlist.core.capacity import ConfigurationError
from termlist.utils import clamp

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Alignment(str, Enum):
    """Where scroll_to_index places the target row."""

    AUTO = "auto"
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, value: "Alignment | str") -> "Alignment":
        if isinstance(value, Alignment):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(a.value for a in cls)
            raise ConfigurationError(f"alignment must be one of {allowed}, got: {value!r}") from None


@dataclass(frozen=True)
class ViewportState:
    """Snapshot of the engine's viewport."""

    offset: int
    visible_count: int
    total_count: int

    @property
    def max_offset(self) -> int:
        return max_offset(self.total_count, self.visible_count)

    @property
    def end(self) -> int:
        """Exclusive end index of the visible slice."""
        return min(self.offset + self.visible_count, self.total_count)

    def visible_indices(self) -> range:
        return range(self.offset, self.end)

    def visible_slice(self, items: Sequence[T]) -> list[T]:
        return list(items[self.offset : self.end])


@runtime_checkable
class ViewportHandle(Protocol):
    """Imperative operations a caller may invoke on a mounted list."""

    def scroll_to_index(self, index: int, alignment: Alignment | str = Alignment.AUTO) -> None:
        """Scroll so that index is visible, placed according to alignment."""
        ...

    def get_viewport(self) -> ViewportState:
        """Return the current viewport snapshot."""
        ...

    def remeasure(self) -> None:
        """Clamp the offset to the current list and viewport size."""
        ...


ViewportListener = Callable[[ViewportState], None]


def max_offset(total_count: int, visible_count: int) -> int:
    """Largest valid offset for the given counts."""
    return max(0, total_count - visible_count)


def clamp_offset(offset: int, visible_count: int, total_count: int) -> int:
    """Clamp offset to valid viewport bounds."""
    return clamp(offset, 0, max_offset(total_count, visible_count))


def minimal_scroll_offset(selected_index: int, current_offset: int, visible_count: int) -> int:
    """Return the offset that brings selected_index into view with the least movement.

    The result is not clamped; callers clamp against the list length.
    """
    # Selection above viewport - scroll up
    if selected_index < current_offset:
        return selected_index
    # Selection below viewport - scroll down
    if selected_index >= current_offset + visible_count:
        return selected_index - visible_count + 1
    return current_offset


class ViewportEngine:
    """Long-lived offset state machine for one list instance.

    The engine owns the offset; the caller owns the items and the selection
    and passes them in on every update. Listeners registered with
    ``add_listener`` are called synchronously, after the new offset is
    committed, whenever a transition yields a different ViewportState.
    """

    def __init__(self, total_count: int = 0, visible_count: int = 0, selected_index: int = 0) -> None:
        self._total_count = max(0, total_count)
        self._visible_count = max(0, visible_count)
        self._listeners: list[ViewportListener] = []
        self._offset = 0
        self._offset = self._clamp(
            minimal_scroll_offset(self._clamp_index(selected_index), 0, self._visible_count)
        )

    # --- Properties ---

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def visible_count(self) -> int:
        return self._visible_count

    def get_viewport(self) -> ViewportState:
        """Return the current ViewportState (pure read)."""
        return ViewportState(
            offset=self._offset,
            visible_count=self._visible_count,
            total_count=self._total_count,
        )

    # --- Listeners ---

    def add_listener(self, listener: ViewportListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    # --- Transitions ---

    def sync_selection(self, selected_index: int) -> ViewportState:
        """Minimal-scroll transition toward selected_index."""
        before = self.get_viewport()
        target = self._clamp_index(selected_index)
        self._offset = self._clamp(minimal_scroll_offset(target, self._offset, self._visible_count))
        return self._publish(before, "sync_selection")

    def scroll_to_index(self, index: int, alignment: Alignment | str = Alignment.AUTO) -> None:
        """Scroll to index, bypassing the minimal-scroll policy unless alignment is auto."""
        align = Alignment.parse(alignment)
        before = self.get_viewport()
        target = self._clamp_index(index)

        if align is Alignment.TOP:
            new_offset = target
        elif align is Alignment.CENTER:
            new_offset = target - self._visible_count // 2
        elif align is Alignment.BOTTOM:
            new_offset = target - self._visible_count + 1
        else:
            new_offset = minimal_scroll_offset(target, self._offset, self._visible_count)

        self._offset = self._clamp(new_offset)
        self._publish(before, f"scroll_to_index({index}, {align.value})")

    def remeasure(self) -> None:
        """Clamp the offset down if the list or viewport shrank."""
        before = self.get_viewport()
        self._offset = self._clamp(self._offset)
        self._publish(before, "remeasure")

    def update(self, *, total_count: int, visible_count: int, selected_index: int) -> ViewportState:
        """Apply changed inputs in one step.

        Order is fixed: new counts, then remeasure, then selection sync. Only
        one notification is sent for the combined change.
        """
        before = self.get_viewport()
        self._total_count = max(0, total_count)
        self._visible_count = max(0, visible_count)
        self._offset = self._clamp(self._offset)
        target = self._clamp_index(selected_index)
        self._offset = self._clamp(minimal_scroll_offset(target, self._offset, self._visible_count))
        return self._publish(before, "update")

    # --- Internals ---

    def _clamp(self, offset: int) -> int:
        return clamp_offset(offset, self._visible_count, self._total_count)

    def _clamp_index(self, index: int) -> int:
        return clamp(index, 0, self._total_count - 1)

    def _publish(self, before: ViewportState, reason: str) -> ViewportState:
        after = self.get_viewport()
        if after == before:
            return after
        logger.debug(
            "Viewport %s: offset %d -> %d (visible=%d total=%d)",
            reason,
            before.offset,
            after.offset,
            after.visible_count,
            after.total_count,
        )
        for listener in list(self._listeners):
            listener(after)
        return after
