"""Terminal size readings and resize notifications.

``TerminalSizeSource`` gives an initial synchronous reading and then pushes
updates to subscribers when the terminal sends SIGWINCH. Streams that are not
TTYs (pipes, CI logs) and platforms without SIGWINCH report the static
defaults and never produce updates; that is expected, not a failure.
"""

from __future__ import annotations

import logging
import os
import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from types import FrameType
from typing import IO, Any, Callable, Optional

from termlist.constants import DEFAULT_COLUMNS, DEFAULT_ROWS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions in character cells."""

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS


SizeListener = Callable[[TerminalSize], None]
SizeReader = Callable[[IO[Any]], TerminalSize]


def is_tty(stream: IO[Any]) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed stream
        return False


def read_terminal_size(stream: Optional[IO[Any]] = None) -> TerminalSize:
    """Read the size of the terminal behind stream, falling back to 24x80."""
    target = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(target.fileno())
    except (AttributeError, OSError, ValueError) as e:
        logger.debug("Terminal size unavailable (%s), using defaults", e)
        return TerminalSize()
    return TerminalSize(
        rows=size.lines if size.lines > 0 else DEFAULT_ROWS,
        columns=size.columns if size.columns > 0 else DEFAULT_COLUMNS,
    )


class TerminalSizeSource:
    """Live terminal size with SIGWINCH-driven updates.

    Usage:
        source = TerminalSizeSource()
        with source.listening():
            unsubscribe = source.subscribe(on_size)
            ...

    The signal handler is installed by ``start()`` and the previous handler
    restored by ``stop()``; a handler that was already installed keeps being
    called.
    """

    def __init__(self, stream: Optional[IO[Any]] = None, *, reader: SizeReader = read_terminal_size) -> None:
        self._stream: IO[Any] = stream if stream is not None else sys.stdout
        self._reader = reader
        self._current = reader(self._stream)
        self._listeners: list[SizeListener] = []
        self._previous_handler: Any = None
        self._installed = False

    @property
    def current(self) -> TerminalSize:
        return self._current

    @property
    def supports_resize(self) -> bool:
        return hasattr(signal, "SIGWINCH") and is_tty(self._stream)

    @property
    def is_listening(self) -> bool:
        return self._installed

    def subscribe(self, listener: SizeListener) -> Callable[[], None]:
        """Register a listener for size changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def start(self) -> None:
        """Install the SIGWINCH handler (no-op for non-TTY streams)."""
        if self._installed:
            return
        if not self.supports_resize:
            logger.debug("Resize notifications unavailable for %r; using static size", self._stream)
            return
        try:
            self._previous_handler = signal.getsignal(signal.SIGWINCH)
            signal.signal(signal.SIGWINCH, self._handle_signal)
        except ValueError as e:
            # signal.signal only works in the main thread
            logger.debug("Could not install SIGWINCH handler: %s", e)
            return
        self._installed = True
        logger.debug("Installed SIGWINCH handler")

    def stop(self) -> None:
        """Restore the previous SIGWINCH handler and drop listeners."""
        if self._installed:
            previous = self._previous_handler if self._previous_handler is not None else signal.SIG_DFL
            signal.signal(signal.SIGWINCH, previous)
            self._installed = False
            self._previous_handler = None
            logger.debug("Restored previous SIGWINCH handler")
        self._listeners.clear()

    @contextmanager
    def listening(self) -> Iterator["TerminalSizeSource"]:
        self.start()
        try:
            yield self
        finally:
            self.stop()

    def refresh(self) -> TerminalSize:
        """Re-read the size and notify listeners if it changed."""
        reading = self._reader(self._stream)
        if reading == self._current:
            return self._current
        self._current = reading
        logger.debug("Terminal resized to %dx%d", reading.columns, reading.rows)
        for listener in list(self._listeners):
            listener(reading)
        return reading

    def _handle_signal(self, signum: int, frame: Optional[FrameType]) -> None:
        self.refresh()
        previous = self._previous_handler
        if callable(previous):
            previous(signum, frame)
