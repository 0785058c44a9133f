"""Capacity resolution: how many items fit in the list's height budget.

The height budget is either a fixed number of lines or "fill", which takes
the environment's rows minus a number of reserved lines (headers, footers).
Overflow indicators, when enabled, consume two lines of that budget.
"""

from __future__ import annotations

from dataclasses import dataclass

from termlist.constants import HEIGHT_MODE_AUTO, HEIGHT_MODE_FILL, INDICATOR_LINES


class ConfigurationError(ValueError):
    """Invalid list configuration (raised synchronously, never coerced)."""


def validate_item_height(item_height: object) -> int:
    """Return item_height if it is a positive integer, else raise.

    Bools are rejected even though they subclass int, and so are integral
    floats such as ``2.0``: the value must be an actual ``int``.
    """
    if isinstance(item_height, bool) or not isinstance(item_height, int) or item_height < 1:
        raise ConfigurationError(f"item_height must be a positive integer, got: {item_height!r}")
    return item_height


@dataclass(frozen=True)
class HeightMode:
    """Fixed line count, or fill the available environment rows."""

    fill: bool
    lines: int | None = None

    @classmethod
    def fixed(cls, lines: int) -> "HeightMode":
        if isinstance(lines, bool) or not isinstance(lines, int) or lines < 1:
            raise ConfigurationError(f"fixed height must be a positive integer, got: {lines!r}")
        return cls(fill=False, lines=lines)

    @classmethod
    def fill_available(cls) -> "HeightMode":
        return cls(fill=True)

    @classmethod
    def parse(cls, value: "int | str | HeightMode") -> "HeightMode":
        """Build a mode from a config value: an int, "fill" or "auto"."""
        if isinstance(value, HeightMode):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in (HEIGHT_MODE_FILL, HEIGHT_MODE_AUTO):
                return cls.fill_available()
            if normalized.isdecimal():
                return cls.fixed(int(normalized))
            raise ConfigurationError(f"height must be a positive integer or 'fill', got: {value!r}")
        return cls.fixed(value)

    def __str__(self) -> str:
        return HEIGHT_MODE_FILL if self.fill else str(self.lines)


@dataclass(frozen=True)
class Capacity:
    """Resolved slot budget for one layout pass."""

    visible_count: int
    item_height: int
    resolved_height: int
    indicator_lines: int


def resolve_height(mode: HeightMode, environment_rows: int, reserved_lines: int = 0) -> int:
    """Return the total line budget for the list."""
    if not mode.fill and mode.lines is not None:
        return mode.lines
    return max(1, environment_rows - max(0, reserved_lines))


def resolve_capacity(
    mode: HeightMode,
    *,
    item_height: int,
    indicators_enabled: bool,
    environment_rows: int,
    reserved_lines: int = 0,
) -> Capacity:
    """Turn a height request into a visible slot count.

    Args:
        mode: Fixed or fill height mode
        item_height: Lines consumed per item (validated first)
        indicators_enabled: Whether two lines are reserved for overflow indicators
        environment_rows: Current terminal rows (only used in fill mode)
        reserved_lines: Lines kept free in fill mode

    Returns:
        Capacity with a visible_count that is never negative
    """
    validate_item_height(item_height)
    resolved_height = resolve_height(mode, environment_rows, reserved_lines)
    indicator_lines = INDICATOR_LINES if indicators_enabled else 0
    available_height = max(0, resolved_height - indicator_lines)
    return Capacity(
        visible_count=available_height // item_height,
        item_height=item_height,
        resolved_height=resolved_height,
        indicator_lines=indicator_lines,
    )
