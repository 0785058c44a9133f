from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from termlist.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_ITEM_HEIGHT,
    DEFAULT_OVERFLOW_INDICATOR_THRESHOLD,
    DEFAULT_RESERVED_LINES,
    HEIGHT_MODE_FILL,
)
from termlist.core.capacity import HeightMode, validate_item_height


class VirtualListConfig(BaseModel):
    """Options for one virtual list.

    ``height`` is a fixed line count or ``"fill"`` (``"auto"`` is accepted and
    normalized to ``"fill"``). ``overflow_indicator_threshold`` is accepted for
    compatibility but indicators always show when anything is hidden.
    """

    model_config = ConfigDict(extra="allow")

    height: Union[int, str] = DEFAULT_HEIGHT
    reserved_lines: int = Field(default=DEFAULT_RESERVED_LINES, ge=0)
    item_height: int = DEFAULT_ITEM_HEIGHT
    show_overflow_indicators: bool = True
    overflow_indicator_threshold: int = Field(default=DEFAULT_OVERFLOW_INDICATOR_THRESHOLD, ge=0)
    selected_index: int = 0

    @field_validator("height", mode="before")
    @classmethod
    def check_height(cls, v: Any) -> Union[int, str]:
        """Normalize to a positive int or "fill"."""
        mode = HeightMode.parse(v)
        if mode.fill:
            return HEIGHT_MODE_FILL
        assert mode.lines is not None
        return mode.lines

    @field_validator("item_height", mode="before")
    @classmethod
    def check_item_height(cls, v: Any) -> int:
        """Reject 0, negatives and non-integers such as 1.5 instead of coercing them."""
        return validate_item_height(v)

    @property
    def height_mode(self) -> HeightMode:
        return HeightMode.parse(self.height)
