"""Unit tests for capacity resolution and item height validation."""

import pytest

from termlist.core.capacity import (
    ConfigurationError,
    HeightMode,
    resolve_capacity,
    resolve_height,
    validate_item_height,
)


@pytest.mark.unit
@pytest.mark.parametrize("value", [0, -1, 1.5, 2.0, True, "3", None])
def test_invalid_item_height_fails_fast(value) -> None:
    with pytest.raises(ConfigurationError, match="positive integer"):
        validate_item_height(value)


@pytest.mark.unit
@pytest.mark.parametrize("value", [1, 5, 100])
def test_valid_item_height_is_returned(value) -> None:
    assert validate_item_height(value) == value


@pytest.mark.unit
def test_configuration_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_item_height(0)


@pytest.mark.unit
def test_fixed_height_ignores_environment() -> None:
    capacity = resolve_capacity(
        HeightMode.fixed(10),
        item_height=1,
        indicators_enabled=True,
        environment_rows=3,
        reserved_lines=50,
    )
    assert capacity.resolved_height == 10
    assert capacity.indicator_lines == 2
    assert capacity.visible_count == 8


@pytest.mark.unit
def test_fill_height_uses_environment_minus_reserved() -> None:
    capacity = resolve_capacity(
        HeightMode.fill_available(),
        item_height=1,
        indicators_enabled=False,
        environment_rows=24,
        reserved_lines=4,
    )
    assert capacity.resolved_height == 20
    assert capacity.visible_count == 20


@pytest.mark.unit
def test_fill_height_never_drops_below_one_line() -> None:
    assert resolve_height(HeightMode.fill_available(), environment_rows=0, reserved_lines=10) == 1


@pytest.mark.unit
def test_indicator_budget_never_makes_capacity_negative() -> None:
    capacity = resolve_capacity(
        HeightMode.fill_available(),
        item_height=1,
        indicators_enabled=True,
        environment_rows=0,
    )
    assert capacity.resolved_height == 1
    assert capacity.visible_count == 0


@pytest.mark.unit
def test_item_height_divides_available_lines() -> None:
    capacity = resolve_capacity(
        HeightMode.fixed(12),
        item_height=3,
        indicators_enabled=True,
        environment_rows=24,
    )
    # (12 - 2) // 3
    assert capacity.visible_count == 3


@pytest.mark.unit
def test_resolve_capacity_validates_item_height_first() -> None:
    with pytest.raises(ConfigurationError, match="positive integer"):
        resolve_capacity(HeightMode.fixed(10), item_height=0, indicators_enabled=False, environment_rows=24)


@pytest.mark.unit
def test_height_mode_parse_accepts_ints_and_fill_aliases() -> None:
    assert HeightMode.parse(7) == HeightMode.fixed(7)
    assert HeightMode.parse("7") == HeightMode.fixed(7)
    assert HeightMode.parse("fill").fill
    assert HeightMode.parse("auto").fill
    assert str(HeightMode.parse("AUTO")) == "fill"


@pytest.mark.unit
@pytest.mark.parametrize("value", [0, -3, "tall", True, "²", "-4"])
def test_height_mode_parse_rejects_invalid_values(value) -> None:
    with pytest.raises(ConfigurationError):
        HeightMode.parse(value)
