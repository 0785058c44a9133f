"""Unit tests for the viewport engine state machine."""

import pytest

from termlist.core.capacity import ConfigurationError
from termlist.core.viewport import (
    Alignment,
    ViewportEngine,
    ViewportHandle,
    ViewportState,
    clamp_offset,
    minimal_scroll_offset,
)


def _assert_in_range(engine: ViewportEngine) -> None:
    viewport = engine.get_viewport()
    assert 0 <= viewport.offset <= max(0, viewport.total_count - viewport.visible_count)


@pytest.mark.unit
def test_initial_offset_brings_selection_into_view() -> None:
    assert ViewportEngine(total_count=100, visible_count=10, selected_index=0).offset == 0
    assert ViewportEngine(total_count=100, visible_count=10, selected_index=9).offset == 0
    assert ViewportEngine(total_count=100, visible_count=10, selected_index=25).offset == 16


@pytest.mark.unit
def test_initial_offset_clamps_out_of_range_selection() -> None:
    assert ViewportEngine(total_count=100, visible_count=10, selected_index=500).offset == 90
    assert ViewportEngine(total_count=100, visible_count=10, selected_index=-4).offset == 0


@pytest.mark.unit
def test_empty_list_is_degenerate_but_valid() -> None:
    engine = ViewportEngine(total_count=0, visible_count=10, selected_index=3)
    viewport = engine.get_viewport()
    assert viewport == ViewportState(offset=0, visible_count=10, total_count=0)
    assert viewport.visible_slice([]) == []
    engine.scroll_to_index(5, "bottom")
    engine.sync_selection(2)
    engine.remeasure()
    assert engine.offset == 0


@pytest.mark.unit
def test_selection_jump_scrolls_minimally_down() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10, selected_index=5)
    assert engine.offset == 0

    engine.sync_selection(50)

    assert engine.offset == 41


@pytest.mark.unit
def test_selection_above_viewport_becomes_top_row() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10, selected_index=50)
    assert engine.offset == 41

    engine.sync_selection(12)

    assert engine.offset == 12


@pytest.mark.unit
def test_visible_selection_does_not_recenter() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(30, "top")

    for selected in range(30, 40):
        engine.sync_selection(selected)
        assert engine.offset == 30


@pytest.mark.unit
def test_sync_selection_is_idempotent() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10, selected_index=73)
    first = engine.sync_selection(73)
    second = engine.sync_selection(73)
    assert first == second


@pytest.mark.unit
def test_scroll_to_index_center() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(20, "center")
    assert engine.offset == 15


@pytest.mark.unit
def test_scroll_to_index_center_clamps_near_edges() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(2, Alignment.CENTER)
    assert engine.offset == 0
    engine.scroll_to_index(98, Alignment.CENTER)
    assert engine.offset == 90


@pytest.mark.unit
def test_scroll_to_index_top_and_bottom() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(40, "top")
    assert engine.offset == 40
    engine.scroll_to_index(40, "bottom")
    assert engine.offset == 31
    engine.scroll_to_index(3, "bottom")
    assert engine.offset == 0


@pytest.mark.unit
def test_scroll_to_index_auto_uses_minimal_scroll() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(30, "top")

    engine.scroll_to_index(35)
    assert engine.offset == 30

    engine.scroll_to_index(45)
    assert engine.offset == 36

    engine.scroll_to_index(10, "auto")
    assert engine.offset == 10


@pytest.mark.unit
def test_scroll_to_index_clamps_target() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(1000, "top")
    assert engine.offset == 90
    engine.scroll_to_index(-50, "bottom")
    assert engine.offset == 0


@pytest.mark.unit
def test_unknown_alignment_is_a_configuration_error() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    with pytest.raises(ConfigurationError, match="alignment"):
        engine.scroll_to_index(5, "middle")


@pytest.mark.unit
def test_shrinking_list_clamps_offset() -> None:
    engine = ViewportEngine(total_count=50, visible_count=3)
    engine.scroll_to_index(30, "top")
    assert engine.offset == 30

    engine.update(total_count=5, visible_count=3, selected_index=30)

    assert engine.offset == max(0, 5 - 3)


@pytest.mark.unit
def test_remeasure_only_clamps_down() -> None:
    engine = ViewportEngine(total_count=50, visible_count=10)
    engine.scroll_to_index(20, "top")
    engine.remeasure()
    assert engine.offset == 20


@pytest.mark.unit
def test_update_applies_counts_before_selection() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(60, "top")

    # Viewport grows and list shrinks at once; selection 70 must end up visible
    engine.update(total_count=80, visible_count=20, selected_index=70)

    viewport = engine.get_viewport()
    assert viewport.offset == 60
    assert 70 in viewport.visible_indices()


@pytest.mark.unit
def test_zero_capacity_keeps_offset_in_range() -> None:
    engine = ViewportEngine(total_count=10, visible_count=0, selected_index=4)
    _assert_in_range(engine)
    assert engine.get_viewport().visible_slice(list(range(10))) == []


@pytest.mark.unit
@pytest.mark.parametrize("total", [0, 1, 5, 10, 23])
@pytest.mark.parametrize("visible", [0, 1, 4, 10, 30])
def test_offset_stays_in_range_after_every_transition(total: int, visible: int) -> None:
    engine = ViewportEngine(total_count=total, visible_count=visible, selected_index=total // 2)
    _assert_in_range(engine)
    for target in (-3, 0, 1, total // 3, total - 1, total, total + 7):
        engine.sync_selection(target)
        _assert_in_range(engine)
        for alignment in Alignment:
            engine.scroll_to_index(target, alignment)
            _assert_in_range(engine)
    engine.update(total_count=max(0, total - 4), visible_count=visible + 1, selected_index=total)
    _assert_in_range(engine)
    engine.remeasure()
    _assert_in_range(engine)


@pytest.mark.unit
def test_listeners_receive_post_transition_state_once() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    seen: list[ViewportState] = []
    remove = engine.add_listener(lambda viewport: seen.append(viewport))

    engine.sync_selection(50)
    engine.sync_selection(45)  # Already visible: no change, no notification
    engine.scroll_to_index(20, "center")

    assert [v.offset for v in seen] == [41, 15]
    assert seen[-1] == engine.get_viewport()

    remove()
    engine.scroll_to_index(0, "top")
    assert len(seen) == 2


@pytest.mark.unit
def test_update_notifies_once_for_combined_change() -> None:
    engine = ViewportEngine(total_count=100, visible_count=10)
    engine.scroll_to_index(50, "top")
    seen: list[ViewportState] = []
    engine.add_listener(seen.append)

    engine.update(total_count=20, visible_count=5, selected_index=3)

    assert seen == [ViewportState(offset=3, visible_count=5, total_count=20)]


@pytest.mark.unit
def test_get_viewport_is_a_pure_read() -> None:
    engine = ViewportEngine(total_count=30, visible_count=10, selected_index=15)
    assert engine.get_viewport() == engine.get_viewport()
    assert engine.offset == 6


@pytest.mark.unit
def test_engine_satisfies_handle_protocol() -> None:
    assert isinstance(ViewportEngine(), ViewportHandle)


@pytest.mark.unit
def test_pure_helpers() -> None:
    assert minimal_scroll_offset(5, 10, 10) == 5
    assert minimal_scroll_offset(25, 10, 10) == 16
    assert minimal_scroll_offset(12, 10, 10) == 10
    assert clamp_offset(-5, 10, 100) == 0
    assert clamp_offset(95, 10, 100) == 90
    assert clamp_offset(3, 10, 4) == 0
