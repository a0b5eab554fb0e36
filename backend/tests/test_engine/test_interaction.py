"""Tests for pointer event handling and mode transitions."""

from snowchart.engine.context import DimensionKey, Frame, Mode, ModeKind
from snowchart.engine.coordinates import axis_angle, to_cartesian
from snowchart.engine.interaction import (
    PointerEvent,
    PointerKind,
    PointerOutcome,
    handle_pointer,
    next_mode,
)


def _on_axis(frame: Frame, index: int) -> tuple[float, float]:
    p = to_cartesian(frame.center, frame.max_radius / 2, axis_angle(index))
    return p.x, p.y


def test_move_sets_hover(overview_frame):
    x, y = _on_axis(overview_frame, 2)
    outcome = handle_pointer(overview_frame, PointerEvent(PointerKind.MOVE, x, y))
    assert outcome.hover_index == 2
    assert outcome.hover_key is DimensionKey.PAST
    assert outcome.activated is None


def test_move_outside_clears_hover(overview_frame):
    outcome = handle_pointer(overview_frame, PointerEvent(PointerKind.MOVE, 0.0, 0.0))
    assert outcome.hover_index is None


def test_leave_clears_hover(overview_frame):
    frame = Frame(scores=overview_frame.scores, hover_index=3)
    outcome = handle_pointer(frame, PointerEvent(PointerKind.LEAVE))
    assert outcome == PointerOutcome(hover_index=None)


def test_click_in_wedge_activates(overview_frame):
    x, y = _on_axis(overview_frame, 4)
    outcome = handle_pointer(overview_frame, PointerEvent(PointerKind.CLICK, x, y))
    assert outcome.activated is DimensionKey.DIVIDEND
    mode = next_mode(overview_frame.mode, outcome)
    assert mode == Mode.focused(DimensionKey.DIVIDEND)
    assert mode.focus_index == 4


def test_click_outside_does_not_activate(overview_frame):
    outcome = handle_pointer(overview_frame, PointerEvent(PointerKind.CLICK, 1.0, 1.0))
    assert outcome.activated is None
    assert next_mode(overview_frame.mode, outcome) == overview_frame.mode


def test_focus_mode_ignores_move_and_click(focus_frame):
    x, y = _on_axis(focus_frame, 0)
    move = handle_pointer(focus_frame, PointerEvent(PointerKind.MOVE, x, y))
    click = handle_pointer(focus_frame, PointerEvent(PointerKind.CLICK, x, y))
    assert move.hover_index is None
    assert click.activated is None
    assert next_mode(focus_frame.mode, click).kind is ModeKind.FOCUS


def test_custom_tolerance(overview_frame):
    # 10px past the outer ring
    p = to_cartesian(overview_frame.center, overview_frame.max_radius + 10, axis_angle(1))
    event = PointerEvent(PointerKind.MOVE, p.x, p.y)
    assert handle_pointer(overview_frame, event, tolerance=20.0).hover_index == 1
    assert handle_pointer(overview_frame, event, tolerance=5.0).hover_index is None
