import pytest

from services.input_mapper import (
    ScrollGesture,
    ScrollSource,
    gesture_from_gdk,
    intent_for_button,
    intent_for_scroll,
)
from services.workspaces import CycleBy, CycleDirection, SwitchTo

PREVIOUS = CycleBy(CycleDirection.PREVIOUS)
NEXT = CycleBy(CycleDirection.NEXT)


@pytest.mark.parametrize("index, workspace_id", [(0, 1), (1, 2), (9, 10)])
def test_button_index_maps_to_workspace_id(index, workspace_id):
    assert intent_for_button(index) == SwitchTo(workspace_id)


@pytest.mark.parametrize("source", list(ScrollSource))
@pytest.mark.parametrize(
    "dy, expected",
    [
        (1.0, PREVIOUS),
        (0.01, PREVIOUS),
        (42.5, PREVIOUS),
        (-1.0, NEXT),
        (-0.01, NEXT),
        (-300.0, NEXT),
    ],
)
def test_scroll_sign_selects_direction_for_any_source(source, dy, expected):
    assert intent_for_scroll(ScrollGesture(source, dy)) == expected


def test_zero_delta_produces_no_intent():
    assert intent_for_scroll(ScrollGesture(ScrollSource.PIXELS, 0.0)) is None


def test_reverse_scroll_flips_direction():
    gesture = ScrollGesture(ScrollSource.LINES, 1.0)
    assert intent_for_scroll(gesture, reverse=True) == NEXT


@pytest.mark.parametrize(
    "direction, delta_y, expected",
    [
        ("up", 0.0, ScrollGesture(ScrollSource.LINES, 1.0)),
        ("down", 0.0, ScrollGesture(ScrollSource.LINES, -1.0)),
        # GTK smooth deltas point down, so scrolling up reports a negative y
        ("smooth", -2.5, ScrollGesture(ScrollSource.PIXELS, 2.5)),
        ("smooth", 0.75, ScrollGesture(ScrollSource.PIXELS, -0.75)),
        ("left", 0.0, None),
        ("right", 0.0, None),
    ],
)
def test_gesture_from_gdk(direction, delta_y, expected):
    assert gesture_from_gdk(direction, delta_y) == expected


def test_wheel_up_and_touchpad_up_agree():
    wheel = intent_for_scroll(gesture_from_gdk("up"))
    touchpad = intent_for_scroll(gesture_from_gdk("smooth", -3.0))
    assert wheel == touchpad == PREVIOUS
