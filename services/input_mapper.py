from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .workspaces import CycleBy, CycleDirection, SwitchTo, UserIntent

__all__ = [
    "ScrollGesture",
    "ScrollSource",
    "gesture_from_gdk",
    "intent_for_button",
    "intent_for_scroll",
]


class ScrollSource(Enum):
    LINES = "lines"  # discrete mouse wheel
    PIXELS = "pixels"  # smooth scrolling, touchpads


@dataclass(frozen=True)
class ScrollGesture:
    """Vertical scroll delta where positive always means up (away from the user)."""

    source: ScrollSource
    dy: float


def intent_for_button(index: int) -> UserIntent:
    """Buttons are laid out 0-based, workspace ids start at 1."""
    return SwitchTo(index + 1)


def intent_for_scroll(
    gesture: ScrollGesture, reverse: bool = False
) -> Optional[UserIntent]:
    dy = -gesture.dy if reverse else gesture.dy
    if dy > 0:
        return CycleBy(CycleDirection.PREVIOUS)
    if dy < 0:
        return CycleBy(CycleDirection.NEXT)
    return None


def gesture_from_gdk(direction: str, delta_y: float = 0.0) -> Optional[ScrollGesture]:
    """Normalize a GTK scroll event.

    `direction` is the lowercased Gdk.ScrollDirection nick. GTK reports
    smooth deltas with positive y pointing down, so the sign is flipped.
    """
    match direction:
        case "up":
            return ScrollGesture(ScrollSource.LINES, 1.0)
        case "down":
            return ScrollGesture(ScrollSource.LINES, -1.0)
        case "smooth":
            return ScrollGesture(ScrollSource.PIXELS, -delta_y)
        case _:
            return None
