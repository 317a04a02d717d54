from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Protocol, Tuple, Union

from loguru import logger

__all__ = [
    "CycleBy",
    "CycleDirection",
    "DirectoryError",
    "DirectoryEvent",
    "FocusChanged",
    "SwitchTo",
    "UserIntent",
    "WorkspaceCountChanged",
    "WorkspaceDirectory",
    "WorkspaceSetState",
    "WorkspaceSynchronizer",
    "cycle_target",
    "reduce_directory_event",
    "reduce_user_intent",
]


class DirectoryError(Exception):
    """Raised when the workspace directory cannot answer a query or command."""


class WorkspaceDirectory(Protocol):
    """What the bar needs from the window manager."""

    def get_active_workspace_id(self) -> int: ...

    def get_workspace_count(self) -> int: ...

    def subscribe(
        self,
        on_added: Callable[[], None],
        on_removed: Callable[[], None],
        on_focus_changed: Callable[[int], None],
    ) -> None: ...

    def unsubscribe(self) -> None: ...

    def switch_to_workspace(self, workspace_id: int) -> None: ...


@dataclass(frozen=True)
class WorkspaceSetState:
    total_workspaces: int = 1
    focus_at: int = 1

    @property
    def in_range(self) -> bool:
        return 1 <= self.focus_at <= self.total_workspaces


# Directory events
@dataclass(frozen=True)
class WorkspaceCountChanged:
    new_total: int


@dataclass(frozen=True)
class FocusChanged:
    workspace_id: int


DirectoryEvent = Union[WorkspaceCountChanged, FocusChanged]


# User intents
class CycleDirection(Enum):
    PREVIOUS = -1
    NEXT = 1


@dataclass(frozen=True)
class SwitchTo:
    workspace_id: int


@dataclass(frozen=True)
class CycleBy:
    direction: CycleDirection


UserIntent = Union[SwitchTo, CycleBy]


def cycle_target(state: WorkspaceSetState, direction: CycleDirection) -> int:
    """Step focus around the 1-based ring of workspace ids."""
    total = max(state.total_workspaces, 1)
    return (state.focus_at - 1 + direction.value) % total + 1


def reduce_directory_event(
    state: WorkspaceSetState, event: DirectoryEvent
) -> WorkspaceSetState:
    if isinstance(event, WorkspaceCountChanged):
        total = max(event.new_total, 1)
        return replace(
            state,
            total_workspaces=total,
            focus_at=min(max(state.focus_at, 1), total),
        )

    if isinstance(event, FocusChanged):
        # special workspaces carry negative ids
        if event.workspace_id < 1:
            return state
        return replace(
            state,
            total_workspaces=max(state.total_workspaces, event.workspace_id),
            focus_at=event.workspace_id,
        )

    raise TypeError(f"Unknown directory event: {event!r}")


def reduce_user_intent(
    state: WorkspaceSetState, intent: UserIntent
) -> Tuple[WorkspaceSetState, Optional[int]]:
    """Return the new state and the workspace id to switch to, if any."""
    if isinstance(intent, CycleBy):
        intent = SwitchTo(cycle_target(state, intent.direction))

    if isinstance(intent, SwitchTo):
        if intent.workspace_id == state.focus_at:
            return state, None
        return replace(state, focus_at=intent.workspace_id), intent.workspace_id

    raise TypeError(f"Unknown user intent: {intent!r}")


class WorkspaceSynchronizer:
    """Owns the workspace state shown by the bar.

    Lives on the GTK main loop. Directory events arrive through the
    ingestion channel, user intents from the input mapper. Switch commands
    are applied to the local state before the directory confirms them.
    """

    def __init__(
        self,
        directory: WorkspaceDirectory,
        state: Optional[WorkspaceSetState] = None,
    ):
        self.directory = directory
        self._state = state or WorkspaceSetState()
        self._listeners: List[Callable[[WorkspaceSetState], None]] = []

    @property
    def state(self) -> WorkspaceSetState:
        return self._state

    def connect_changed(self, callback: Callable[[WorkspaceSetState], None]):
        self._listeners.append(callback)

    def _set_state(self, state: WorkspaceSetState):
        if state == self._state:
            return
        self._state = state
        for callback in self._listeners:
            callback(state)

    def apply_directory_event(self, event: DirectoryEvent):
        new_state = reduce_directory_event(self._state, event)
        if (
            isinstance(event, WorkspaceCountChanged)
            and new_state.focus_at != self._state.focus_at
        ):
            logger.debug(
                f"[Workspaces] Focus {self._state.focus_at} clamped to {new_state.focus_at}"
            )
        self._set_state(new_state)

    def apply_user_intent(self, intent: UserIntent):
        new_state, command = reduce_user_intent(self._state, intent)
        self._set_state(new_state)

        if command is None:
            return

        try:
            self.directory.switch_to_workspace(command)
        except DirectoryError as e:
            logger.error(f"[Workspaces] Failed to switch to workspace {command}: {e}")
