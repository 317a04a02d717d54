import json
from typing import Callable

from fabric.hyprland.service import HyprlandEvent
from fabric.hyprland.widgets import get_hyprland_connection
from loguru import logger

from .workspaces import DirectoryError


def parse_workspace_count(reply: str) -> int:
    """Highest regular workspace id in a `j/workspaces` reply, at least 1."""
    try:
        workspaces = json.loads(reply)
        ids = [int(ws["id"]) for ws in workspaces]
    except (ValueError, TypeError, KeyError) as e:
        raise DirectoryError(f"Malformed workspaces reply: {e}") from e

    # special workspaces (scratchpads) use negative ids
    return max([ws_id for ws_id in ids if ws_id > 0], default=1)


def parse_active_workspace_id(reply: str) -> int:
    try:
        return int(json.loads(reply)["id"])
    except (ValueError, TypeError, KeyError) as e:
        raise DirectoryError(f"Malformed active workspace reply: {e}") from e


def parse_event_workspace_id(event: HyprlandEvent) -> int:
    try:
        return int(event.data[0])
    except (IndexError, ValueError) as e:
        raise DirectoryError(f"Malformed {event.name} event: {event.data}") from e


class HyprlandDirectory:
    """Workspace directory backed by the Hyprland IPC sockets."""

    def __init__(self, connection=None):
        self._connection = connection
        self._handler_ids = []

    @property
    def connection(self):
        if self._connection is None:
            self._connection = get_hyprland_connection()
        return self._connection

    def _send(self, command: str) -> str:
        try:
            reply = self.connection.send_command(command)
        except Exception as e:
            raise DirectoryError(f"'{command}' could not be sent: {e}") from e
        return reply.reply.decode()

    def get_active_workspace_id(self) -> int:
        return parse_active_workspace_id(self._send("j/activeworkspace"))

    def get_workspace_count(self) -> int:
        return parse_workspace_count(self._send("j/workspaces"))

    def switch_to_workspace(self, workspace_id: int) -> None:
        reply = self._send(f"dispatch workspace {workspace_id}").strip()
        if reply != "ok":
            raise DirectoryError(f"Workspace {workspace_id} was rejected: {reply}")

    def subscribe(
        self,
        on_added: Callable[[], None],
        on_removed: Callable[[], None],
        on_focus_changed: Callable[[int], None],
    ) -> None:
        def on_focus_event(_, event: HyprlandEvent):
            try:
                on_focus_changed(parse_event_workspace_id(event))
            except DirectoryError as e:
                logger.warning(f"[Workspaces] {e}")

        try:
            connection = self.connection
            self._handler_ids = [
                connection.connect("event::createworkspacev2", lambda *_: on_added()),
                connection.connect(
                    "event::destroyworkspacev2", lambda *_: on_removed()
                ),
                connection.connect("event::workspacev2", on_focus_event),
            ]
        except Exception as e:
            raise DirectoryError(f"Could not subscribe to Hyprland events: {e}") from e

    def unsubscribe(self) -> None:
        handler_ids, self._handler_ids = self._handler_ids, []
        for handler_id in handler_ids:
            self.connection.disconnect(handler_id)
