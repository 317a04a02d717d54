import threading
from typing import Optional

from loguru import logger

from utils.thread import run_in_thread

from .channel import CoalescingChannel
from .workspaces import (
    DirectoryError,
    DirectoryEvent,
    FocusChanged,
    WorkspaceCountChanged,
    WorkspaceDirectory,
)


class WorkspaceListener:
    """Background producer feeding directory events into a channel.

    Add/remove notifications only wake the worker thread; the worker does
    the blocking count query, so a slow compositor never stalls the UI.
    Focus notifications already carry their id and are sent directly.
    """

    def __init__(
        self,
        directory: WorkspaceDirectory,
        channel: CoalescingChannel[DirectoryEvent],
    ):
        self.directory = directory
        self.channel = channel
        self.subscribed = False
        self.thread: Optional[threading.Thread] = None

        self._refresh_requested = threading.Event()
        self._stopped = threading.Event()

    def start(self) -> threading.Thread:
        try:
            self.directory.subscribe(
                on_added=self.request_refresh,
                on_removed=self.request_refresh,
                on_focus_changed=self.on_focus_changed,
            )
            self.subscribed = True
        except DirectoryError as e:
            logger.error(
                f"[Workspaces] Failed to listen for workspace events, count will not update: {e}"
            )

        self.thread = self._run()
        return self.thread

    def stop(self):
        self._stopped.set()
        self._refresh_requested.set()

        if self.subscribed:
            self.subscribed = False
            self.directory.unsubscribe()

    def request_refresh(self):
        self._refresh_requested.set()

    def on_focus_changed(self, workspace_id: int):
        if not self._stopped.is_set():
            self.channel.send(FocusChanged(workspace_id))

    def push_initial(self):
        try:
            total = self.directory.get_workspace_count()
        except DirectoryError as e:
            logger.error(f"[Workspaces] Failed to get total workspace number: {e}")
            total = 1
        self.channel.send(WorkspaceCountChanged(total))

        try:
            active = self.directory.get_active_workspace_id()
        except DirectoryError as e:
            logger.error(f"[Workspaces] Failed to get active workspace: {e}")
            active = 1
        self.channel.send(FocusChanged(active))

    def refresh(self) -> bool:
        """Re-query the workspace count and push it. Skipped on failure."""
        try:
            total = self.directory.get_workspace_count()
        except DirectoryError as e:
            logger.warning(f"[Workspaces] Skipping workspace refresh: {e}")
            return False
        return self.channel.send(WorkspaceCountChanged(total))

    @run_in_thread
    def _run(self):
        self.push_initial()

        if not self.subscribed:
            return

        while True:
            self._refresh_requested.wait()
            self._refresh_requested.clear()
            if self._stopped.is_set():
                return
            self.refresh()
