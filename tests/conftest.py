import threading

import pytest

from services.channel import CoalescingChannel
from services.workspaces import DirectoryError, WorkspaceSynchronizer


class FakeDirectory:
    """In-memory workspace directory recording every switch command."""

    def __init__(self, count=1, active=1):
        self.count = count
        self.active = active
        self.switches = []
        self.fail_queries = False
        self.fail_switch = False
        self.fail_subscribe = False
        self.handlers = None

    def get_active_workspace_id(self):
        if self.fail_queries:
            raise DirectoryError("socket unreachable")
        return self.active

    def get_workspace_count(self):
        if self.fail_queries:
            raise DirectoryError("socket unreachable")
        return self.count

    def subscribe(self, on_added, on_removed, on_focus_changed):
        if self.fail_subscribe:
            raise DirectoryError("event socket unreachable")
        self.handlers = (on_added, on_removed, on_focus_changed)

    def unsubscribe(self):
        self.handlers = None

    def switch_to_workspace(self, workspace_id):
        self.switches.append(workspace_id)
        if self.fail_switch:
            raise DirectoryError(f"invalid workspace {workspace_id}")

    def add_workspace(self):
        self.count += 1
        self.handlers[0]()

    def remove_workspace(self):
        self.count -= 1
        self.handlers[1]()

    def focus(self, workspace_id):
        self.active = workspace_id
        self.handlers[2](workspace_id)


class ManualScheduler:
    """Stands in for GLib.idle_add; callbacks run only when the test says so."""

    def __init__(self):
        self.callbacks = []
        self._lock = threading.Lock()

    def __call__(self, callback):
        with self._lock:
            self.callbacks.append(callback)

    def run_once(self):
        """Run one main loop turn for every scheduled callback."""
        with self._lock:
            callbacks, self.callbacks = self.callbacks, []
        for callback in callbacks:
            # GLib drops an idle source whose callback raised
            try:
                keep = callback()
            except Exception:
                keep = False
            if keep:
                self(callback)

    def run_until_idle(self, max_turns=100):
        for _ in range(max_turns):
            if not self.callbacks:
                return
            self.run_once()
        raise AssertionError("scheduler never became idle")


@pytest.fixture
def directory():
    return FakeDirectory(count=4, active=2)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def synchronizer(directory):
    return WorkspaceSynchronizer(directory)


@pytest.fixture
def channel(synchronizer, scheduler):
    return CoalescingChannel(
        synchronizer.apply_directory_event, capacity=2, scheduler=scheduler
    )
