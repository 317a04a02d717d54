import threading
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Optional, TypeVar

from loguru import logger

T = TypeVar("T")


def _idle_add(callback: Callable[[], bool]):
    from gi.repository import GLib

    return GLib.idle_add(callback)


class CoalescingChannel(Generic[T]):
    """Bounded single-consumer channel that keeps only the freshest messages.

    Producers may call `send` from any thread. A pending message with the
    same coalesce key is replaced by the newer one and moved to the back of
    the queue. When more keys are pending than `capacity`, the oldest one is
    dropped.

    Delivery happens through `scheduler` (GLib.idle_add by default), one
    message per scheduled turn, so the consumer always runs on the main loop.
    """

    def __init__(
        self,
        consumer: Callable[[T], None],
        capacity: int = 1,
        coalesce_key: Callable[[T], Hashable] = type,
        scheduler: Optional[Callable[[Callable[[], bool]], object]] = None,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")

        self.consumer = consumer
        self.capacity = capacity
        self.coalesce_key = coalesce_key
        self.scheduler = scheduler or _idle_add

        self._pending: "OrderedDict[Hashable, T]" = OrderedDict()
        self._lock = threading.Lock()
        self._scheduled = False
        self._closed = False

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, message: T) -> bool:
        """Queue a message. Returns False once the channel is closed."""
        key = self.coalesce_key(message)

        with self._lock:
            if self._closed:
                return False

            if key in self._pending:
                logger.debug(f"[Channel] Coalesced {self._pending[key]!r} into {message!r}")
                del self._pending[key]

            self._pending[key] = message

            while len(self._pending) > self.capacity:
                _, dropped = self._pending.popitem(last=False)
                logger.debug(f"[Channel] Dropped stale message {dropped!r}")

            schedule = not self._scheduled
            self._scheduled = True

        if schedule:
            self.scheduler(self._deliver)
        return True

    def receive(self) -> Optional[T]:
        """Pop the oldest pending message, or None when empty."""
        with self._lock:
            if not self._pending:
                return None
            _, message = self._pending.popitem(last=False)
            return message

    def _deliver(self) -> bool:
        message = self.receive()
        if message is not None and not self._closed:
            try:
                self.consumer(message)
            except Exception as e:
                logger.exception(f"[Channel] Consumer failed on {message!r}: {e}")

        with self._lock:
            if self._pending and not self._closed:
                return True
            self._scheduled = False
            return False

    def close(self):
        with self._lock:
            self._closed = True
            self._pending.clear()
