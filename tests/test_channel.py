import threading

import pytest

from services.channel import CoalescingChannel
from services.workspaces import FocusChanged, WorkspaceCountChanged, WorkspaceSetState


def test_coalesces_unconsumed_count_updates(channel, scheduler, synchronizer):
    channel.send(WorkspaceCountChanged(2))
    channel.send(WorkspaceCountChanged(5))

    assert len(channel) == 1
    scheduler.run_until_idle()
    assert synchronizer.state.total_workspaces == 5


def test_focus_and_count_do_not_replace_each_other(channel, scheduler, synchronizer):
    channel.send(WorkspaceCountChanged(4))
    channel.send(FocusChanged(3))
    channel.send(WorkspaceCountChanged(6))

    scheduler.run_until_idle()
    assert synchronizer.state == WorkspaceSetState(6, 3)


def test_delivers_one_message_per_turn(scheduler):
    received = []
    channel = CoalescingChannel(received.append, capacity=3, scheduler=scheduler)
    channel.send(WorkspaceCountChanged(2))
    channel.send(FocusChanged(2))

    assert len(scheduler.callbacks) == 1

    scheduler.run_once()
    assert received == [WorkspaceCountChanged(2)]

    scheduler.run_once()
    assert received == [WorkspaceCountChanged(2), FocusChanged(2)]
    assert scheduler.callbacks == []


def test_coalesced_message_moves_to_back(scheduler):
    received = []
    channel = CoalescingChannel(received.append, capacity=2, scheduler=scheduler)
    channel.send(WorkspaceCountChanged(2))
    channel.send(FocusChanged(1))
    channel.send(WorkspaceCountChanged(3))

    scheduler.run_until_idle()
    assert received == [FocusChanged(1), WorkspaceCountChanged(3)]


def test_over_capacity_drops_oldest(scheduler):
    received = []
    channel = CoalescingChannel(received.append, capacity=1, scheduler=scheduler)
    channel.send(FocusChanged(2))
    channel.send(WorkspaceCountChanged(4))

    scheduler.run_until_idle()
    assert received == [WorkspaceCountChanged(4)]


def test_reschedules_after_draining(scheduler):
    received = []
    channel = CoalescingChannel(received.append, scheduler=scheduler)
    channel.send(WorkspaceCountChanged(2))
    scheduler.run_until_idle()
    channel.send(WorkspaceCountChanged(3))
    scheduler.run_until_idle()

    assert received == [WorkspaceCountChanged(2), WorkspaceCountChanged(3)]


def test_closed_channel_rejects_and_discards(scheduler):
    received = []
    channel = CoalescingChannel(received.append, scheduler=scheduler)
    channel.send(WorkspaceCountChanged(2))
    channel.close()

    assert channel.send(WorkspaceCountChanged(3)) is False
    scheduler.run_until_idle()
    assert received == []
    assert channel.closed


def test_concurrent_producers_keep_latest_value(scheduler):
    received = []
    channel = CoalescingChannel(received.append, scheduler=scheduler)

    def produce(values):
        for value in values:
            channel.send(WorkspaceCountChanged(value))

    threads = [
        threading.Thread(target=produce, args=(range(i * 100, i * 100 + 100),))
        for i in range(4)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    channel.send(WorkspaceCountChanged(1000))
    scheduler.run_until_idle()
    assert received[-1] == WorkspaceCountChanged(1000)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CoalescingChannel(lambda _: None, capacity=0, scheduler=lambda _: None)


def test_failing_consumer_does_not_stall_delivery(scheduler):
    received = []

    def consumer(message):
        if message == WorkspaceCountChanged(2):
            raise KeyError("name")
        received.append(message)

    channel = CoalescingChannel(consumer, scheduler=scheduler)
    channel.send(WorkspaceCountChanged(2))
    scheduler.run_until_idle()

    channel.send(WorkspaceCountChanged(5))
    scheduler.run_until_idle()

    assert received == [WorkspaceCountChanged(5)]
    assert len(channel) == 0
