"""
Tests for channel.py - snapshot broadcast.
"""

import queue
import threading

import pytest

from torus_snake.channel import SnapshotChannel, SubscriptionClosed
from torus_snake.model import GameState


def _state(score):
    return GameState(food=(0, 0), snake=((1, 1),), score=score)


@pytest.fixture
def channel():
    return SnapshotChannel(_state(0))


class TestSnapshotChannel:
    """Tests for publish/subscribe ordering."""

    def test_new_subscriber_sees_current_first(self, channel):
        channel.publish(_state(1))
        sub = channel.subscribe()
        assert sub.get(timeout=1) == _state(1)

    def test_every_snapshot_in_order(self, channel):
        sub = channel.subscribe()
        for i in range(1, 50):
            channel.publish(_state(i))
        assert [s.score for s in sub.drain()] == list(range(50))

    def test_many_subscribers_see_the_same_stream(self, channel):
        subs = [channel.subscribe() for _ in range(3)]
        channel.publish(_state(1))
        channel.publish(_state(2))
        streams = [[s.score for s in sub.drain()] for sub in subs]
        assert streams == [[0, 1, 2]] * 3

    def test_late_subscriber_has_no_history(self, channel):
        channel.publish(_state(1))
        channel.publish(_state(2))
        sub = channel.subscribe()
        assert [s.score for s in sub.drain()] == [2]

    def test_current(self, channel):
        channel.publish(_state(5))
        assert channel.current == _state(5)

    def test_get_times_out(self, channel):
        sub = channel.subscribe()
        sub.drain()
        with pytest.raises(queue.Empty):
            sub.get(timeout=0.01)

    def test_no_gaps_with_concurrent_subscribe(self, channel):
        """A subscriber joining mid-stream sees a contiguous run to the end."""
        subs = []

        def join_later():
            subs.append(channel.subscribe())

        joiner = threading.Thread(target=join_later)
        for i in range(1, 200):
            if i == 100:
                joiner.start()
            channel.publish(_state(i))
        joiner.join()

        scores = [s.score for s in subs[0].drain()]
        assert scores == list(range(scores[0], 200))


class TestSubscription:
    """Tests for subscription lifecycle."""

    def test_close_unregisters(self, channel):
        sub = channel.subscribe()
        assert channel.subscriber_count == 1
        sub.close()
        assert sub.closed is True
        assert channel.subscriber_count == 0
        channel.publish(_state(1))
        assert [s.score for s in sub.drain()] == [0]

    def test_get_after_close_raises(self, channel):
        sub = channel.subscribe()
        sub.drain()
        sub.close()
        with pytest.raises(SubscriptionClosed):
            sub.get(timeout=1)
        with pytest.raises(SubscriptionClosed):
            sub.get(timeout=1)

    def test_close_twice(self, channel):
        sub = channel.subscribe()
        sub.close()
        sub.close()
        assert channel.subscriber_count == 0

    def test_iteration_stops_at_close(self, channel):
        sub = channel.subscribe()
        channel.publish(_state(1))
        sub.close()
        assert [s.score for s in sub] == [0, 1]

    def test_iterating_in_another_thread(self, channel):
        sub = channel.subscribe()
        seen = []
        reader = threading.Thread(target=lambda: seen.extend(s.score for s in sub))
        reader.start()
        for i in range(1, 10):
            channel.publish(_state(i))
        sub.close()
        reader.join(timeout=2)
        assert seen == list(range(10))

    def test_context_manager_closes(self, channel):
        with channel.subscribe() as sub:
            assert channel.subscriber_count == 1
        assert sub.closed is True
        assert channel.subscriber_count == 0
