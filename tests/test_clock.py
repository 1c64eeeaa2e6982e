"""Tests for the tick scheduler."""

from termsnake.clock import is_due, monotonic_ms


class TestIsDue:
    """Tests for the fixed-interval gate."""

    def test_not_due_until_interval_strictly_elapsed(self, make_state):
        state = make_state(interval=100, last_tick=0)
        assert is_due(state, 50) is False
        assert is_due(state, 100) is False
        assert is_due(state, 101) is True
        assert state.last_tick_ms == 101

    def test_due_consumes_the_tick(self, make_state):
        """Right after a tick, nothing is due until another full interval."""
        state = make_state(interval=100, last_tick=0)
        assert is_due(state, 101)
        assert not is_due(state, 101)
        assert not is_due(state, 150)
        assert not is_due(state, 201)
        assert is_due(state, 202)

    def test_slow_frame_yields_a_single_tick(self, make_state):
        """No catch-up after many missed intervals."""
        state = make_state(interval=20, last_tick=0)
        assert is_due(state, 10_000)
        assert not is_due(state, 10_000)
        assert not is_due(state, 10_015)

    def test_fast_polling_fires_once_per_window(self, make_state):
        """Polling every millisecond for one second ticks about once per interval."""
        state = make_state(interval=100, last_tick=0)
        ticks = sum(is_due(state, now) for now in range(1, 1001))
        assert ticks == 9


class TestMonotonicMs:

    def test_is_non_decreasing_int(self):
        a = monotonic_ms()
        b = monotonic_ms()
        assert isinstance(a, int)
        assert b >= a
