import pytest

from classic_snake.scheduler import RepeatingTimer


class Counter:
    def __init__(self):
        self.calls = 0
        self.hook = None

    def __call__(self):
        self.calls += 1
        if self.hook:
            self.hook()


def test_fires_once_per_interval_and_keeps_remainder():
    counter = Counter()
    timer = RepeatingTimer(counter)
    timer.start(100)
    assert timer.advance(99) == 0
    assert timer.advance(1) == 1
    assert timer.advance(250) == 2
    assert timer.advance(50) == 1
    assert counter.calls == 4


def test_inactive_timer_never_fires():
    counter = Counter()
    timer = RepeatingTimer(counter)
    assert not timer.active
    assert timer.advance(1000) == 0
    assert counter.calls == 0


def test_cancel_is_immediate_and_idempotent():
    counter = Counter()
    timer = RepeatingTimer(counter)
    timer.start(100)
    timer.advance(90)
    timer.cancel()
    timer.cancel()
    assert not timer.active
    assert timer.advance(500) == 0
    assert counter.calls == 0


def test_cancel_from_callback_stops_the_batch():
    counter = Counter()
    timer = RepeatingTimer(counter)
    counter.hook = timer.cancel
    timer.start(10)
    assert timer.advance(100) == 1
    assert counter.calls == 1


def test_rearm_replaces_the_schedule():
    counter = Counter()
    timer = RepeatingTimer(counter)
    timer.start(100)
    timer.advance(80)
    timer.start(50)
    assert timer.interval_ms == 50
    assert timer.advance(40) == 0
    assert timer.advance(10) == 1


def test_rearm_from_callback_resets_accumulator():
    counter = Counter()
    timer = RepeatingTimer(counter)

    def speed_up():
        if counter.calls == 1:
            timer.start(50)

    counter.hook = speed_up
    timer.start(100)
    assert timer.advance(300) == 1
    assert timer.active
    assert timer.interval_ms == 50
    assert timer.advance(50) == 1


@pytest.mark.parametrize("interval", [0, -5])
def test_rejects_non_positive_interval(interval):
    timer = RepeatingTimer(lambda: None)
    with pytest.raises(ValueError):
        timer.start(interval)
