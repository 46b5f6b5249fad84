import pytest

from gridsnake.scheduler import ManualScheduler, PygameScheduler


def test_manual_fires_on_interval():
    sched = ManualScheduler()
    calls = []
    sched.schedule(100, lambda: calls.append(sched.now()))
    assert sched.advance(99) == 0
    assert sched.advance(1) == 1
    assert sched.advance(250) == 2
    assert calls == [100, 200, 300]
    assert sched.now() == 350


def test_cancel_stops_timer():
    sched = ManualScheduler()
    calls = []
    handle = sched.schedule(10, lambda: calls.append(1))
    sched.advance(10)
    sched.cancel(handle)
    sched.cancel(handle)
    sched.cancel(None)
    sched.advance(100)
    assert calls == [1]
    assert sched.active == 0


def test_callback_may_reschedule():
    sched = ManualScheduler()
    calls = []
    state = {}

    def first():
        calls.append("first")
        sched.cancel(state["h"])
        state["h"] = sched.schedule(5, lambda: calls.append("second"))

    state["h"] = sched.schedule(10, first)
    sched.advance(20)
    assert calls == ["first", "second", "second"]
    assert sched.active == 1


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        ManualScheduler().schedule(0, lambda: None)


def test_pygame_poll_drops_missed_intervals(monkeypatch):
    clock = {"now": 0}
    monkeypatch.setattr(PygameScheduler, "now", lambda self: clock["now"])
    sched = PygameScheduler()
    calls = []
    sched.schedule(50, lambda: calls.append(clock["now"]))
    assert sched.poll() == 0
    clock["now"] = 500
    assert sched.poll() == 1
    assert sched.poll() == 0
    assert sched.poll(now_ms=549) == 0
    assert sched.poll(now_ms=550) == 1
    assert len(calls) == 2


@pytest.mark.parametrize("interval, expected", [(10, 1000), (50, 200), (100, 100)])
def test_pygame_rate_matches_interval_at_120_fps(monkeypatch, interval, expected):
    monkeypatch.setattr(PygameScheduler, "now", lambda self: 0)
    sched = PygameScheduler()
    calls = []
    sched.schedule(interval, lambda: calls.append(1))
    # ten seconds of frames at 120 fps
    for frame in range(10 * 120 + 1):
        sched.poll(now_ms=frame * 1000 // 120)
    assert len(calls) == expected
