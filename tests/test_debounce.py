import threading

from holiday_hopper.api.services.debounce import Debouncer, threading_scheduler


def test_only_last_call_in_quiet_period_fires(scheduler):
    calls = []
    debounced = Debouncer(calls.append, 1.0, scheduler=scheduler)

    debounced("P")
    debounced("Pa")
    debounced("Par")

    assert len(scheduler.pending) == 1
    assert scheduler.pending[0].delay == 1.0

    scheduler.run_pending()
    assert calls == ["Par"]
    assert not debounced.pending


def test_cancel_drops_pending_call(scheduler):
    calls = []
    debounced = Debouncer(calls.append, 1.0, scheduler=scheduler)

    debounced("Rome")
    debounced.cancel()

    assert not debounced.pending
    assert scheduler.pending == []
    assert calls == []


def test_superseded_timer_that_still_fires_is_ignored(scheduler):
    calls = []
    debounced = Debouncer(calls.append, 1.0, scheduler=scheduler)

    debounced("Lis")
    stale = scheduler.handles[0]
    debounced("Lisbon")

    # Simulate the old timer thread winning the race with cancel()
    stale.func(*stale.args)
    assert calls == []

    scheduler.run_pending()
    assert calls == ["Lisbon"]


def test_threading_scheduler_runs_after_delay():
    fired = threading.Event()
    timer = threading_scheduler(0.01, fired.set)
    assert fired.wait(2.0)
    assert timer.daemon
