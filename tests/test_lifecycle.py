from routing import Location, Scheduler
from routing.context import ReadySignal, ViewScope


def test_scheduler_fires_in_due_order(clock):
    sched = Scheduler(clock=clock)
    fired = []
    sched.call_later(1.5, lambda: fired.append("b"))
    sched.call_later(0.4, lambda: fired.append("a"))
    assert sched.next_delay() == 0.4
    clock.advance(0.3)
    assert sched.run_due() == 0
    clock.advance(2)
    assert sched.run_due() == 2
    assert fired == ["a", "b"]
    assert sched.next_delay() is None


def test_cancelled_action_never_fires(clock):
    sched = Scheduler(clock=clock)
    fired = []
    action = sched.call_later(1, lambda: fired.append(1))
    action.cancel()
    clock.advance(2)
    assert sched.run_due() == 0
    assert fired == []
    assert sched.pending() == []


def test_closed_scope_refuses_new_actions(clock):
    scope = ViewScope("home", Scheduler(clock=clock))
    scope.close()
    assert scope.defer(1, lambda: None) is None


def test_ready_signal_fires_once_and_late_subscribers_run_immediately():
    signal = ReadySignal()
    calls = []
    signal.when_ready(lambda: calls.append("early"))
    assert calls == []
    signal.fire()
    signal.fire()
    signal.when_ready(lambda: calls.append("late"))
    assert calls == ["early", "late"]


def test_query_param_prefers_hash_query():
    loc = Location(hash="#/password-recovery?token=fromhash", search="?token=fromsearch")
    assert loc.query_param("token") == "fromhash"
    assert Location(hash="#/x", search="?token=s").query_param("token") == "s"
    assert Location(hash="#/x").query_param("token") is None


def test_assign_notifies_listeners_every_time():
    loc = Location(hash="#/home")
    seen = []
    listener = lambda: seen.append(loc.hash)  # noqa: E731
    loc.add_listener(listener)
    loc.add_listener(listener)
    loc.assign("#/board")
    loc.assign("#/board")
    assert seen == ["#/board", "#/board"]
