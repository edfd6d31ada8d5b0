import io
import threading

from philosim.clock import get_time_ms
from philosim.events import Event, EventLog, State, format_event


def test_format_eating():
    assert format_event(Event(1, State.EATING, 200)) == "200 philo 1 is eating"


def test_format_fork_and_death():
    assert format_event(Event(3, State.TOOK_FORK, 7)) == "7 philo 3 has taken a fork"
    assert format_event(Event(4, State.DYING, 9)) == "9 philo 4 died"


def test_format_full_prints_nothing():
    assert format_event(Event(2, State.IS_FULL, 50)) is None


def test_new_log_not_stopped():
    assert EventLog().stopped() is False


def test_handle_stops_on_death():
    log = EventLog()
    start = get_time_ms()
    log.record(1, State.THINKING, start)
    log.record(2, State.DYING, start)
    log.record(3, State.EATING, start)
    out = io.StringIO()
    last = log.handle(2, out)
    assert last.state is State.DYING and last.philo_id == 2
    assert log.stopped()
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("philo 1 is thinking")
    assert lines[1].endswith("philo 2 died")


def test_handle_stops_when_all_full():
    log = EventLog()
    start = get_time_ms()
    log.record(1, State.IS_FULL, start)
    log.record(1, State.SLEEPING, start)
    log.record(2, State.IS_FULL, start)
    out = io.StringIO()
    last = log.handle(2, out)
    assert last.state is State.IS_FULL and last.philo_id == 2
    assert log.stopped()
    assert out.getvalue().splitlines()[0].endswith("philo 1 is sleeping")


def test_timestamps_are_relative_and_non_negative():
    log = EventLog()
    start = get_time_ms()
    log.record(1, State.DYING, start)
    out = io.StringIO()
    event = log.handle(1, out)
    assert 0 <= event.timestamp < 1000
    assert out.getvalue() == f"{event.timestamp} philo 1 died\n"


def test_handle_waits_for_events_from_other_threads():
    log = EventLog()
    start = get_time_ms()

    def producer():
        log.record(5, State.EATING, start)
        log.record(5, State.DYING, start)

    thread = threading.Thread(target=producer)
    out = io.StringIO()
    thread.start()
    event = log.handle(1, out)
    thread.join()
    assert event.philo_id == 5
    assert out.getvalue().splitlines()[-1].endswith("died")