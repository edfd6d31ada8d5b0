"""Event queue shared between philosophers and the reporting thread."""

import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum

from .clock import get_time_ms


class State(Enum):
    THINKING = 0
    EATING = 1
    SLEEPING = 2
    TOOK_FORK = 3
    IS_FULL = 4
    DYING = 5


_MESSAGES = {
    State.THINKING: "is thinking",
    State.EATING: "is eating",
    State.SLEEPING: "is sleeping",
    State.TOOK_FORK: "has taken a fork",
    State.DYING: "died",
}


@dataclass(frozen=True)
class Event:
    philo_id: int
    state: State
    timestamp: int


def format_event(event: Event):
    """Return the printed line for an event, or None for events that print nothing."""
    message = _MESSAGES.get(event.state)
    if message is None:
        return None
    return f"{event.timestamp} philo {event.philo_id} {message}"


class EventLog:
    """Thread-safe queue of philosopher events with a shared stop flag."""

    def __init__(self):
        self._cond = threading.Condition()
        self._queue = deque()
        self._stop = False

    def stopped(self) -> bool:
        with self._cond:
            return self._stop

    def record(self, philo_id, state, start_t) -> None:
        """Queue an event stamped relative to ``start_t``."""
        with self._cond:
            self._queue.append(Event(philo_id, State(state), get_time_ms() - start_t))
            self._cond.notify()

    def handle(self, nphilo, out) -> Event:
        """Print queued events until a death or until every philosopher is full."""
        full = 0
        while True:
            with self._cond:
                while not self._queue:
                    self._cond.wait()
                event = self._queue.popleft()
                line = format_event(event)
                if line is not None:
                    out.write(line + "\n")
                if event.state is State.DYING:
                    self._stop = True
                    return event
                if event.state is State.IS_FULL:
                    full += 1
                    if full == nphilo:
                        self._stop = True
                        return event