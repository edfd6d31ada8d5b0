"""A single philosopher's eat, sleep and think cycle."""

import time

from .clock import get_time_ms, wait_ms
from .events import State

_POLL_SECONDS = 0.0002


class Philosopher:
    """A philosopher sharing two forks with its neighbours."""

    def __init__(self, id, log, right_fork, left_fork, args):
        self.id = id
        self.log = log
        self.right_fork = right_fork
        self.left_fork = left_fork
        self.args = args
        self.next_death = args.start_t + args.ttd
        self.times_eaten = 0

    def _report(self, state: State) -> None:
        self.log.record(self.id, state, self.args.start_t)

    def _pause_until(self, deadline: int) -> bool:
        """Wait until ``deadline``; return False early if stopped or starved."""
        while deadline - get_time_ms() > 0:
            if self.log.stopped() or self.next_death - get_time_ms() <= 0:
                return False
            time.sleep(_POLL_SECONDS)
        return True

    def eat(self) -> bool:
        """Take both forks and eat; return False if the simulation must end."""
        with self.right_fork:
            self._report(State.TOOK_FORK)
            with self.left_fork:
                self._report(State.TOOK_FORK)
                self.next_death += self.args.ttd
                self._report(State.EATING)
                if not self._pause_until(get_time_ms() + self.args.tte):
                    return False
        self.times_eaten += 1
        if self.args.max_eat and self.args.max_eat == self.times_eaten:
            self._report(State.IS_FULL)
        return True

    def sleep(self) -> bool:
        """Sleep; return False if the simulation must end."""
        self._report(State.SLEEPING)
        return self._pause_until(get_time_ms() + self.args.tts)

    def think(self) -> bool:
        """Think for the gap between eating and sleeping times."""
        hungry = get_time_ms() + self.args.tte - self.args.tts
        self._report(State.THINKING)
        return self._pause_until(hungry)

    def run(self) -> None:
        """Live until starving or until the simulation stops, then report death."""
        self.next_death = self.args.start_t + self.args.ttd
        wait_ms(self.args.start_t - get_time_ms())
        if self.right_fork is self.left_fork:
            wait_ms(self.next_death - get_time_ms())
            self._report(State.DYING)
            return
        if self.id % 2:
            wait_ms(1)
        while self.eat() and self.sleep() and self.think():
            pass
        self._report(State.DYING)