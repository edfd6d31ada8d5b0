"""Setting up and running the dining philosophers simulation."""

import sys
import threading

from .arguments import ArgumentError, parse_args
from .events import EventLog
from .philosopher import Philosopher


class Simulation:
    """A table of philosophers with one fork between each pair."""

    def __init__(self, args):
        if args.nphilo == 0:
            raise ValueError("at least one philosopher is required")
        self.args = args
        self.log = EventLog()
        self.forks = [threading.Lock() for _ in range(args.nphilo)]
        self.philosophers = [
            Philosopher(
                i + 1,
                self.log,
                right_fork=fork,
                left_fork=self.forks[i - 1],
                args=args,
            )
            for i, fork in enumerate(self.forks)
        ]
        self.threads = []

    def start(self) -> None:
        """Start one thread per philosopher."""
        if self.threads:
            return
        self.threads = [
            threading.Thread(target=philo.run, name=f"philo-{philo.id}")
            for philo in self.philosophers
        ]
        for thread in self.threads:
            thread.start()

    def run(self, out):
        """Run to completion, writing events to ``out``; return the final event."""
        self.start()
        final = self.log.handle(self.args.nphilo, out)
        for thread in self.threads:
            thread.join()
        return final


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except ArgumentError as exc:
        print(exc)
        return 1
    try:
        simulation = Simulation(args)
    except ValueError:
        return 1
    simulation.run(sys.stdout)
    return 0