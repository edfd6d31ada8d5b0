# philosim

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. The philosophers sit at a round table with one fork between
each pair. Each one picks up the two forks beside it, eats, sleeps and thinks
until it starves or until every philosopher has eaten enough. Every state
change goes into a shared event log. The main thread prints the changes in
order, each with a timestamp in milliseconds.

## Installation

```
pip install .
```

## Usage

```
philosim <num_of_philos> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philo_must_eat]
```

Give every value as an unsigned integer no larger than 2147483647. All times
are in milliseconds.

```
philosim 5 800 200 200 7
```

Each output line has the form `<timestamp> philo <id> <action>`. The
timestamp counts from the moment the simulation starts. For example:

```
0 philo 2 has taken a fork
0 philo 2 has taken a fork
0 philo 2 is eating
200 philo 2 is sleeping
400 philo 2 is thinking
```

Philosophers are numbered from 1. A philosopher dies when `time_to_die`
milliseconds pass without it starting a new meal. Each meal adds
`time_to_die` to its deadline. A philosopher thinks for
`time_to_eat - time_to_sleep` milliseconds, or not at all if that value is
zero or less. If there is only one philosopher, there is only one fork, and
the philosopher waits until it dies.

The simulation stops in one of two ways:

- a philosopher dies, and `philo <id> died` is printed for it;
- a meal count is given, and every philosopher has eaten that many times.

If the argument count is wrong, the program prints a usage line and exits
with status 1. It does the same, with a hint about the allowed values, if an
argument is not a plain unsigned integer or is too large. It also exits with
status 1, printing nothing, when the number of philosophers is 0.

## Library use

`parse_args` takes the arguments that follow the program name. It raises
`ArgumentError`, a subclass of `ValueError`, for bad input.

```python
import sys

from philosim.arguments import ArgumentError, describe, parse_args
from philosim.simulation import Simulation

try:
    args = parse_args(["4", "410", "200", "200", "3"])
except ArgumentError as exc:
    print(exc)
else:
    print(describe(args))
    final_event = Simulation(args).run(sys.stdout)
    print(final_event.state)
```

- `philosim.arguments` provides the frozen dataclass `Args`, `parse_args`,
  `describe` and `ArgumentError`.
- `philosim.simulation.Simulation(args)` builds the forks and the
  philosophers. It raises `ValueError` when `args.nphilo` is 0.
  `Simulation.start()` starts one thread per philosopher, and calling it
  again does nothing. `Simulation.run(out)` starts the threads if needed,
  writes event lines to `out`, joins the threads and returns the final
  `Event`.
- `philosim.events` provides `State`, `Event`, `EventLog` and
  `format_event`, for reading or rendering the event stream yourself.
  `format_event` returns `None` for `State.IS_FULL` events, which are never
  printed.
- `philosim.philosopher.Philosopher` implements a single philosopher's
  `eat`, `sleep`, `think` and `run` steps.
- `philosim.clock` provides `get_time_ms` and `wait_ms`.

## Running the tests

```
pip install .[test]
pytest
```