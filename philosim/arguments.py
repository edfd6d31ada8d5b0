"""Command-line argument parsing for the simulation."""

from dataclasses import dataclass

from .clock import get_time_ms

USAGE = (
    "usage: philosim <num_of_philos> <time_to_die> <time_to_eat> "
    "<time_to_sleep> <(optional)number_of_times_each_philo_must_eat>"
)
VALUE_HINT = "enter values as unsigned integers ranging from 0 to 2147483647"
_MAX_VALUE = 2147483647
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Args:
    """Simulation parameters; times are in milliseconds."""

    zero_t: int
    start_t: int
    nphilo: int
    ttd: int
    tte: int
    tts: int
    max_eat: int = 0


def _to_number(text: str) -> int:
    value = int(text) if text else 0
    if value > _MAX_VALUE:
        raise ArgumentError(VALUE_HINT)
    return value


def parse_args(argv) -> Args:
    """Parse the arguments that follow the program name."""
    argv = list(argv)
    if len(argv) not in (4, 5):
        raise ArgumentError(USAGE)
    if not all(set(arg) <= _DIGITS for arg in argv):
        raise ArgumentError(VALUE_HINT)
    nphilo, ttd, tte, tts, *rest = (_to_number(arg) for arg in argv)
    zero_t = get_time_ms()
    return Args(
        zero_t=zero_t,
        start_t=zero_t + nphilo,
        nphilo=nphilo,
        ttd=ttd,
        tte=tte,
        tts=tts,
        max_eat=rest[0] if rest else 0,
    )


def describe(args: Args) -> str:
    """Return a human-readable summary of the parameters."""
    return "\n".join(
        [
            f"number of philos : {args.nphilo}",
            f"time to die : {args.ttd}",
            f"time to eat : {args.tte}",
            f"time to sleep : {args.tts}",
            f"number of times to eat : {args.max_eat}",
            f"zero_t : {args.zero_t}",
            f"start_t : {args.start_t}",
        ]
    )