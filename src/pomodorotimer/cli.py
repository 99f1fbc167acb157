"""Command line interface for the Pomodoro timer."""
from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator

from . import __version__, scheduler
from .config import DEFAULTS, Configuration, ConfigurationError
from .display import TerminalDisplay, format_time
from .engine import CountdownEngine, Outcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

BANNER = r"""
 ____   ___  __  __  ___   ___   ___   ____   ____   __   ____   ____ 
(  _ \ / __)(  )(  )/ __) / __) / __) (_  _) (_  _) / _\ (  _ \ / ___)
 )   /( (__  )(__)( \__ \( (__ ( (__    )(     )(  /    \ )   / \___ \
(__\_) \___)(______)(___/ \___) \___)  (__)   (__) \_/\_/(__\_) (____/
"""


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pomodorotimer", description="Run a simple Pomodoro timer in your terminal.")
    parser.add_argument("-c", "--pomodoros", type=int, default=DEFAULTS["pomodoros"], help="number of focus sessions to run")
    parser.add_argument("-f", "--focus-minutes", type=int, default=DEFAULTS["focus_minutes"], help="minutes per focus session")
    parser.add_argument("-b", "--short-break-minutes", type=int, default=DEFAULTS["short_break_minutes"], help="minutes per short break")
    parser.add_argument("--long-break-minutes", type=int, default=DEFAULTS["long_break_minutes"], help="minutes per long break")
    parser.add_argument("--long-break-every", type=int, default=DEFAULTS["long_break_every"], help="focus sessions between long breaks")
    parser.add_argument("--fast", action="store_true", help="treat one real second as one Pomodoro minute (handy for demos)")
    parser.add_argument("--dry-run", action="store_true", help="show the schedule without running timers")
    parser.add_argument("--tick-seconds", type=float, default=1.0, help=argparse.SUPPRESS)
    parser.add_argument("-v", "--verbose", action="store_true", help="log timer internals to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(list(argv))


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


@contextmanager
def cancel_on_sigint(engine: CountdownEngine) -> Iterator[None]:
    """Route Ctrl+C to the engine while the block runs."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def handler(signum, frame) -> None:
        logger.debug("Received signal %s", signum)
        engine.cancel()

    previous = signal.signal(signal.SIGINT, handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def print_summary(config: Configuration) -> None:
    print(BANNER)
    print("Pomodoros :", config.total_cycles)
    print("Focus     :", format_time(config.focus_duration))
    print("Short br. :", format_time(config.short_break_duration))
    print("Long br.  :", format_time(config.long_break_duration), f"(every {config.cycles_before_long_break})")
    print()


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    setup_logging(args.verbose)

    try:
        config = Configuration.from_minutes(
            pomodoros=args.pomodoros,
            focus_minutes=args.focus_minutes,
            short_break_minutes=args.short_break_minutes,
            long_break_minutes=args.long_break_minutes,
            long_break_every=args.long_break_every,
            fast=args.fast,
        )
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        engine = CountdownEngine(tick_seconds=args.tick_seconds)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    logger.debug("Resolved %s", config)

    session = scheduler.plan(config)
    print_summary(config)

    if args.dry_run:
        print("Planned intervals:")
        for item in session:
            print(f"- {item.label}: {format_time(item.duration_seconds)}")
        print(f"Total: {format_time(session.total_seconds)}")
        return EXIT_OK

    print("Press Ctrl+C to exit early. Running timers…")
    with cancel_on_sigint(engine):
        outcome = engine.run(session, TerminalDisplay(sys.stdout, config.total_cycles))

    if outcome is Outcome.INTERRUPTED:
        print("\nSession interrupted. See you next time!")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
