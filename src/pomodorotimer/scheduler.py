"""Pomodoro schedule helpers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .config import DEFAULTS, Configuration


class IntervalKind(str, Enum):
    FOCUS = "focus"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def is_break(self) -> bool:
        return self is not IntervalKind.FOCUS


@dataclass(frozen=True)
class Interval:
    """Represents one focus or break interval."""

    kind: IntervalKind
    duration_seconds: int
    index: int
    cycle: int

    @property
    def label(self) -> str:
        if self.kind is IntervalKind.FOCUS:
            return f"Focus {self.cycle}"
        if self.kind is IntervalKind.SHORT_BREAK:
            return f"Short break {self.cycle}"
        return "Long break"


@dataclass(frozen=True)
class Session:
    """Holds a full Pomodoro schedule."""

    intervals: Tuple[Interval, ...]

    @property
    def total_seconds(self) -> int:
        return sum(interval.duration_seconds for interval in self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def __getitem__(self, position: int) -> Interval:
        return self.intervals[position]


def plan(config: Configuration) -> Session:
    """Lay out the intervals of one session.

    Every cycle is a focus interval followed by a break. The break after every
    ``cycles_before_long_break``-th focus is a long one, and the last cycle has
    no break at all.
    """
    intervals: List[Interval] = []

    def add(kind: IntervalKind, duration: int, cycle: int) -> None:
        intervals.append(Interval(kind=kind, duration_seconds=duration, index=len(intervals) + 1, cycle=cycle))

    for cycle in range(1, config.total_cycles + 1):
        add(IntervalKind.FOCUS, config.focus_duration, cycle)
        if cycle == config.total_cycles:
            break
        if cycle % config.cycles_before_long_break == 0:
            add(IntervalKind.LONG_BREAK, config.long_break_duration, cycle)
        else:
            add(IntervalKind.SHORT_BREAK, config.short_break_duration, cycle)

    return Session(tuple(intervals))


def build_plan(
    *,
    pomodoros: int = DEFAULTS["pomodoros"],
    focus_minutes: int = DEFAULTS["focus_minutes"],
    short_break_minutes: int = DEFAULTS["short_break_minutes"],
    long_break_minutes: int = DEFAULTS["long_break_minutes"],
    long_break_every: int = DEFAULTS["long_break_every"],
) -> Session:
    """Create a Pomodoro plan with the requested durations in minutes.

    Raises:
        ConfigurationError: if any duration or count is not positive.
    """
    config = Configuration.from_minutes(
        pomodoros=pomodoros,
        focus_minutes=focus_minutes,
        short_break_minutes=short_break_minutes,
        long_break_minutes=long_break_minutes,
        long_break_every=long_break_every,
    )
    return plan(config)
