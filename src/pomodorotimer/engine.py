"""Countdown engine that runs a planned session in real time."""
from __future__ import annotations

import logging
import threading
import time
from enum import Enum
from typing import Callable, Protocol

from .scheduler import Interval, Session

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    COMPLETED = "completed"
    INTERRUPTED = "interrupted"


class DisplaySink(Protocol):
    """Receives countdown progress. The engine never reads anything back."""

    def on_interval_start(self, interval: Interval) -> None: ...

    def on_tick(self, interval: Interval, remaining: int) -> None: ...

    def on_interval_complete(self, interval: Interval) -> None: ...

    def on_session_complete(self) -> None: ...


class CountdownEngine:
    """Counts each interval of a session down to zero, one tick at a time.

    Tick ``n`` of an interval is due ``n * tick_seconds`` after the interval
    started, so a slow sink or a late wake-up does not accumulate drift. Cancellation
    is checked around every wait, so the engine stops within one tick of
    ``cancel()`` or of the cancel event being set.
    """

    def __init__(
        self,
        tick_seconds: float = 1.0,
        cancel: threading.Event | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_seconds < 0:
            raise ValueError("tick_seconds must not be negative")
        self._tick_seconds = tick_seconds
        self._cancel = cancel if cancel is not None else threading.Event()
        self._clock = clock
        self._stop_requested = False

    @property
    def tick_seconds(self) -> float:
        return self._tick_seconds

    @property
    def cancelled(self) -> bool:
        return self._stop_requested or self._cancel.is_set()

    def cancel(self) -> None:
        """Ask the running countdown to stop at its next tick.

        Only a flag is set here, no lock is taken, so this is safe to call
        from a signal handler that interrupts the engine's own wait. Other
        threads should set the ``cancel`` event instead, which also wakes the
        wait early.
        """
        self._stop_requested = True

    def run(self, session: Session, sink: DisplaySink) -> Outcome:
        try:
            for interval in session:
                if self.cancelled:
                    logger.info("Session interrupted before %s", interval.label)
                    return Outcome.INTERRUPTED
                logger.debug("Starting %s (%ds)", interval.label, interval.duration_seconds)
                sink.on_interval_start(interval)
                if not self._countdown(interval, sink):
                    logger.info("Session interrupted during %s", interval.label)
                    return Outcome.INTERRUPTED
                logger.debug("Finished %s", interval.label)
                sink.on_interval_complete(interval)
        except KeyboardInterrupt:
            self._stop_requested = True
            logger.info("Session interrupted by keyboard")
            return Outcome.INTERRUPTED

        sink.on_session_complete()
        logger.info("Session complete: %d interval(s), %ds", len(session), session.total_seconds)
        return Outcome.COMPLETED

    def _countdown(self, interval: Interval, sink: DisplaySink) -> bool:
        start = self._clock()
        remaining = interval.duration_seconds
        tick = 0
        while remaining > 0:
            sink.on_tick(interval, remaining)
            tick += 1
            if self._suspend(start + tick * self._tick_seconds):
                return False
            remaining -= 1
        return True

    def _suspend(self, target: float) -> bool:
        if self._stop_requested:
            return True
        # Running late means no wait at all; the next tick catches up.
        delay = max(0.0, target - self._clock())
        woken = self._cancel.wait(delay)
        return woken or self._stop_requested
