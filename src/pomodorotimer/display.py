"""Terminal rendering for a running session."""
from __future__ import annotations

from typing import TextIO

from .scheduler import Interval


def format_time(seconds: int) -> str:
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes:02d}:{remainder:02d}"


class TerminalDisplay:
    """Draws the countdown on a single, continually rewritten line."""

    def __init__(self, stream: TextIO, total_cycles: int) -> None:
        self._stream = stream
        self._total_cycles = total_cycles

    def on_interval_start(self, interval: Interval) -> None:
        if not interval.kind.is_break:
            self._stream.write(f"\n=== Session {interval.cycle}/{self._total_cycles} ===\n")
        self._stream.write(f"▶ {interval.label} — {format_time(interval.duration_seconds)}\n")
        self._stream.flush()

    def on_tick(self, interval: Interval, remaining: int) -> None:
        self._stream.write(f"\r{interval.label}: {format_time(remaining)} remaining")
        self._stream.flush()

    def on_interval_complete(self, interval: Interval) -> None:
        done = "Focus done" if not interval.kind.is_break else "Break over"
        self._stream.write(f"\r{interval.label}: {format_time(0)} remaining\n✓ {done}\n")
        self._stream.flush()

    def on_session_complete(self) -> None:
        self._stream.write("\nAll sessions done. Nice work.\n")
        self._stream.flush()
