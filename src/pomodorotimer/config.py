"""Session configuration for the Pomodoro timer."""
from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(ValueError):
    """Raised when a duration or count is not positive."""


DEFAULTS = {
    "pomodoros": 4,
    "focus_minutes": 25,
    "short_break_minutes": 5,
    "long_break_minutes": 15,
    "long_break_every": 4,
}


@dataclass(frozen=True)
class Configuration:
    """Durations (in seconds) and cycle counts for one session."""

    focus_duration: int
    short_break_duration: int
    long_break_duration: int
    cycles_before_long_break: int
    total_cycles: int

    def __post_init__(self) -> None:
        durations = {
            "focus_duration": self.focus_duration,
            "short_break_duration": self.short_break_duration,
            "long_break_duration": self.long_break_duration,
        }
        for name, value in durations.items():
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if self.cycles_before_long_break < 1:
            raise ConfigurationError("cycles_before_long_break must be at least 1")
        if self.total_cycles < 1:
            raise ConfigurationError("total_cycles must be at least 1")

    @classmethod
    def from_minutes(
        cls,
        *,
        pomodoros: int = DEFAULTS["pomodoros"],
        focus_minutes: int = DEFAULTS["focus_minutes"],
        short_break_minutes: int = DEFAULTS["short_break_minutes"],
        long_break_minutes: int = DEFAULTS["long_break_minutes"],
        long_break_every: int = DEFAULTS["long_break_every"],
        fast: bool = False,
    ) -> "Configuration":
        """Build a configuration from minute values.

        Args:
            pomodoros: Number of focus sessions.
            focus_minutes: Length of each focus session.
            short_break_minutes: Length of the regular breaks.
            long_break_minutes: Length of the long break.
            long_break_every: Focus sessions between long breaks.
            fast: Treat one minute as one second (handy for demos).
        """
        seconds_per_minute = 1 if fast else 60
        return cls(
            focus_duration=focus_minutes * seconds_per_minute,
            short_break_duration=short_break_minutes * seconds_per_minute,
            long_break_duration=long_break_minutes * seconds_per_minute,
            cycles_before_long_break=long_break_every,
            total_cycles=pomodoros,
        )
