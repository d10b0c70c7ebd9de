"""Shared types, protocols, and configuration records for the day cycle engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from daycycle.clock import GameClock
    from daycycle.dayparts import DayPart


class RandomSource(Protocol):
    """Injectable randomness used by everything that rolls dice."""

    def uniform(self, lo: float, hi: float) -> float: ...

    def uniform_int(self, lo: int, hi: int) -> int:
        """Return an int in [lo, hi], both ends inclusive."""
        ...

    def chance(self, p: float) -> bool: ...


class DayPartRenderer(Protocol):
    """Receives day-part changes from the clock. Owns any animation."""

    def on_day_part_changed(
        self, old: DayPart | None, new: DayPart, transition_seconds: float
    ) -> None: ...


@dataclass(frozen=True, slots=True)
class TimeConfig:
    """Shape and speed of the in-game day."""

    minutes_per_hour: int = 60
    hours_per_day: int = 24
    time_multiplier: float = 1.0  # virtual minutes per real second

    def __post_init__(self) -> None:
        if self.minutes_per_hour <= 0:
            raise ValueError("minutes_per_hour must be positive")
        if self.hours_per_day <= 0:
            raise ValueError("hours_per_day must be positive")
        if self.time_multiplier < 0:
            raise ValueError("time_multiplier must not be negative")

    @property
    def total_minutes_in_day(self) -> int:
        return self.minutes_per_hour * self.hours_per_day


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: RandomSource


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Read-only view of the clock for tooling."""

    days: int
    hours: int
    minutes: int
    current_day_part: DayPart | None


System = Callable[["GameClock", TickContext], None]
