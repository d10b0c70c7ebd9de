"""GameClock - virtual minutes, hours, and days driven by real time."""

from __future__ import annotations

import logging
from dataclasses import replace

from daycycle.dayparts import DayPart, DayPartTable
from daycycle.types import ClockSnapshot, DayPartRenderer, TimeConfig

logger = logging.getLogger(__name__)

# Float drift when many small deltas should add up to a whole minute.
_CARRY_EPSILON = 1e-9


class GameClock:
    def __init__(
        self,
        config: TimeConfig,
        day_parts: DayPartTable,
        renderer: DayPartRenderer | None = None,
    ) -> None:
        self._config = config
        self._day_parts = day_parts
        self._renderer = renderer
        self._minutes = 0
        self._hours = 0
        self._days = 0
        self._carry = 0.0
        self._current_day_part = day_parts.lookup(0) or day_parts.first()

    @property
    def config(self) -> TimeConfig:
        return self._config

    @property
    def day_parts(self) -> DayPartTable:
        return self._day_parts

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def days(self) -> int:
        return self._days

    @property
    def current_day_part(self) -> DayPart | None:
        return self._current_day_part

    @property
    def minutes_per_hour(self) -> int:
        return self._config.minutes_per_hour

    @property
    def hours_per_day(self) -> int:
        return self._config.hours_per_day

    @property
    def total_minutes_in_day(self) -> int:
        return self._config.total_minutes_in_day

    @property
    def current_minute_of_day(self) -> int:
        return self._hours * self._config.minutes_per_hour + self._minutes

    @property
    def time_string(self) -> str:
        return f"Day {self._days + 1} | {self._hours:02d}:{self._minutes:02d}"

    def set_renderer(self, renderer: DayPartRenderer | None) -> None:
        self._renderer = renderer

    def set_time_multiplier(self, multiplier: float) -> None:
        """Change game speed. Sub-minute progress is kept."""
        self._config = replace(self._config, time_multiplier=multiplier)

    def advance(self, delta_real_seconds: float) -> int:
        """Advance by real seconds. Returns the number of virtual minutes crossed."""
        if delta_real_seconds <= 0:
            return 0
        self._carry += delta_real_seconds * self._config.time_multiplier
        crossed = 0
        while self._carry >= 1.0 - _CARRY_EPSILON:
            self._carry -= 1.0
            self._step_minute()
            crossed += 1
        return crossed

    def _step_minute(self) -> None:
        self._minutes += 1
        if self._minutes >= self._config.minutes_per_hour:
            self._minutes = 0
            self._hours += 1
            if self._hours >= self._config.hours_per_day:
                self._hours = 0
                self._days += 1
            logger.debug("clock %s", self.time_string)
            self._update_day_part(self._hours, animate=True)

    def _update_day_part(self, hour: int, animate: bool) -> None:
        part = self._day_parts.lookup(hour)
        if part is None:
            return
        old = self._current_day_part
        self._current_day_part = part
        logger.info("day part %s begins at %s", part.name, self.time_string)
        if self._renderer is None:
            return
        duration = part.transition_seconds if animate else 0.0
        try:
            self._renderer.on_day_part_changed(old, part, duration)
        except Exception:
            logger.exception("renderer failed on day part change to %s", part.name)

    def set_absolute_time(self, day: int, hour: int, minute: int) -> None:
        """Jump straight to a time. Re-applies the day part without animation."""
        self._days = max(0, day)
        self._hours = min(max(hour, 0), self._config.hours_per_day - 1)
        self._minutes = min(max(minute, 0), self._config.minutes_per_hour - 1)
        self._carry = 0.0
        logger.debug("clock set to %s", self.time_string)
        self._update_day_part(self._hours, animate=False)

    def jump_to_day_part(self, part: DayPart) -> None:
        self.set_absolute_time(self._days, part.start_hour, 0)

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            days=self._days,
            hours=self._hours,
            minutes=self._minutes,
            current_day_part=self._current_day_part,
        )
