"""TimeEventScheduler - per-event day planning and occurrence pacing."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from daycycle_event.types import (
    AfterPeriod,
    AtFixedTime,
    ChancePerDay,
    ConfigurationWarning,
    EventRuntimeState,
    EventSnapshot,
    EveryDay,
    EveryXDays,
    Multiple,
    OnceEver,
    RandomInWindow,
    Single,
    TimeEventDef,
    UnknownEventError,
)
from daycycle_event.validation import validate_event

if TYPE_CHECKING:
    from daycycle import DayPartTable, GameClock, RandomSource

logger = logging.getLogger(__name__)

# AfterPeriod periods and extras are given in 60-minute hours regardless of
# the configured minutes per hour.
_PERIOD_HOUR_MINUTES = 60


class TimeEventScheduler:
    """Holds time event definitions and their runtime state."""

    def __init__(self, day_parts: DayPartTable | None = None) -> None:
        self._day_parts = day_parts
        self._definitions: dict[str, TimeEventDef] = {}
        self._definition_order: list[str] = []
        self._states: dict[str, EventRuntimeState] = {}
        self._warnings: dict[str, list[ConfigurationWarning]] = {}

    # --- Registration ---

    def define(self, event: TimeEventDef) -> list[ConfigurationWarning]:
        """Register a definition and fresh runtime state. Insertion order preserved.

        Redefining an id keeps its position and resets its state. Returns the
        configuration warnings for the definition, which are also logged.
        """
        if event.event_id not in self._definitions:
            self._definition_order.append(event.event_id)
        self._definitions[event.event_id] = event
        self._states[event.event_id] = EventRuntimeState(event_id=event.event_id)

        warnings = validate_event(event, self._day_parts)
        self._warnings[event.event_id] = warnings
        for w in warnings:
            logger.warning("time event %s: %s: %s", w.event_id, w.setting, w.message)
        return warnings

    # --- Queries ---

    def definition(self, event_id: str) -> TimeEventDef | None:
        return self._definitions.get(event_id)

    def event_ids(self) -> list[str]:
        return list(self._definition_order)

    def is_active_today(self, event_id: str) -> bool:
        return self._state(event_id).is_active_today

    def snapshot(self, event_id: str) -> EventSnapshot:
        state = self._state(event_id)
        return EventSnapshot(
            event_id=state.event_id,
            is_active_today=state.is_active_today,
            occurrences_triggered=state.occurrences_triggered,
            target_occurrences=state.target_occurrences,
            next_trigger_minute=state.next_trigger_minute,
            last_scheduled_day=state.last_scheduled_day,
            has_triggered_once_ever=state.has_triggered_once_ever,
        )

    def snapshots(self) -> list[EventSnapshot]:
        return [self.snapshot(eid) for eid in self._definition_order]

    def warnings(self) -> list[ConfigurationWarning]:
        """All configuration warnings, in definition order."""
        return [w for eid in self._definition_order for w in self._warnings[eid]]

    def _state(self, event_id: str) -> EventRuntimeState:
        try:
            return self._states[event_id]
        except KeyError:
            raise UnknownEventError(event_id) from None

    # --- Internal (called by system) ---

    def _window(self, defn: TimeEventDef, clock: GameClock) -> tuple[int, int]:
        """Window bounds in minutes of the day, both inclusive. Gates every trigger mode."""
        start = round(defn.window_start_hour * clock.minutes_per_hour)
        end = round(defn.window_end_hour * clock.minutes_per_hour)
        return start, end

    def _passes_frequency(
        self,
        defn: TimeEventDef,
        state: EventRuntimeState,
        day_number: int,
        rng: RandomSource,
    ) -> bool:
        freq = defn.frequency
        if isinstance(freq, EveryDay):
            return True
        if isinstance(freq, OnceEver):
            if state.has_triggered_once_ever:
                return False
            if defn.start_day > 0:
                return day_number == defn.start_day
            return True
        if isinstance(freq, EveryXDays):
            if freq.days <= 0:
                freq.days = 1
            return day_number % freq.days == 0
        if isinstance(freq, ChancePerDay):
            return rng.chance(freq.chance)
        raise TypeError(f"Unknown frequency {freq!r}")

    def _resolve_target(self, defn: TimeEventDef, rng: RandomSource) -> int:
        occ = defn.occurrence
        if isinstance(occ, Single):
            return 1
        if isinstance(occ, Multiple):
            lo = max(occ.min_occurrences, 0)
            hi = max(occ.max_occurrences, lo)
            return rng.uniform_int(lo, hi)
        raise TypeError(f"Unknown occurrence mode {occ!r}")

    def _resolve_first_trigger(
        self, defn: TimeEventDef, clock: GameClock, rng: RandomSource
    ) -> int:
        start, end = self._window(defn, clock)
        trigger = defn.trigger
        if isinstance(trigger, AtFixedTime):
            return start
        if isinstance(trigger, RandomInWindow):
            if end < start:
                return start
            return rng.uniform_int(start, end)
        if isinstance(trigger, AfterPeriod):
            minutes = start + trigger.period_hours * _PERIOD_HOUR_MINUTES
            if trigger.random_extra:
                minutes += (
                    rng.uniform(trigger.extra_min_hours, trigger.extra_max_hours)
                    * _PERIOD_HOUR_MINUTES
                )
            return round(minutes) % clock.total_minutes_in_day
        raise TypeError(f"Unknown trigger mode {trigger!r}")

    def _schedule_for_new_day(
        self,
        state: EventRuntimeState,
        defn: TimeEventDef,
        clock: GameClock,
        rng: RandomSource,
    ) -> bool:
        """Plan today's occurrences. Returns True if the event is active today."""
        day_number = clock.days + 1
        if defn.start_day > 0 and day_number < defn.start_day:
            return False
        if not self._passes_frequency(defn, state, day_number, rng):
            return False

        state.occurrences_triggered = 0
        state.target_occurrences = self._resolve_target(defn, rng)
        state.next_trigger_minute = self._resolve_first_trigger(defn, clock, rng)
        logger.debug(
            "time event %s active on day %d: %d occurrence(s), first at minute %d",
            defn.event_id,
            day_number,
            state.target_occurrences,
            state.next_trigger_minute,
        )
        return True

    def _handle_single(
        self,
        state: EventRuntimeState,
        defn: TimeEventDef,
        minute: int,
        window: tuple[int, int],
    ) -> bool:
        """Returns True if the occurrence fired."""
        start, end = window
        if minute < start or minute > end:
            return False
        if state.occurrences_triggered >= 1:
            return False
        if minute < state.next_trigger_minute:
            return False
        state.occurrences_triggered = 1
        if isinstance(defn.frequency, OnceEver):
            state.has_triggered_once_ever = True
        return True

    def _handle_multiple(
        self,
        state: EventRuntimeState,
        defn: TimeEventDef,
        minute: int,
        window: tuple[int, int],
        rng: RandomSource,
    ) -> bool:
        """Returns True if an occurrence fired.

        The next trigger minute is not wrapped into the window: occurrences
        that would land past the window end are dropped for the day.
        """
        start, end = window
        if minute < start or minute > end:
            return False
        if state.occurrences_triggered >= state.target_occurrences:
            return False
        if minute < state.next_trigger_minute:
            return False
        state.occurrences_triggered += 1
        if isinstance(defn.frequency, OnceEver):
            state.has_triggered_once_ever = True
        if state.occurrences_triggered < state.target_occurrences:
            occ = defn.occurrence
            assert isinstance(occ, Multiple)
            lo = max(occ.min_interval_minutes, 0.0)
            hi = max(occ.max_interval_minutes, lo)
            state.next_trigger_minute = minute + round(rng.uniform(lo, hi))
        return True
