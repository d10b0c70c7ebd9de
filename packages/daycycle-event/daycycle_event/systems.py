"""System factory for time event scheduling."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from daycycle_event.scheduler import TimeEventScheduler
from daycycle_event.types import Multiple, Single

if TYPE_CHECKING:
    from daycycle import GameClock, TickContext
    from daycycle_signal import NotificationChannel

logger = logging.getLogger(__name__)


def make_time_event_system(
    scheduler: TimeEventScheduler,
    channel: NotificationChannel | None = None,
    on_fire: Callable[[GameClock, TickContext, str], None] | None = None,
) -> Callable[[GameClock, TickContext], None]:
    """Return a system that plans and fires time events each tick.

    Per event, in definition order:
    1. Day part gate - a restricted event outside its day parts is skipped
       without touching its state (not even the day rollover)
    2. Day boundary - on a new day, re-plan (frequency, occurrences, trigger)
    3. Inactive today - stop
    4. Occurrence handler - fire when the minute is due (channel, on_fire)
    """

    def time_event_system(clock: GameClock, ctx: TickContext) -> None:
        minute = clock.current_minute_of_day
        current_part = clock.current_day_part

        for event_id in scheduler._definition_order:
            defn = scheduler._definitions[event_id]
            state = scheduler._states[event_id]

            # 1. Day part gate
            if defn.allowed_day_parts:
                if current_part is None or current_part.name not in defn.allowed_day_parts:
                    continue

            # 2. New day: plan again
            if state.last_scheduled_day != clock.days:
                state.is_active_today = False
                state.last_scheduled_day = clock.days
                if scheduler._schedule_for_new_day(state, defn, clock, ctx.random):
                    state.is_active_today = True

            # 3. Inactive today
            if not state.is_active_today:
                continue

            # 4. Occurrences
            window = scheduler._window(defn, clock)
            if isinstance(defn.occurrence, Single):
                fired = scheduler._handle_single(state, defn, minute, window)
            elif isinstance(defn.occurrence, Multiple):
                fired = scheduler._handle_multiple(
                    state, defn, minute, window, ctx.random
                )
            else:
                raise TypeError(f"Unknown occurrence mode {defn.occurrence!r}")
            if not fired:
                continue

            logger.info(
                "time event %s fired (%d/%d) at %s",
                event_id,
                state.occurrences_triggered,
                state.target_occurrences,
                clock.time_string,
            )
            if channel is not None:
                channel.raise_event(event_id)
            if on_fire is not None:
                try:
                    on_fire(clock, ctx, event_id)
                except Exception:
                    logger.exception("on_fire callback failed for time event %s", event_id)

    return time_event_system
