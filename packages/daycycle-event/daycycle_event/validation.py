"""Configuration checks for time events and the day part table.

Nothing here raises: every problem becomes a ConfigurationWarning and the
scheduler degrades gracefully at run time.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from daycycle_event.types import (
    AfterPeriod,
    AtFixedTime,
    ChancePerDay,
    ConfigurationWarning,
    EveryXDays,
    Multiple,
    TimeEventDef,
)

if TYPE_CHECKING:
    from daycycle import DayPartTable, TimeConfig


def validate_event(
    defn: TimeEventDef, day_parts: DayPartTable | None = None
) -> list[ConfigurationWarning]:
    """Return every warning for one definition, in a stable order."""
    warnings: list[ConfigurationWarning] = []

    def warn(setting: str, message: str) -> None:
        warnings.append(ConfigurationWarning(defn.event_id, setting, message))

    if not isinstance(defn.trigger, AtFixedTime):
        if defn.window_end_hour <= defn.window_start_hour:
            warn(
                "window_end_hour",
                "window end hour should be greater than window start hour",
            )
    elif defn.window_end_hour < defn.window_start_hour:
        warn(
            "window_end_hour",
            "window closes before the fixed start hour; the event never fires",
        )

    trigger = defn.trigger
    if isinstance(trigger, AfterPeriod) and trigger.random_extra:
        if trigger.extra_min_hours > trigger.extra_max_hours:
            warn(
                "extra_min_hours",
                "random extra min is greater than max; the draw is taken between them",
            )

    occurrence = defn.occurrence
    if isinstance(occurrence, Multiple):
        if occurrence.min_occurrences < 1:
            warn("min_occurrences", "min occurrences should be at least 1")
        if occurrence.max_occurrences < 1:
            warn("max_occurrences", "max occurrences should be at least 1")
        if occurrence.max_occurrences < occurrence.min_occurrences:
            warn(
                "max_occurrences",
                "max occurrences is smaller than min; max is treated as min",
            )
        if occurrence.min_interval_minutes < 0 or occurrence.max_interval_minutes < 0:
            warn("min_interval_minutes", "intervals should not be negative; clamped to 0")
        if occurrence.max_interval_minutes < occurrence.min_interval_minutes:
            warn(
                "max_interval_minutes",
                "max interval is smaller than min; max is treated as min",
            )

    if defn.start_day < 0:
        warn("start_day", "start day is negative; use 0 for no start day")

    frequency = defn.frequency
    if isinstance(frequency, EveryXDays) and frequency.days <= 0:
        warn("every_x_days", "every X days should be at least 1; repaired to 1")
    elif isinstance(frequency, ChancePerDay):
        if frequency.chance <= 0.0:
            warn("chance", "daily chance is 0 or less; the event is never active")
        elif frequency.chance >= 1.0:
            warn("chance", "daily chance is 1 or more; same as every day")

    if day_parts is not None:
        known = set(day_parts.names())
        for name in sorted(defn.allowed_day_parts - known):
            warn(
                "allowed_day_parts",
                f"day part {name!r} is not in the day part table; it never matches",
            )

    return warnings


def validate_day_parts(
    day_parts: DayPartTable, config: TimeConfig
) -> list[ConfigurationWarning]:
    """Check the day part table against the shape of the day."""
    warnings: list[ConfigurationWarning] = []
    if len(day_parts) == 0:
        warnings.append(
            ConfigurationWarning(None, "day_parts", "no day parts are defined")
        )
        return warnings

    seen: set[int] = set()
    for part in day_parts:
        if not 0 <= part.start_hour < config.hours_per_day:
            warnings.append(
                ConfigurationWarning(
                    None,
                    "start_hour",
                    f"day part {part.name!r} starts at hour {part.start_hour}, "
                    f"outside 0..{config.hours_per_day - 1}; it is never reached",
                )
            )
        if part.start_hour in seen:
            warnings.append(
                ConfigurationWarning(
                    None,
                    "start_hour",
                    f"day part {part.name!r} shares start hour {part.start_hour} "
                    "with an earlier part; the earlier one wins",
                )
            )
        seen.add(part.start_hour)
    return warnings
