"""Recurring, day-part gated time events for the day cycle engine."""
from daycycle_event.scheduler import TimeEventScheduler
from daycycle_event.systems import make_time_event_system
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
from daycycle_event.validation import validate_day_parts, validate_event

__all__ = [
    "TimeEventDef",
    "EventRuntimeState",
    "EventSnapshot",
    "AtFixedTime",
    "RandomInWindow",
    "AfterPeriod",
    "Single",
    "Multiple",
    "EveryDay",
    "OnceEver",
    "EveryXDays",
    "ChancePerDay",
    "ConfigurationWarning",
    "UnknownEventError",
    "TimeEventScheduler",
    "make_time_event_system",
    "validate_event",
    "validate_day_parts",
]
