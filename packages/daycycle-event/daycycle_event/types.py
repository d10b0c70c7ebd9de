"""Core data types for time event scheduling."""
from __future__ import annotations

from dataclasses import dataclass, field


class UnknownEventError(KeyError):
    """Raised when querying an event id that was never defined."""

    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"Unknown time event {event_id!r}")


# --- Trigger modes: when in the day the (first) occurrence is due ---


@dataclass(frozen=True)
class AtFixedTime:
    """Due exactly at the window start."""


@dataclass(frozen=True)
class RandomInWindow:
    """Due at a random minute between window start and end, inclusive."""


@dataclass(frozen=True)
class AfterPeriod:
    """Due period_hours after the window start, plus optional random extra."""

    period_hours: float = 1.0
    random_extra: bool = False
    extra_min_hours: float = 0.0
    extra_max_hours: float = 0.0


Trigger = AtFixedTime | RandomInWindow | AfterPeriod


# --- Occurrence modes: how many firings per active day ---


@dataclass(frozen=True)
class Single:
    pass


@dataclass(frozen=True)
class Multiple:
    min_occurrences: int = 1
    max_occurrences: int = 1
    min_interval_minutes: float = 0.1
    max_interval_minutes: float = 0.5


Occurrence = Single | Multiple


# --- Frequencies: which days an event may be scheduled on at all ---


@dataclass(frozen=True)
class EveryDay:
    pass


@dataclass(frozen=True)
class OnceEver:
    pass


@dataclass
class EveryXDays:
    """Active on day numbers divisible by ``days``. Repairs days <= 0 to 1 on use."""

    days: int = 1


@dataclass(frozen=True)
class ChancePerDay:
    chance: float = 1.0  # [0.0, 1.0]


Frequency = EveryDay | OnceEver | EveryXDays | ChancePerDay


@dataclass(frozen=True)
class TimeEventDef:
    """Definition of a recurring time event. Not mutated by the scheduler,
    except for the EveryXDays repair."""

    event_id: str
    allowed_day_parts: frozenset[str] = frozenset()  # empty = any day part
    window_start_hour: float = 0.0
    window_end_hour: float = 0.0
    trigger: Trigger = field(default_factory=AtFixedTime)
    occurrence: Occurrence = field(default_factory=Single)
    frequency: Frequency = field(default_factory=EveryDay)
    start_day: int = 0  # 1-based day number, <= 0 = from the first day

    def __post_init__(self) -> None:
        if not isinstance(self.allowed_day_parts, frozenset):
            object.__setattr__(
                self, "allowed_day_parts", frozenset(self.allowed_day_parts)
            )

    def __hash__(self) -> int:
        # EveryXDays is mutable and unhashable; the id identifies a definition.
        return hash(self.event_id)


@dataclass
class EventRuntimeState:
    """Per-event scheduling state, owned by the scheduler."""

    event_id: str
    last_scheduled_day: int = -1
    is_active_today: bool = False
    target_occurrences: int = 0
    occurrences_triggered: int = 0
    next_trigger_minute: int = 0
    has_triggered_once_ever: bool = False


@dataclass(frozen=True)
class EventSnapshot:
    """Read-only diagnostics for one event."""

    event_id: str
    is_active_today: bool
    occurrences_triggered: int
    target_occurrences: int
    next_trigger_minute: int
    last_scheduled_day: int
    has_triggered_once_ever: bool


@dataclass(frozen=True)
class ConfigurationWarning:
    """A non-fatal problem with a definition or the day part table."""

    event_id: str | None
    setting: str
    message: str
