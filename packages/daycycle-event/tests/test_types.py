"""Tests for daycycle_event.types."""
from __future__ import annotations

import dataclasses

import pytest

from daycycle_event.types import (
    AfterPeriod,
    AtFixedTime,
    ChancePerDay,
    EventRuntimeState,
    EveryDay,
    EveryXDays,
    Multiple,
    Single,
    TimeEventDef,
    UnknownEventError,
)


class TestTimeEventDef:
    def test_defaults(self) -> None:
        d = TimeEventDef(event_id="bell")
        assert d.allowed_day_parts == frozenset()
        assert d.window_start_hour == 0.0
        assert d.window_end_hour == 0.0
        assert d.trigger == AtFixedTime()
        assert d.occurrence == Single()
        assert d.frequency == EveryDay()
        assert d.start_day == 0

    def test_allowed_day_parts_coerced_to_frozenset(self) -> None:
        d = TimeEventDef(event_id="owl", allowed_day_parts={"Night", "Dusk"})
        assert isinstance(d.allowed_day_parts, frozenset)
        assert d.allowed_day_parts == frozenset({"Night", "Dusk"})

        d = TimeEventDef(event_id="owl", allowed_day_parts=["Night"])
        assert d.allowed_day_parts == frozenset({"Night"})

    def test_definition_is_frozen(self) -> None:
        d = TimeEventDef(event_id="bell")
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.window_start_hour = 3.0  # type: ignore[misc]

    def test_definitions_hash_by_id(self) -> None:
        d = TimeEventDef(event_id="market", frequency=EveryXDays(3))
        assert hash(d) == hash(TimeEventDef(event_id="market", frequency=EveryXDays(3)))
        assert {d, TimeEventDef(event_id="bell")} == {
            TimeEventDef(event_id="bell"),
            TimeEventDef(event_id="market", frequency=EveryXDays(3)),
        }

    def test_every_x_days_is_the_only_mutable_variant(self) -> None:
        freq = EveryXDays(days=0)
        freq.days = 1
        assert freq.days == 1
        with pytest.raises(dataclasses.FrozenInstanceError):
            ChancePerDay(0.5).chance = 1.0  # type: ignore[misc]


class TestVariantDefaults:
    def test_after_period(self) -> None:
        t = AfterPeriod()
        assert t.period_hours == 1.0
        assert t.random_extra is False

    def test_multiple(self) -> None:
        m = Multiple()
        assert (m.min_occurrences, m.max_occurrences) == (1, 1)
        assert (m.min_interval_minutes, m.max_interval_minutes) == (0.1, 0.5)

    def test_chance_per_day(self) -> None:
        assert ChancePerDay().chance == 1.0


class TestRuntimeState:
    def test_fresh_state(self) -> None:
        s = EventRuntimeState(event_id="bell")
        assert s.last_scheduled_day == -1
        assert s.is_active_today is False
        assert s.target_occurrences == 0
        assert s.occurrences_triggered == 0
        assert s.has_triggered_once_ever is False


def test_unknown_event_error_is_key_error() -> None:
    err = UnknownEventError("ghost")
    assert isinstance(err, KeyError)
    assert err.event_id == "ghost"
