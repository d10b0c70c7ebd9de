"""Long-run properties of the event system over many simulated days."""
from __future__ import annotations

from collections import Counter

import pytest
from daycycle import (
    DayPart,
    DayPartTable,
    Engine,
    GameClock,
    SeededRandom,
    TickContext,
    TimeConfig,
)

from daycycle_event.scheduler import TimeEventScheduler
from daycycle_event.systems import make_time_event_system
from daycycle_event.types import (
    AfterPeriod,
    ChancePerDay,
    EventRuntimeState,
    EveryXDays,
    Multiple,
    OnceEver,
    RandomInWindow,
    TimeEventDef,
)

HOURLY = 60.0
TICKS_PER_DAY = 24


class Harness:
    """Engine + scheduler + event system, recording fires and active days."""

    def __init__(
        self,
        *events: TimeEventDef,
        minutes_per_tick: float = HOURLY,
        table: DayPartTable | None = None,
        seed: int = 7,
    ) -> None:
        self.engine = Engine(
            TimeConfig(time_multiplier=minutes_per_tick), table, tps=1, seed=seed
        )
        self.scheduler = TimeEventScheduler(table)
        for event in events:
            self.scheduler.define(event)
        self.fires: list[tuple[str, int, str | None]] = []
        self.active_days: dict[str, set[int]] = {e.event_id: set() for e in events}
        self.engine.add_system(
            make_time_event_system(self.scheduler, on_fire=self._record_fire)
        )
        self.engine.add_system(self._check)

    def _record_fire(self, clock: GameClock, ctx: TickContext, event_id: str) -> None:
        part = clock.current_day_part
        self.fires.append((event_id, clock.days + 1, part.name if part else None))

    def _check(self, clock: GameClock, ctx: TickContext) -> None:
        for snap in self.scheduler.snapshots():
            assert snap.occurrences_triggered <= snap.target_occurrences
            if snap.is_active_today:
                self.active_days[snap.event_id].add(snap.last_scheduled_day + 1)

    def run_days(self, days: int) -> None:
        """Run until the last tick of day ``days``, stopping short of the next midnight."""
        per_hour = int(HOURLY // self.engine.clock.config.time_multiplier)
        self.engine.run(days * TICKS_PER_DAY * per_hour - 1)

    def fire_days(self, event_id: str) -> list[int]:
        return [day for eid, day, _ in self.fires if eid == event_id]


def test_occurrences_never_exceed_target() -> None:
    h = Harness(
        TimeEventDef(
            event_id="crows",
            window_start_hour=6,
            window_end_hour=20,
            trigger=RandomInWindow(),
            occurrence=Multiple(
                min_occurrences=1,
                max_occurrences=6,
                min_interval_minutes=5,
                max_interval_minutes=90,
            ),
        ),
        minutes_per_tick=10,
    )
    h.run_days(30)
    assert h.fires


def test_single_fires_at_most_once_per_day() -> None:
    h = Harness(
        TimeEventDef(
            event_id="bell",
            window_start_hour=2,
            window_end_hour=22,
            trigger=RandomInWindow(),
        ),
        minutes_per_tick=10,
    )
    h.run_days(100)
    per_day = Counter(h.fire_days("bell"))
    assert set(per_day.values()) == {1}
    assert len(per_day) == 100


@pytest.mark.parametrize("occurrence", [None, Multiple(min_occurrences=2, max_occurrences=4)])
def test_once_ever_fires_on_one_day_only(occurrence: Multiple | None) -> None:
    kwargs = {"occurrence": occurrence} if occurrence else {}
    h = Harness(
        TimeEventDef(
            event_id="comet",
            window_start_hour=3,
            window_end_hour=8,
            frequency=OnceEver(),
            **kwargs,
        )
    )
    h.run_days(60)
    assert set(h.fire_days("comet")) == {1}
    assert h.scheduler.snapshot("comet").has_triggered_once_ever is True
    if occurrence is None:
        assert len(h.fires) == 1


@pytest.mark.parametrize(
    "every, expected",
    [(3, [3, 6, 9, 12]), (1, list(range(1, 13))), (0, list(range(1, 13)))],
)
def test_every_x_days_active_days(every: int, expected: list[int]) -> None:
    h = Harness(
        TimeEventDef(
            event_id="market",
            window_start_hour=1,
            window_end_hour=2,
            frequency=EveryXDays(every),
        )
    )
    h.run_days(12)
    assert sorted(h.active_days["market"]) == expected
    assert h.fire_days("market") == expected


def test_start_day_gates_activation() -> None:
    h = Harness(
        TimeEventDef(event_id="harvest", window_start_hour=1, window_end_hour=2, start_day=5)
    )
    h.run_days(8)
    assert min(h.active_days["harvest"]) == 5
    assert h.fire_days("harvest") == [5, 6, 7, 8]


def test_after_period_trigger_minute() -> None:
    h = Harness(
        TimeEventDef(
            event_id="watch",
            window_start_hour=20,
            window_end_hour=23,
            trigger=AfterPeriod(period_hours=2),
        )
    )
    h.engine.step()
    assert h.scheduler.snapshot("watch").next_trigger_minute == 1320
    h.run_days(1)
    assert h.fires == [("watch", 1, None)]


def test_random_in_window_samples_stay_in_window() -> None:
    scheduler = TimeEventScheduler()
    defn = TimeEventDef(
        event_id="bird", window_start_hour=8, window_end_hour=10, trigger=RandomInWindow()
    )
    clock = GameClock(TimeConfig(), DayPartTable())
    rng = SeededRandom(2024)
    samples = []
    for _ in range(1000):
        state = EventRuntimeState(event_id="bird")
        assert scheduler._schedule_for_new_day(state, defn, clock, rng)
        samples.append(state.next_trigger_minute)
    assert all(480 <= m <= 600 for m in samples)
    assert len(set(samples)) > 1


def test_chance_zero_never_activates() -> None:
    h = Harness(
        TimeEventDef(
            event_id="eclipse",
            window_start_hour=1,
            window_end_hour=2,
            frequency=ChancePerDay(0.0),
        )
    )
    h.run_days(1000)
    assert h.active_days["eclipse"] == set()
    assert h.fires == []


def test_chance_one_activates_every_eligible_day() -> None:
    h = Harness(
        TimeEventDef(
            event_id="sunrise",
            window_start_hour=1,
            window_end_hour=2,
            frequency=ChancePerDay(1.0),
            start_day=3,
        )
    )
    h.run_days(20)
    assert sorted(h.active_days["sunrise"]) == list(range(3, 21))


def test_night_only_event_fires_only_at_night() -> None:
    table = DayPartTable([DayPart("Morning", 6), DayPart("Noon", 12), DayPart("Night", 20)])
    h = Harness(
        TimeEventDef(
            event_id="owl",
            allowed_day_parts={"Night"},
            window_start_hour=0,
            window_end_hour=23,
            trigger=RandomInWindow(),
            occurrence=Multiple(
                min_occurrences=1,
                max_occurrences=5,
                min_interval_minutes=10,
                max_interval_minutes=120,
            ),
        ),
        minutes_per_tick=10,
        table=table,
    )
    h.run_days(50)
    assert h.fires
    assert {part for _, _, part in h.fires} == {"Night"}
