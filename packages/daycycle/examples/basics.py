"""Basics -- a game clock with day parts and a few time events.

Demonstrates:
- Configuring the clock shape and speed with TimeConfig
- Registering day parts and printing their changes
- Defining time events and listening for them on a NotificationChannel
- Day-part gating (the owl only hoots at night)

Run: python -m examples.basics
"""

import logging

from daycycle import DayPart, DayPartTable, Engine, TimeConfig
from daycycle_event import (
    Multiple,
    OnceEver,
    RandomInWindow,
    TimeEventDef,
    TimeEventScheduler,
    make_time_event_system,
)
from daycycle_signal import NotificationChannel


class PrintRenderer:
    """Prints day part changes instead of drawing them."""

    def on_day_part_changed(self, old, new, transition_seconds):
        was = old.name if old else "-"
        print(f"  ~ {was} -> {new.name} over {transition_seconds:.1f}s")


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    print("=== Day cycle basics ===\n")

    day_parts = DayPartTable(
        [
            DayPart("Dawn", 5, transition_seconds=3.0),
            DayPart("Day", 8),
            DayPart("Dusk", 18, transition_seconds=3.0),
            DayPart("Night", 21, transition_seconds=8.0),
        ]
    )

    # One real second is one game hour, ticking every game minute.
    engine = Engine(
        TimeConfig(time_multiplier=60.0),
        day_parts,
        tps=60,
        seed=7,
        renderer=PrintRenderer(),
    )

    scheduler = TimeEventScheduler(day_parts)
    scheduler.define(
        TimeEventDef(event_id="church_bell", window_start_hour=12, window_end_hour=13)
    )
    scheduler.define(
        TimeEventDef(
            event_id="owl_hoot",
            allowed_day_parts={"Night"},
            window_start_hour=21,
            window_end_hour=23,
            trigger=RandomInWindow(),
            occurrence=Multiple(
                min_occurrences=2,
                max_occurrences=4,
                min_interval_minutes=5,
                max_interval_minutes=20,
            ),
        )
    )
    scheduler.define(
        TimeEventDef(
            event_id="comet",
            window_start_hour=2,
            window_end_hour=3,
            frequency=OnceEver(),
            start_day=2,
        )
    )

    channel = NotificationChannel()
    clock = engine.clock
    channel.subscribe_all(lambda event_id: print(f"  {clock.time_string}  {event_id}"))

    engine.add_system(make_time_event_system(scheduler, channel))

    # Three game days: 72 game hours at 60 ticks per hour.
    engine.run(72 * 60)

    print(f"\nDone at {clock.time_string}.")
    for snap in scheduler.snapshots():
        print(f"  {snap.event_id}: {snap.occurrences_triggered}/{snap.target_occurrences} today")


if __name__ == "__main__":
    main()
