"""daycycle - An in-game clock with day parts, driven by a fixed-timestep loop."""

from daycycle.clock import GameClock
from daycycle.dayparts import DayPart, DayPartTable
from daycycle.engine import Engine
from daycycle.rng import SeededRandom
from daycycle.types import (
    ClockSnapshot,
    DayPartRenderer,
    RandomSource,
    TickContext,
    TimeConfig,
)

__all__ = [
    "Engine",
    "GameClock",
    "DayPart",
    "DayPartTable",
    "TimeConfig",
    "TickContext",
    "ClockSnapshot",
    "RandomSource",
    "DayPartRenderer",
    "SeededRandom",
]
