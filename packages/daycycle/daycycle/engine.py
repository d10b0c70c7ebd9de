"""Engine - fixed-timestep loop driving the game clock and systems."""

import logging
import os
import time
from typing import Callable

from daycycle.clock import GameClock
from daycycle.dayparts import DayPartTable
from daycycle.rng import SeededRandom
from daycycle.types import DayPartRenderer, RandomSource, System, TickContext, TimeConfig

logger = logging.getLogger(__name__)


class Engine:
    def __init__(
        self,
        config: TimeConfig | None = None,
        day_parts: DayPartTable | None = None,
        tps: int = 20,
        seed: int | None = None,
        rng: RandomSource | None = None,
        renderer: DayPartRenderer | None = None,
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._clock = GameClock(
            config or TimeConfig(), day_parts or DayPartTable(), renderer
        )
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[GameClock, TickContext], None]] = []
        self._stop_hooks: list[Callable[[GameClock, TickContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng: RandomSource = rng if rng is not None else SeededRandom(seed)

    @property
    def clock(self) -> GameClock:
        return self._clock

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> RandomSource:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[GameClock, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[GameClock, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=self._request_stop,
            random=self._rng,
        )

    def _tick(self) -> None:
        self._tick_number += 1
        self._clock.advance(self._dt)
        ctx = self._context()
        for system in self._systems:
            system(self._clock, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._clock, ctx)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._clock, ctx)

    def run_forever(self) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._clock, ctx)

        logger.debug("engine running at %d tps (seed %d)", self._tps, self._seed)
        dt = self._dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._clock, ctx)
