"""Frame-polled sky renderer for the pygame loop."""
from __future__ import annotations

import time

from daycycle import DayPart
from daycycle_tween import EASINGS, lerp_color

FALLBACK_COLOR = (20, 20, 30)


class FrameSky:
    """Day part renderer blended by wall time, read once per frame.

    pygame draws from a plain loop, so instead of running a task the blend
    is computed from the time the last change arrived.
    """

    def __init__(self, easing: str = "ease_in_out") -> None:
        self._ease = EASINGS[easing]
        self._source: tuple[int, int, int] = FALLBACK_COLOR
        self._target: tuple[int, int, int] = FALLBACK_COLOR
        self._started = 0.0
        self._duration = 0.0
        self.name = "-"

    def on_day_part_changed(
        self, old: DayPart | None, new: DayPart, transition_seconds: float
    ) -> None:
        # Start from whatever is on screen right now.
        self._source = self.color()
        self._target = new.payload or FALLBACK_COLOR
        self._started = time.monotonic()
        self._duration = transition_seconds
        self.name = new.name

    def progress(self) -> float:
        if self._duration <= 0:
            return 1.0
        return min((time.monotonic() - self._started) / self._duration, 1.0)

    def color(self) -> tuple[int, int, int]:
        return lerp_color(self._source, self._target, self._ease(self.progress()))
