"""SkyBlender - an asyncio day part renderer with cancellable blends."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from daycycle_tween.easing import EASINGS, lerp_color

if TYPE_CHECKING:
    from daycycle import DayPart

logger = logging.getLogger(__name__)


@dataclass
class SkyState:
    """What the sky shows: a blend from source to target."""

    source: DayPart | None = None
    target: DayPart | None = None
    blend: float = 1.0


class SkyBlender:
    """Renders day part changes as eased blends.

    Each change starts an asyncio task that moves ``state.blend`` from 0 to
    1 over the transition time. A newer change cancels the running task and
    blends on from whatever the previous change was heading to. Without a
    running event loop, or with a zero duration, the change snaps.
    """

    def __init__(self, easing: str = "linear", step_seconds: float = 1 / 30) -> None:
        if easing not in EASINGS:
            raise ValueError(f"Unknown easing {easing!r}")
        if step_seconds <= 0:
            raise ValueError("step_seconds must be positive")
        self._easing = EASINGS[easing]
        self._step = step_seconds
        self._state = SkyState()
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> SkyState:
        return self._state

    @property
    def is_blending(self) -> bool:
        return self._task is not None and not self._task.done()

    def on_day_part_changed(
        self, old: DayPart | None, new: DayPart, transition_seconds: float
    ) -> None:
        self._cancel()
        source = self._state.target if self._state.target is not None else old
        self._state = SkyState(source=source, target=new, blend=0.0)

        if transition_seconds <= 0:
            self._state.blend = 1.0
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("no running event loop, snapping to %s", new.name)
            self._state.blend = 1.0
            return
        self._task = loop.create_task(self._blend(self._state, transition_seconds))

    async def _blend(self, state: SkyState, duration: float) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        while True:
            t = min((loop.time() - started) / duration, 1.0)
            state.blend = self._easing(t)
            if t >= 1.0:
                break
            await asyncio.sleep(self._step)
        state.blend = 1.0

    def _cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for the running blend, if any, to finish or be cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    def color(self) -> tuple[int, int, int] | None:
        """Current colour, for day parts whose payload is an RGB tuple."""
        target = self._state.target
        if target is None or target.payload is None:
            return None
        source = self._state.source
        if source is None or source.payload is None:
            return target.payload
        return lerp_color(source.payload, target.payload, self._state.blend)
