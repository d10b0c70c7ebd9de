"""Sky -- eased colour blends between day parts on an asyncio loop.

Demonstrates:
- SkyBlender as the clock's renderer
- Stepping the engine from a coroutine so blends run alongside it
- A new day part cancelling a blend that is still running

Run: python -m examples.sky
"""

import asyncio
import logging

from daycycle import DayPart, DayPartTable, Engine, TimeConfig
from daycycle_tween import SkyBlender

DAY_PARTS = DayPartTable(
    [
        DayPart("Dawn", 5, transition_seconds=0.6, payload=(255, 160, 90)),
        DayPart("Day", 7, transition_seconds=0.4, payload=(120, 180, 255)),
        DayPart("Dusk", 18, transition_seconds=0.6, payload=(230, 110, 80)),
        DayPart("Night", 20, transition_seconds=1.0, payload=(10, 10, 40)),
    ]
)


async def run(hours: int) -> None:
    blender = SkyBlender(easing="smoothstep")
    # 20 game minutes per tick, 10 ticks per second: two game hours a second.
    engine = Engine(TimeConfig(time_multiplier=200.0), DAY_PARTS, tps=10, renderer=blender)
    clock = engine.clock

    for _ in range(hours * 3):
        engine.step()
        target = blender.state.target
        print(
            f"  {clock.time_string}  {target.name if target else '-':6}"
            f"  blend={blender.state.blend:.2f}  rgb={blender.color()}"
        )
        await asyncio.sleep(engine.dt)

    await blender.wait()
    print(f"\nSettled on {blender.state.target.name}: {blender.color()}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    print("=== Sky blending ===\n")
    asyncio.run(run(hours=24))


if __name__ == "__main__":
    main()
