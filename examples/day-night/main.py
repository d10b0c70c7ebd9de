"""Day/Night -- a village whose sky and sounds follow the game clock.

Exercises daycycle, daycycle-event, daycycle-signal, and daycycle-tween.

Controls:
  Space   Pause / resume the clock
  +/-     Speed the clock up / down
  N       Jump to the next day part
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from daycycle import DayPart, DayPartTable, Engine, TimeConfig
from daycycle_event import (
    AfterPeriod,
    ChancePerDay,
    Multiple,
    RandomInWindow,
    TimeEventDef,
    TimeEventScheduler,
    make_time_event_system,
)
from daycycle_signal import NotificationChannel

from sky import FrameSky

FPS = 60
TPS = 20
SCREEN_W, SCREEN_H = 640, 400
TEXT_COLOR = (230, 230, 240)
TEXT_DIM = (150, 150, 170)
GROUND_COLOR = (30, 40, 25)
SPEEDS = [0.0, 5.0, 20.0, 60.0, 240.0]
LOG_LINES = 10

DAY_PARTS = DayPartTable(
    [
        DayPart("Dawn", 5, transition_seconds=2.0, payload=(240, 150, 100)),
        DayPart("Day", 8, transition_seconds=3.0, payload=(110, 170, 240)),
        DayPart("Dusk", 18, transition_seconds=2.0, payload=(200, 100, 80)),
        DayPart("Night", 21, transition_seconds=4.0, payload=(12, 12, 40)),
    ]
)

EVENTS = [
    TimeEventDef(
        event_id="rooster",
        allowed_day_parts={"Dawn"},
        window_start_hour=5.5,
        window_end_hour=7,
    ),
    TimeEventDef(event_id="church_bell", window_start_hour=12, window_end_hour=13),
    TimeEventDef(
        event_id="market_chatter",
        allowed_day_parts={"Day"},
        window_start_hour=9,
        window_end_hour=16,
        trigger=RandomInWindow(),
        occurrence=Multiple(
            min_occurrences=2,
            max_occurrences=5,
            min_interval_minutes=20,
            max_interval_minutes=90,
        ),
    ),
    TimeEventDef(
        event_id="tavern_song",
        window_start_hour=19,
        window_end_hour=23,
        trigger=AfterPeriod(
            period_hours=1, random_extra=True, extra_min_hours=0, extra_max_hours=2
        ),
        frequency=ChancePerDay(0.6),
    ),
    TimeEventDef(
        event_id="owl_hoot",
        allowed_day_parts={"Night"},
        window_start_hour=0,
        window_end_hour=4,
        trigger=RandomInWindow(),
        occurrence=Multiple(
            min_occurrences=1,
            max_occurrences=3,
            min_interval_minutes=10,
            max_interval_minutes=40,
        ),
    ),
]


class Village:
    """Holds the engine, the event wiring, and the on-screen log."""

    def __init__(self) -> None:
        self.sky = FrameSky()
        self.speed_index = 2
        self.engine = Engine(
            TimeConfig(time_multiplier=SPEEDS[self.speed_index]),
            DAY_PARTS,
            tps=TPS,
            renderer=self.sky,
        )
        self.scheduler = TimeEventScheduler(DAY_PARTS)
        for event in EVENTS:
            self.scheduler.define(event)

        self.channel = NotificationChannel()
        self.channel.subscribe_all(self._on_event)
        self.log: list[str] = []
        self.engine.add_system(make_time_event_system(self.scheduler, self.channel))

        # Apply the starting day part so the sky is not blank.
        self.engine.clock.set_absolute_time(0, 8, 0)

    def _on_event(self, event_id: str) -> None:
        self.log.append(f"{self.engine.clock.time_string}  {event_id}")
        del self.log[:-LOG_LINES]

    def change_speed(self, step: int) -> None:
        self.speed_index = max(0, min(self.speed_index + step, len(SPEEDS) - 1))
        self.engine.clock.set_time_multiplier(SPEEDS[self.speed_index])

    def next_day_part(self) -> None:
        clock = self.engine.clock
        parts = sorted(DAY_PARTS, key=lambda p: p.start_hour)
        later = [p for p in parts if p.start_hour > clock.hours]
        target = later[0] if later else parts[0]
        day = clock.days if later else clock.days + 1
        clock.set_absolute_time(day, target.start_hour, 0)


def draw(screen: pygame.Surface, font: pygame.font.Font, village: Village, paused: bool) -> None:
    screen.fill(village.sky.color())
    pygame.draw.rect(screen, GROUND_COLOR, (0, SCREEN_H - 80, SCREEN_W, 80))

    clock = village.engine.clock
    speed = SPEEDS[village.speed_index]
    header = f"{clock.time_string}   {village.sky.name}   x{speed:g}"
    if paused:
        header += "   [paused]"
    screen.blit(font.render(header, True, TEXT_COLOR), (12, 10))

    y = 40
    for line in village.log:
        screen.blit(font.render(line, True, TEXT_DIM), (12, y))
        y += 20


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Day/Night -- daycycle demo")
    frame_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 15)

    village = Village()
    tick_interval = 1.0 / TPS
    accumulator = 0.0
    paused = False
    running = True

    while running:
        dt = frame_clock.tick(FPS) / 1000.0
        if not paused:
            accumulator += dt

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    village.change_speed(1)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    village.change_speed(-1)
                elif event.key == pygame.K_n:
                    village.next_day_part()

        while accumulator >= tick_interval:
            village.engine.step()
            accumulator -= tick_interval

        draw(screen, font, village, paused)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
