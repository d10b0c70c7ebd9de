"""Tests for TimeConfig validation and TickContext."""

import pytest
from daycycle.rng import SeededRandom
from daycycle.types import TickContext, TimeConfig


class TestTimeConfig:
    def test_defaults(self) -> None:
        config = TimeConfig()
        assert config.minutes_per_hour == 60
        assert config.hours_per_day == 24
        assert config.time_multiplier == 1.0
        assert config.total_minutes_in_day == 1440

    @pytest.mark.parametrize("minutes", [0, -10])
    def test_rejects_non_positive_minutes_per_hour(self, minutes: int) -> None:
        with pytest.raises(ValueError, match="minutes_per_hour"):
            TimeConfig(minutes_per_hour=minutes)

    def test_rejects_non_positive_hours_per_day(self) -> None:
        with pytest.raises(ValueError, match="hours_per_day"):
            TimeConfig(hours_per_day=0)

    def test_rejects_negative_multiplier(self) -> None:
        with pytest.raises(ValueError, match="time_multiplier"):
            TimeConfig(time_multiplier=-1.0)

    def test_zero_multiplier_allowed(self) -> None:
        assert TimeConfig(time_multiplier=0.0).time_multiplier == 0.0

    def test_frozen(self) -> None:
        config = TimeConfig()
        with pytest.raises(AttributeError):
            config.hours_per_day = 12  # type: ignore[misc]


def test_tick_context_is_frozen():
    ctx = TickContext(
        tick_number=1, dt=0.05, elapsed=0.05, request_stop=lambda: None, random=SeededRandom(0)
    )
    with pytest.raises(AttributeError):
        ctx.tick_number = 99  # type: ignore[misc]
