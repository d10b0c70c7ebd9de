"""DayPart records and the start-hour lookup table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(frozen=True)
class DayPart:
    """A named segment of the day starting at an exact hour.

    ``payload`` carries whatever the renderer needs (sky colour, texture
    handle, ...). The core passes it through untouched and it takes no part
    in equality.
    """

    name: str
    start_hour: int
    transition_seconds: float = 5.0
    payload: Any = field(default=None, compare=False)


class DayPartTable:
    """Ordered day parts, looked up by exact start hour."""

    def __init__(self, parts: Iterable[DayPart] = ()) -> None:
        self._parts: list[DayPart] = []
        for part in parts:
            self.add(part)

    def add(self, part: DayPart) -> None:
        """Register a part. Registration order is kept."""
        self._parts.append(part)

    def lookup(self, hour: int) -> DayPart | None:
        """Part whose start_hour equals hour. First registered wins."""
        for part in self._parts:
            if part.start_hour == hour:
                return part
        return None

    def first(self) -> DayPart | None:
        return self._parts[0] if self._parts else None

    def names(self) -> list[str]:
        return [part.name for part in self._parts]

    def __iter__(self) -> Iterator[DayPart]:
        return iter(self._parts)

    def __len__(self) -> int:
        return len(self._parts)
