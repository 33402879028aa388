"""Game time.

Usage:
    noon = Instant.from_day(day=3, time_of_day=6000)
    noon.day          # 3
    noon.time_of_day  # 6000
"""

from __future__ import annotations

from dataclasses import dataclass

TICKS_PER_DAY = 24_000


@dataclass(frozen=True, slots=True, order=True)
class Instant:
    """Absolute game time counted in ticks since world creation."""

    ticks: int = 0

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise ValueError(f"Instant cannot be negative, got {self.ticks} ticks")

    @classmethod
    def from_day(cls, day: int, time_of_day: int) -> Instant:
        """Build an instant from a day index and the ticks elapsed in that day.

        Raises:
            ValueError: If time_of_day is outside [0, TICKS_PER_DAY).
        """
        if not 0 <= time_of_day < TICKS_PER_DAY:
            raise ValueError(
                f"time_of_day must be in [0, {TICKS_PER_DAY}), got {time_of_day}"
            )
        return cls(TICKS_PER_DAY * day + time_of_day)

    @property
    def day(self) -> int:
        return self.ticks // TICKS_PER_DAY

    @property
    def time_of_day(self) -> int:
        """Ticks into the current day, as read by daylight detectors."""
        return self.ticks % TICKS_PER_DAY

    def __add__(self, ticks: int) -> Instant:
        if not isinstance(ticks, int):
            return NotImplemented
        return Instant(self.ticks + ticks)
