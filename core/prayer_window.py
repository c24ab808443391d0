"""
Prayer window resolver.

The six daily boundaries form a ring: walking past the last one of the day
lands on the first one of the next day. `resolve` walks that ring from the
first slot and stops at the first boundary still ahead of `now`.
"""

from dataclasses import dataclass
from datetime import datetime, time
from typing import Sequence, Union

from core.errors import InsufficientData

MINUTES_PER_DAY = 24 * 60

# Canonical slot keys, in day order. Labels are looked up per locale.
SLOT_KEYS = ["Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]

DEFAULT_REMAINING_TEMPLATE = "{hours}h {minutes}m"


@dataclass(frozen=True)
class PrayerSlot:
    label: str
    boundary: int  # minutes since local midnight

    def __post_init__(self):
        object.__setattr__(self, "boundary", self.boundary % MINUTES_PER_DAY)

    @property
    def clock(self) -> str:
        return format_clock(self.boundary)


@dataclass(frozen=True)
class NextPrayer:
    label: str
    boundary: int
    remaining_minutes: int

    @property
    def hours_left(self) -> int:
        return self.remaining_minutes // 60

    @property
    def minutes_left(self) -> int:
        return self.remaining_minutes % 60

    @property
    def clock(self) -> str:
        return format_clock(self.boundary)

    def remaining(self, template: str = DEFAULT_REMAINING_TEMPLATE) -> str:
        return format_remaining(self.remaining_minutes, template)


def to_time_of_day(value: Union[datetime, time, int, float]) -> int:
    """Minutes since midnight for a clock value or a minute count. Seconds are dropped."""
    if isinstance(value, (datetime, time)):
        return (value.hour * 60 + value.minute) % MINUTES_PER_DAY
    return int(value) % MINUTES_PER_DAY


def format_clock(minutes: int) -> str:
    hours, mins = divmod(minutes % MINUTES_PER_DAY, 60)
    return f"{hours:02d}:{mins:02d}"


def format_remaining(minutes: int, template: str = DEFAULT_REMAINING_TEMPLATE) -> str:
    """420 -> '7h 0m' with the default template."""
    hours, mins = divmod(minutes, 60)
    return template.format(hours=hours, minutes=mins)


def resolve(slots: Sequence[PrayerSlot], now: Union[datetime, time, int, float]) -> NextPrayer:
    """Return the next prayer after `now`.

    `slots` must already be in day order; they are neither sorted nor
    validated here. A boundary equal to `now` counts as passed.

    Raises InsufficientData when `slots` is empty.
    """
    if not slots:
        raise InsufficientData("no prayer slots loaded")

    current = to_time_of_day(now)
    ring_size = len(slots)

    position = 0
    while position < ring_size and slots[position].boundary <= current:
        position += 1

    day_offset, index = divmod(position, ring_size)
    slot = slots[index]
    remaining = slot.boundary + day_offset * MINUTES_PER_DAY - current

    return NextPrayer(label=slot.label, boundary=slot.boundary, remaining_minutes=remaining)
