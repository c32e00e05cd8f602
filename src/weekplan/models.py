"""Data models for weekplan."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import time, timedelta
from enum import IntEnum
from typing import Any

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
MINUTE = timedelta(minutes=1)


class Weekday(IntEnum):
    """Day of the week, Monday first (matches ``datetime.date.weekday()``)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Any) -> Weekday:
        """Parse a weekday from an enum member, index, full name or 3-letter abbreviation.

        Supported formats:
        - Weekday.MONDAY, 0
        - "MONDAY", "monday", "Mon"
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        text = str(value).strip().upper()
        for day in cls:
            if text in (day.name, day.name[:3]):
                return day
        raise ValueError(f"Unknown weekday: {value!r}")

    @property
    def label(self) -> str:
        """Human-readable day name, e.g. "Monday"."""
        return self.name.title()


def minutes_of(value: time) -> int:
    """Return minutes since midnight for a time of day."""
    return value.hour * MINUTES_PER_HOUR + value.minute


def time_from_minutes(minutes: int) -> time:
    """Build a time of day from minutes since midnight."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"Minutes out of range for a time of day: {minutes}")
    return time(minutes // MINUTES_PER_HOUR, minutes % MINUTES_PER_HOUR)


def parse_time_of_day(value: Any) -> time:
    """Parse a time of day.

    Supported formats:
    - datetime.time
    - "08:00", "8:00", "14:30:00"
    - int, as produced by YAML 1.1 for unquoted base-60 values (``14:00`` -> 840)

    The seconds field, when given, must be zero: schedules work in whole minutes.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid time of day: {value!r}")
    if isinstance(value, int):
        return time_from_minutes(value)

    if isinstance(value, time):
        parsed = value
    else:
        match = re.match(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$", str(value).strip())
        if not match:
            raise ValueError(f"Invalid time of day: {value!r} (expected HH:MM)")
        hours, minutes, seconds = match.groups()
        parsed = time(int(hours), int(minutes), int(seconds or 0))

    if not is_whole_minute(parsed):
        raise ValueError(f"Time of day must be a whole minute: {value!r}")
    return parsed


def is_whole_minute(value: time) -> bool:
    return value.second == 0 and value.microsecond == 0


def parse_duration(value: Any) -> timedelta:
    """Parse a task duration.

    Supported formats:
    - timedelta
    - 45 (minutes)
    - "45", "45m", "2h", "1h30m", "1.5h"

    The result must be a whole number of minutes, so "0.5m" is rejected.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")

    if isinstance(value, timedelta):
        duration = value
    elif isinstance(value, (int, float)):
        duration = timedelta(minutes=value)
    else:
        text = str(value).strip().lower().replace(" ", "")
        match = re.match(r"^(?:([\d.]+)h)?(?:([\d.]+)m(?:in)?)?$", text)
        if re.match(r"^[\d.]+$", text):
            duration = timedelta(minutes=float(text))
        elif text and match and any(match.groups()):
            hours, minutes = match.groups()
            duration = timedelta(hours=float(hours or 0), minutes=float(minutes or 0))
        else:
            raise ValueError(f"Invalid duration: {value!r} (expected e.g. '30m', '1h', '1h30m')")

    if duration % MINUTE:
        raise ValueError(f"Duration must be a whole number of minutes: {value!r}")
    return duration


@dataclass(frozen=True, order=True)
class TimeSlot:
    """A time range on a single day of the week.

    Comparisons between slots are only meaningful for slots on the same day;
    slots on different days never intersect or envelop each other.
    """

    day: Weekday
    start: time
    end: time

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Slot start {self.start} must not be after end {self.end}")
        if not (is_whole_minute(self.start) and is_whole_minute(self.end)):
            raise ValueError(f"Slot bounds must be whole minutes: {self.start}-{self.end}")

    @property
    def start_minutes(self) -> int:
        return minutes_of(self.start)

    @property
    def end_minutes(self) -> int:
        return minutes_of(self.end)

    @property
    def duration(self) -> timedelta:
        return timedelta(minutes=self.end_minutes - self.start_minutes)

    def intersects(self, other: TimeSlot) -> bool:
        """True iff both slots are on the same day and their half-open ranges overlap."""
        return self.day == other.day and self.start < other.end and other.start < self.end

    def envelops(self, other: TimeSlot) -> bool:
        """True iff both slots are on the same day and ``other`` lies within this slot."""
        return self.day == other.day and self.start <= other.start and other.end <= self.end

    def __str__(self) -> str:
        return f"{self.day.label} {self.start:%H:%M}-{self.end:%H:%M}"


@dataclass(frozen=True)
class Task:
    """A task to be placed in the week.

    Tasks compare and hash by ID only.
    """

    id: str
    name: str = field(compare=False)
    duration: timedelta = field(compare=False)
    description: str = field(default="", compare=False)
    dependencies: frozenset[str] = field(default_factory=frozenset, compare=False)
    ideal_windows: tuple[TimeSlot, ...] = field(default_factory=tuple, compare=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError(f"Task '{self.id}' must have a non-blank name")
        if self.duration <= timedelta(0):
            raise ValueError(f"Task '{self.id}' duration must be positive, got {self.duration}")
        if self.duration % MINUTE:
            raise ValueError(
                f"Task '{self.id}' duration must be a whole number of minutes, got {self.duration}"
            )
        # Accept any iterable for the collection fields
        object.__setattr__(self, "dependencies", frozenset(self.dependencies))
        object.__setattr__(self, "ideal_windows", tuple(self.ideal_windows))

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def duration_minutes(self) -> int:
        return self.duration // MINUTE


@dataclass(frozen=True)
class Placement:
    """A task assigned to a slot, with the cost charged for that choice."""

    task_id: str
    slot: TimeSlot
    cost: int

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Placement cost must be >= 0, got {self.cost}")


@dataclass(frozen=True)
class ScheduleState:
    """A partial (or complete) schedule.

    States are never mutated after construction: every search step builds a
    new state, so placement dictionaries may be shared freely between
    branches. Iteration order of ``unplaced`` is the order in which both
    search strategies consider tasks.
    """

    placed: dict[str, Placement]
    unplaced: dict[str, Task]
    cost_so_far: int = 0
    estimated_total_cost: int = 0

    def __post_init__(self) -> None:
        shared = self.placed.keys() & self.unplaced.keys()
        if shared:
            raise ValueError(f"Tasks both placed and unplaced: {sorted(shared)}")
        if self.estimated_total_cost < self.cost_so_far:
            raise ValueError(
                f"Estimated total cost {self.estimated_total_cost} "
                f"is below cost so far {self.cost_so_far}"
            )

    @classmethod
    def initial(cls, tasks: Mapping[str, Task] | Iterable[Task]) -> ScheduleState:
        """Build a start state with nothing placed.

        Tasks are ordered by ID so that searches from this state are deterministic.
        """
        if isinstance(tasks, Mapping):
            task_list: list[Task] = list(tasks.values())  # type: ignore[arg-type]
        else:
            task_list = list(tasks)
        unplaced = {task.id: task for task in sorted(task_list, key=lambda t: t.id)}
        return cls(placed={}, unplaced=unplaced)

    @property
    def is_complete(self) -> bool:
        return not self.unplaced

    @property
    def task_ids(self) -> set[str]:
        return set(self.placed) | set(self.unplaced)

    def has_space_for(self, slot: TimeSlot) -> bool:
        """True iff ``slot`` overlaps no placed slot."""
        return not any(placement.slot.intersects(slot) for placement in self.placed.values())

    def placements_by_day(self) -> dict[Weekday, list[Placement]]:
        """Group placements by day, each day sorted by start time."""
        by_day: dict[Weekday, list[Placement]] = {}
        for placement in sorted(self.placed.values(), key=lambda p: p.slot):
            by_day.setdefault(placement.slot.day, []).append(placement)
        return by_day
