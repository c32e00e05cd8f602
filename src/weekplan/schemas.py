"""Pydantic schemas for task file validation."""

from __future__ import annotations

from datetime import time, timedelta
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from .models import Task, TimeSlot, Weekday, parse_duration, parse_time_of_day


class IdealWindowSchema(BaseModel):
    """Schema for an ideal time window.

    Either ``day`` (one window) or ``days`` (the same hours on several days).
    """

    day: str | None = None
    days: list[str] = Field(default_factory=list)
    start: time
    end: time

    @field_validator("start", "end", mode="before")
    @classmethod
    def coerce_time(cls, v: Any) -> time:
        """Accept "HH:MM" strings and YAML base-60 integers."""
        return parse_time_of_day(v)

    @field_validator("day", mode="before")
    @classmethod
    def coerce_day(cls, v: Any) -> str | None:
        """Normalize the day name."""
        if v is None:
            return None
        return Weekday.parse(v).name

    @field_validator("days", mode="before")
    @classmethod
    def coerce_days(cls, v: Any) -> list[str]:
        """Ensure value is a list of normalized day names."""
        if v is None:
            return []
        if not isinstance(v, list):
            v = [v]
        return [Weekday.parse(item).name for item in v]  # type: ignore[union-attr]

    @model_validator(mode="after")
    def check_window(self) -> IdealWindowSchema:
        """Require exactly one of day/days and a non-inverted range."""
        if (self.day is None) == (not self.days):
            raise ValueError("Ideal window needs exactly one of 'day' or 'days'")
        if self.start > self.end:
            raise ValueError(f"Ideal window start {self.start} is after end {self.end}")
        return self

    def to_slots(self) -> list[TimeSlot]:
        """Expand into one TimeSlot per day."""
        day_names = [self.day] if self.day is not None else self.days
        return [
            TimeSlot(day=Weekday[name], start=self.start, end=self.end) for name in day_names
        ]


class TaskSchema(BaseModel):
    """Schema for a single task entry."""

    name: str
    description: str = ""
    duration: timedelta
    requires: list[str] = Field(default_factory=list)
    depends_on: list[str] | None = None  # Alias for requires
    ideal_windows: list[IdealWindowSchema] = Field(default_factory=list)

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, v: Any) -> timedelta:
        """Accept minutes or strings like "1h30m"."""
        return parse_duration(v)

    @field_validator("requires", "depends_on", mode="before")
    @classmethod
    def ensure_list(cls, v: Any, info: ValidationInfo) -> list[str] | None:
        """Ensure value is a list."""
        if v is None:
            return None if info.field_name == "depends_on" else []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]

    @field_validator("ideal_windows", mode="before")
    @classmethod
    def default_windows(cls, v: Any) -> Any:
        """Treat an empty YAML value as no windows."""
        return [] if v is None else v

    @model_validator(mode="after")
    def handle_depends_on_alias(self) -> TaskSchema:
        """Fold 'depends_on' into 'requires'."""
        if self.depends_on is not None:
            if self.requires:
                raise ValueError("Cannot specify both 'depends_on' and 'requires'.")
            self.requires = self.depends_on
            self.depends_on = None
        return self

    def to_task(self, task_id: str) -> Task:
        """Convert to a domain Task."""
        windows = [slot for window in self.ideal_windows for slot in window.to_slots()]
        return Task(
            id=task_id,
            name=self.name,
            description=self.description,
            duration=self.duration,
            dependencies=frozenset(self.requires),
            ideal_windows=tuple(windows),
        )


class TaskFileSchema(BaseModel):
    """Schema for an entire task file."""

    config: dict[str, Any] | None = None  # Same shape as weekplan_config.yaml
    tasks: dict[str, TaskSchema] = Field(default_factory=dict)
