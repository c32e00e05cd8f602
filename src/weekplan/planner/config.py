"""Configuration classes for the planning engine."""

from datetime import time
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from weekplan.models import Weekday, minutes_of, parse_time_of_day


class StrategyType(str, Enum):
    """Available search strategies."""

    BACKTRACKING = "backtracking"
    BEST_FIRST = "best_first"


class SchedulerConfig(BaseModel):
    """Work calendar and search budgets.

    Invalid values are rejected when the model is constructed; nothing is clamped.
    """

    work_start: time = time(8, 0)
    work_end: time = time(17, 0)
    slot_minutes: int = Field(default=10, gt=0)  # Cursor step when enumerating candidates
    max_nodes: int = Field(default=10_000, gt=0)
    max_time_ms: int = Field(default=30_000, ge=0)
    # Days searched for placements, in the order candidates are generated
    work_days: list[Weekday] = Field(default_factory=lambda: list(Weekday))

    @field_validator("work_start", "work_end", mode="before")
    @classmethod
    def parse_times(cls, v: Any) -> time:
        """Accept "HH:MM" strings and YAML base-60 integers."""
        return parse_time_of_day(v)

    @field_validator("work_days", mode="before")
    @classmethod
    def parse_days(cls, v: Any) -> list[Weekday]:
        """Accept day names and abbreviations."""
        if isinstance(v, (str, int)):
            v = [v]
        return [Weekday.parse(day) for day in v]

    @model_validator(mode="after")
    def validate_work_window(self) -> "SchedulerConfig":
        """Ensure the work day is non-empty and at least one day is searched."""
        if self.work_start >= self.work_end:
            raise ValueError(
                f"work_start ({self.work_start:%H:%M}) must be before "
                f"work_end ({self.work_end:%H:%M})"
            )
        if not self.work_days:
            raise ValueError("work_days must contain at least one day")
        if len(set(self.work_days)) != len(self.work_days):
            raise ValueError("work_days must not repeat a day")
        return self

    @property
    def work_start_minutes(self) -> int:
        return minutes_of(self.work_start)

    @property
    def work_end_minutes(self) -> int:
        return minutes_of(self.work_end)


class CostConfig(BaseModel):
    """Cost model weights."""

    placement_cost: int = Field(default=10, ge=0)  # Flat fee charged for every placement
    ideal_miss_penalty: int = Field(default=10, ge=0)  # Added when no ideal window envelops the slot


class StrategyConfig(BaseModel):
    """Configuration for strategy selection."""

    type: StrategyType = StrategyType.BACKTRACKING


class PlannerConfig(BaseModel):
    """Complete planning configuration (calendar, costs and strategy)."""

    scheduler: SchedulerConfig = SchedulerConfig()
    cost: CostConfig = CostConfig()
    strategy: StrategyConfig = StrategyConfig()
