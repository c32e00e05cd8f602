"""Pytest configuration and fixtures for weekplan tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import time, timedelta
from typing import Any

import pytest

from weekplan.logger import reset_logger
from weekplan.models import ScheduleState, Task, TimeSlot, Weekday
from weekplan.planner import CostConfig, SchedulerConfig


def slot(day: Weekday, start: str, end: str) -> TimeSlot:
    """Build a TimeSlot from "HH:MM" strings."""
    start_h, start_m = (int(part) for part in start.split(":"))
    end_h, end_m = (int(part) for part in end.split(":"))
    return TimeSlot(day=day, start=time(start_h, start_m), end=time(end_h, end_m))


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Factory for tasks with sensible defaults."""

    def _make(
        task_id: str,
        minutes: int = 60,
        *,
        requires: tuple[str, ...] = (),
        windows: tuple[TimeSlot, ...] = (),
        name: str | None = None,
    ) -> Task:
        return Task(
            id=task_id,
            name=name or f"Task {task_id}",
            duration=timedelta(minutes=minutes),
            dependencies=frozenset(requires),
            ideal_windows=windows,
        )

    return _make


@pytest.fixture
def three_tasks(make_task: Callable[..., Task]) -> dict[str, Task]:
    """A standup-style task, a follow-up that needs it, and an afternoon task."""
    tasks = [
        make_task("A", 30, windows=(slot(Weekday.MONDAY, "08:00", "09:00"),)),
        make_task(
            "B", 60, requires=("A",), windows=(slot(Weekday.MONDAY, "09:00", "11:00"),)
        ),
        make_task("C", 60, windows=(slot(Weekday.MONDAY, "14:00", "16:00"),)),
    ]
    return {task.id: task for task in tasks}


@pytest.fixture
def start_state(three_tasks: dict[str, Task]) -> ScheduleState:
    return ScheduleState.initial(three_tasks)


@pytest.fixture
def make_config() -> Callable[..., SchedulerConfig]:
    """Factory for scheduler configs; keyword arguments override defaults."""

    def _make(**overrides: Any) -> SchedulerConfig:
        return SchedulerConfig(**overrides)

    return _make


@pytest.fixture
def cost_config() -> CostConfig:
    return CostConfig()


@pytest.fixture(autouse=True)
def clean_logger():
    """Leave the weekplan logger silent between tests."""
    yield
    reset_logger()
