"""Tests for planner configuration models."""

from datetime import time

import pytest
from pydantic import ValidationError

from weekplan.models import Weekday
from weekplan.planner import CostConfig, PlannerConfig, SchedulerConfig, StrategyConfig, StrategyType


def test_scheduler_defaults():
    config = SchedulerConfig()
    assert config.work_start == time(8, 0)
    assert config.work_end == time(17, 0)
    assert config.slot_minutes == 10
    assert config.max_nodes == 10_000
    assert config.max_time_ms == 30_000
    assert config.work_days == list(Weekday)
    assert config.work_start_minutes == 480
    assert config.work_end_minutes == 1020


def test_scheduler_parses_strings_and_base60():
    config = SchedulerConfig(
        work_start="09:30",  # type: ignore[arg-type]
        work_end=1080,  # type: ignore[arg-type]
        work_days=["mon", "Friday"],  # type: ignore[list-item]
    )
    assert config.work_start == time(9, 30)
    assert config.work_end == time(18, 0)
    assert config.work_days == [Weekday.MONDAY, Weekday.FRIDAY]


def test_single_work_day_shorthand():
    config = SchedulerConfig(work_days="tuesday")  # type: ignore[arg-type]
    assert config.work_days == [Weekday.TUESDAY]


@pytest.mark.parametrize(
    "overrides",
    [
        {"slot_minutes": 0},
        {"slot_minutes": -10},
        {"max_nodes": 0},
        {"max_time_ms": -1},
        {"work_start": "17:00", "work_end": "08:00"},
        {"work_start": "12:00", "work_end": "12:00"},
        {"work_days": []},
        {"work_days": ["monday", "mon"]},
        {"work_days": ["someday"]},
    ],
)
def test_invalid_scheduler_config_rejected(overrides: dict[str, object]):
    """Invalid values are rejected, never clamped."""
    with pytest.raises(ValidationError):
        SchedulerConfig(**overrides)  # type: ignore[arg-type]


def test_cost_defaults_and_validation():
    config = CostConfig()
    assert config.placement_cost == 10
    assert config.ideal_miss_penalty == 10

    assert CostConfig(placement_cost=0, ideal_miss_penalty=0).placement_cost == 0
    with pytest.raises(ValidationError):
        CostConfig(placement_cost=-1)
    with pytest.raises(ValidationError):
        CostConfig(ideal_miss_penalty=-5)


def test_strategy_config():
    assert StrategyConfig().type == StrategyType.BACKTRACKING
    assert StrategyConfig(type="best_first").type == StrategyType.BEST_FIRST  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        StrategyConfig(type="random")  # type: ignore[arg-type]


def test_planner_config_defaults():
    config = PlannerConfig()
    assert config.scheduler == SchedulerConfig()
    assert config.cost == CostConfig()
    assert config.strategy.type == StrategyType.BACKTRACKING
