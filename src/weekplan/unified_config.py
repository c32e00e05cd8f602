"""Configuration file loading.

A single YAML file (weekplan_config.yaml) holds the work calendar, cost
weights and strategy selection:

    scheduler:
      work_start: "08:00"
      work_end: "17:00"
      slot_minutes: 10
      work_days: [monday, tuesday, wednesday, thursday, friday]
    cost:
      placement_cost: 10
      ideal_miss_penalty: 10
    strategy:
      type: backtracking
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .planner.config import CostConfig, PlannerConfig, SchedulerConfig, StrategyConfig

CONFIG_FILENAME = "weekplan_config.yaml"

KNOWN_SECTIONS = {"scheduler", "cost", "strategy"}


def parse_planner_config(data: dict[str, Any]) -> PlannerConfig:
    """Build a PlannerConfig from already-loaded YAML data.

    Raises:
        ConfigurationError: If the data has unknown top-level sections
        pydantic.ValidationError: If a section has invalid values
    """
    if not isinstance(data, dict):  # type: ignore[redundant-expr]
        raise ConfigurationError("Configuration must be a mapping")

    unknown = set(data) - KNOWN_SECTIONS
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration section(s): {', '.join(sorted(unknown))}. "
            f"Valid sections: {', '.join(sorted(KNOWN_SECTIONS))}"
        )

    scheduler_config = SchedulerConfig()
    if data.get("scheduler") is not None:
        scheduler_config = SchedulerConfig.model_validate(data["scheduler"])

    cost_config = CostConfig()
    if data.get("cost") is not None:
        cost_config = CostConfig.model_validate(data["cost"])

    strategy_config = StrategyConfig()
    if data.get("strategy") is not None:
        strategy_config = StrategyConfig.model_validate(data["strategy"])

    return PlannerConfig(scheduler=scheduler_config, cost=cost_config, strategy=strategy_config)


def load_planner_config(config_path: Path | str) -> PlannerConfig:
    """Load planner configuration from a YAML file.

    Args:
        config_path: Path to weekplan_config.yaml

    Returns:
        PlannerConfig with defaults for any missing section

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If the file is empty or malformed
        pydantic.ValidationError: If a value is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse config YAML: {e}") from e

    if not data:
        raise ConfigurationError("Empty configuration file")

    return parse_planner_config(data)
