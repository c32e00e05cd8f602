"""Planner package - weekly task placement search.

This package provides:
- PlacementGenerator: legal candidate slots and the cost model
- BacktrackingStrategy / BestFirstStrategy: the two search strategies
- SchedulePlanner: facade that delegates to a chosen strategy

Configuration:
- SchedulerConfig: work calendar, granularity and search budgets
- CostConfig: placement fee and ideal-window miss penalty
- PlannerConfig: complete configuration including strategy selection
"""

# Configuration
from .config import CostConfig, PlannerConfig, SchedulerConfig, StrategyConfig, StrategyType

# Search bookkeeping
from .core import SearchResult, SearchRun

# Placement generation and costs
from .placements import PlacementGenerator

# Protocols
from .protocols import PlanningStrategy

# High-level facade
from .service import SchedulePlanner

# Strategies
from .strategies import (
    BacktrackingStrategy,
    BestFirstStrategy,
    create_strategy,
    strategy_from_config,
)

# Pre-flight validation
from .validator import (
    find_circular_dependency,
    find_missing_references,
    find_oversized_tasks,
    validate_tasks,
)

__all__ = [
    # Configuration
    "SchedulerConfig",
    "CostConfig",
    "PlannerConfig",
    "StrategyConfig",
    "StrategyType",
    # Search bookkeeping
    "SearchResult",
    "SearchRun",
    # Placement generation
    "PlacementGenerator",
    # Protocols
    "PlanningStrategy",
    # Facade
    "SchedulePlanner",
    # Strategies
    "BacktrackingStrategy",
    "BestFirstStrategy",
    "create_strategy",
    "strategy_from_config",
    # Validation
    "find_circular_dependency",
    "find_missing_references",
    "find_oversized_tasks",
    "validate_tasks",
]
