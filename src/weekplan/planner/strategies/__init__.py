"""Strategy factory and exports."""

from ..config import CostConfig, PlannerConfig, SchedulerConfig, StrategyType
from .backtracking import BacktrackingStrategy
from .best_first import BestFirstStrategy


def create_strategy(
    strategy_type: StrategyType | str,
    scheduler_config: SchedulerConfig | None = None,
    cost_config: CostConfig | None = None,
) -> BacktrackingStrategy | BestFirstStrategy:
    """Create a search strategy instance.

    Args:
        strategy_type: Type of strategy to create
        scheduler_config: Optional work calendar and budgets
        cost_config: Optional cost weights

    Returns:
        Strategy instance ready to search
    """
    strategy_type = StrategyType(strategy_type)

    if strategy_type == StrategyType.BACKTRACKING:
        return BacktrackingStrategy(scheduler_config, cost_config)

    if strategy_type == StrategyType.BEST_FIRST:
        return BestFirstStrategy(scheduler_config, cost_config)

    msg = f"Unknown strategy type: {strategy_type}"
    raise ValueError(msg)


def strategy_from_config(config: PlannerConfig) -> BacktrackingStrategy | BestFirstStrategy:
    """Create the strategy selected by a complete planner configuration."""
    return create_strategy(config.strategy.type, config.scheduler, config.cost)


__all__ = [
    "BacktrackingStrategy",
    "BestFirstStrategy",
    "create_strategy",
    "strategy_from_config",
]
