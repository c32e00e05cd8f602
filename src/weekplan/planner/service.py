"""High-level planning facade."""

from weekplan.exceptions import InvalidStartStateError
from weekplan.models import ScheduleState

from .core import SearchResult
from .protocols import PlanningStrategy
from .strategies import BacktrackingStrategy


class SchedulePlanner:
    """Single entry point for planning a week.

    The planner holds one strategy, chosen at construction, and hands every
    start state to it. Results are returned exactly as the strategy produced
    them; an incomplete result (``not state.is_complete``) means no schedule
    was found within budget.
    """

    def __init__(self, strategy: PlanningStrategy | None = None):
        """Initialize the planner.

        Args:
            strategy: Search strategy to delegate to (defaults to backtracking
                with default configuration)
        """
        self.strategy: PlanningStrategy = strategy or BacktrackingStrategy()

    def plan(self, start_state: ScheduleState) -> ScheduleState:
        """Plan from ``start_state`` and return the strategy's result verbatim."""
        self._check_start_state(start_state)
        return self.strategy.find_schedule(start_state)

    def plan_with_stats(self, start_state: ScheduleState) -> SearchResult:
        """Plan from ``start_state`` and return the result with search statistics."""
        self._check_start_state(start_state)
        return self.strategy.search(start_state)

    def _check_start_state(self, start_state: ScheduleState | None) -> None:
        if start_state is None:
            raise InvalidStartStateError("Start state cannot be None")
