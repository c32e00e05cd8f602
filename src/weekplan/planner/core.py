"""Core dataclasses shared by the search strategies."""

import time
from dataclasses import dataclass, field

from weekplan.models import ScheduleState


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class SearchRun:
    """Mutable bookkeeping for a single search invocation.

    A fresh run is created for every call, so one strategy object can serve
    several searches (including concurrent ones) without sharing counters.
    """

    max_nodes: int
    max_time_ms: int
    best_state: ScheduleState | None = None
    best_cost: float = float("inf")
    nodes_explored: int = 0
    budget_exhausted: bool = False
    started_at_ms: float = field(default_factory=_monotonic_ms)

    def visit(self) -> bool:
        """Count a node and report whether the search may continue.

        Returns:
            False once the node or time budget has been exceeded
        """
        self.nodes_explored += 1
        return not self.over_budget()

    def over_budget(self) -> bool:
        """Check the node and time budgets, remembering if either was exceeded."""
        if self.nodes_explored > self.max_nodes or self.elapsed_ms() > self.max_time_ms:
            self.budget_exhausted = True
        return self.budget_exhausted

    def record(self, state: ScheduleState) -> bool:
        """Keep ``state`` if it is cheaper than the best complete state so far.

        Returns:
            True if ``state`` became the new best
        """
        if state.cost_so_far < self.best_cost:
            self.best_state = state
            self.best_cost = state.cost_so_far
            return True
        return False

    def elapsed_ms(self) -> float:
        return _monotonic_ms() - self.started_at_ms


@dataclass
class SearchResult:
    """Outcome of a strategy run.

    ``state`` is the best complete schedule found, or the start state
    unchanged when no complete schedule was reached. Costs are "best found
    under budget"; the search heuristic is not admissible, so they are not
    proven optimal.
    """

    state: ScheduleState
    strategy: str
    nodes_explored: int
    elapsed_ms: float
    budget_exhausted: bool

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    @property
    def total_cost(self) -> int:
        return self.state.cost_so_far

    @classmethod
    def from_run(
        cls, run: SearchRun, start_state: ScheduleState, strategy: str
    ) -> "SearchResult":
        """Build a result from a finished run, falling back to the start state."""
        return cls(
            state=run.best_state if run.best_state is not None else start_state,
            strategy=strategy,
            nodes_explored=run.nodes_explored,
            elapsed_ms=run.elapsed_ms(),
            budget_exhausted=run.budget_exhausted,
        )
