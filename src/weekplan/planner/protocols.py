"""Protocol definitions for the planning engine."""

from typing import Protocol

from weekplan.models import ScheduleState

from .core import SearchResult


class PlanningStrategy(Protocol):
    """Protocol for search strategies."""

    def find_schedule(self, start_state: ScheduleState) -> ScheduleState:
        """Search for the cheapest complete schedule reachable from ``start_state``.

        Args:
            start_state: State to search from (normally nothing placed)

        Returns:
            Best complete state found, or ``start_state`` itself if none was found
        """
        ...

    def search(self, start_state: ScheduleState) -> SearchResult:
        """Run the search and report statistics alongside the resulting state.

        Args:
            start_state: State to search from

        Returns:
            SearchResult with the state and node/time statistics
        """
        ...
