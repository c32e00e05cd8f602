"""Best-first search over partial schedules ordered by estimated total cost."""

import heapq
import itertools

from weekplan.exceptions import InvalidStartStateError
from weekplan.logger import debug_enabled, get_logger
from weekplan.models import ScheduleState

from ..config import CostConfig, SchedulerConfig
from ..core import SearchResult, SearchRun
from ..placements import PlacementGenerator

logger = get_logger()


class BestFirstStrategy:
    """A*-style search using a min-heap keyed on estimated total cost.

    Every legal placement of every unplaced task is offered as a successor;
    the frontier ordering alone steers the search. Complete states do not
    end the search: exploration continues until the frontier is empty or the
    budget runs out, keeping the cheapest complete state seen.
    """

    name = "best_first"

    def __init__(
        self,
        scheduler_config: SchedulerConfig | None = None,
        cost_config: CostConfig | None = None,
    ):
        self.scheduler_config = scheduler_config or SchedulerConfig()
        self.cost_config = cost_config or CostConfig()
        self.generator = PlacementGenerator(self.scheduler_config, self.cost_config)

    def find_schedule(self, start_state: ScheduleState) -> ScheduleState:
        """Return the best complete state found, or ``start_state`` if none."""
        return self.search(start_state).state

    def search(self, start_state: ScheduleState) -> SearchResult:
        """Run the search from ``start_state`` and report statistics."""
        if start_state is None:
            raise InvalidStartStateError("Start state cannot be None")

        run = SearchRun(
            max_nodes=self.scheduler_config.max_nodes,
            max_time_ms=self.scheduler_config.max_time_ms,
        )
        # Sequence numbers break estimate ties in insertion order
        sequence = itertools.count()
        frontier: list[tuple[int, int, ScheduleState]] = [
            (start_state.estimated_total_cost, next(sequence), start_state)
        ]
        logger.changes(
            f"Starting best-first search with {len(start_state.unplaced)} unplaced tasks"
        )

        while frontier:
            estimate, _, current = heapq.heappop(frontier)
            run.nodes_explored += 1

            if current.is_complete:
                if run.record(current):
                    logger.changes(f"New best solution: cost {current.cost_so_far}")
                continue

            if run.over_budget():
                logger.checks(
                    f"Budget exhausted at node {run.nodes_explored} "
                    f"with {len(frontier)} states on the frontier"
                )
                break

            if debug_enabled():
                logger.debug(
                    f"Expanding state with {len(current.placed)} placed, estimate {estimate}"
                )

            for task in current.unplaced.values():
                for placement in self.generator.generate_placements(task, current):
                    successor = self.generator.create_successor(current, task, placement)
                    heapq.heappush(
                        frontier, (successor.estimated_total_cost, next(sequence), successor)
                    )

        result = SearchResult.from_run(run, start_state, self.name)
        if run.best_state is not None:
            logger.changes(
                f"Best solution cost {result.total_cost} after {result.nodes_explored} nodes "
                f"in {result.elapsed_ms:.0f}ms"
            )
        else:
            logger.warning(
                f"No complete schedule found after {result.nodes_explored} nodes "
                f"in {result.elapsed_ms:.0f}ms"
            )
        return result
