"""Depth-first branch-and-bound search."""

from weekplan.exceptions import InvalidStartStateError
from weekplan.logger import debug_enabled, get_logger
from weekplan.models import ScheduleState, Task

from ..config import CostConfig, SchedulerConfig
from ..core import SearchResult, SearchRun
from ..placements import PlacementGenerator

logger = get_logger()


class BacktrackingStrategy:
    """Branch-and-bound search that expands the most constrained task first.

    At each node the unplaced task with the fewest legal placements is
    expanded, trying its placements cheapest first. Branches whose estimated
    total cost cannot beat the best complete schedule are pruned.
    """

    name = "backtracking"

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
        logger.changes(
            f"Starting backtracking search with {len(start_state.unplaced)} unplaced tasks"
        )
        self._search_node(start_state, run)

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

    def _search_node(self, state: ScheduleState, run: SearchRun) -> bool:
        """Explore ``state`` and its subtree.

        Returns:
            True if a new best complete schedule was recorded in this subtree
            (or, once the budget is spent, whether any schedule exists at all)
        """
        if not run.visit():
            logger.checks(f"Budget exhausted at node {run.nodes_explored}")
            return run.best_state is not None

        if state.is_complete:
            if run.record(state):
                logger.changes(f"New best solution: cost {state.cost_so_far}")
                return True
            return False

        if state.estimated_total_cost >= run.best_cost:
            if debug_enabled():
                logger.debug(
                    f"Pruned: estimate {state.estimated_total_cost} >= best {run.best_cost}"
                )
            return False

        task = self._select_next_task(state)
        if task is None:
            logger.debug(f"Dead end with {len(state.unplaced)} tasks unplaced")
            return False

        placements = self.generator.generate_placements(task, state)
        # Stable sort keeps calendar order among equal-cost placements
        placements.sort(key=lambda placement: placement.cost)

        found_any = False
        for placement in placements:
            if run.budget_exhausted:
                return run.best_state is not None
            successor = self.generator.create_successor(state, task, placement)
            if self._search_node(successor, run):
                found_any = True

        return found_any

    def _select_next_task(self, state: ScheduleState) -> Task | None:
        """Pick the unplaced task with the fewest legal placements.

        Tasks with no legal placement are skipped; ties go to the task seen
        first. Returns None when no unplaced task can be placed.
        """
        most_constrained: Task | None = None
        fewest = 0

        for task in state.unplaced.values():
            count = len(self.generator.generate_placements(task, state))
            if count > 0 and (most_constrained is None or count < fewest):
                most_constrained = task
                fewest = count

        if most_constrained is not None:
            logger.checks(
                f"Selected task {most_constrained.id} ({fewest} legal placements)"
            )
        return most_constrained
