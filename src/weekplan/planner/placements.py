"""Candidate placement generation and the cost model."""

from collections.abc import Mapping

from weekplan.models import Placement, ScheduleState, Task, TimeSlot, time_from_minutes

from .config import CostConfig, SchedulerConfig


def _calendar_start(slot: TimeSlot) -> tuple[int, int]:
    return (int(slot.day), slot.start_minutes)


def _calendar_end(slot: TimeSlot) -> tuple[int, int]:
    return (int(slot.day), slot.end_minutes)


class PlacementGenerator:
    """Enumerates legal placements for a task and prices them.

    The generator never mutates the states it is given; ``create_successor``
    always returns a new state.
    """

    def __init__(
        self,
        scheduler_config: SchedulerConfig | None = None,
        cost_config: CostConfig | None = None,
    ):
        self.scheduler_config = scheduler_config or SchedulerConfig()
        self.cost_config = cost_config or CostConfig()

    def generate_placements(self, task: Task, state: ScheduleState) -> list[Placement]:
        """List every legal placement of ``task`` given the placements in ``state``.

        Candidates start at each granularity step from work start, on each
        configured work day, and must end no later than work end. A candidate
        is legal when it overlaps no placed slot and every dependency of the
        task is already placed and finished by the candidate's start.
        """
        if not self.dependencies_placed(task, state):
            return []

        config = self.scheduler_config
        duration = task.duration_minutes
        work_end = config.work_end_minutes
        placements: list[Placement] = []

        for day in config.work_days:
            cursor = config.work_start_minutes
            while cursor + duration <= work_end:
                slot = TimeSlot(
                    day=day,
                    start=time_from_minutes(cursor),
                    end=time_from_minutes(cursor + duration),
                )
                if self.can_place(task, slot, state):
                    placements.append(
                        Placement(task_id=task.id, slot=slot, cost=self.placement_cost(task, slot))
                    )
                cursor += config.slot_minutes

        return placements

    def dependencies_placed(self, task: Task, state: ScheduleState) -> bool:
        """True iff every dependency of ``task`` already has a placement."""
        return all(dep_id in state.placed for dep_id in task.dependencies)

    def can_place(self, task: Task, slot: TimeSlot, state: ScheduleState) -> bool:
        """Check overlap and dependency ordering for a single candidate slot."""
        if not state.has_space_for(slot):
            return False
        return self.respects_dependencies(task, slot, state)

    def respects_dependencies(self, task: Task, slot: TimeSlot, state: ScheduleState) -> bool:
        """True iff each dependency is placed and ends at or before ``slot`` starts.

        Slots are compared in calendar order (day first, then time of day).
        """
        candidate_start = _calendar_start(slot)
        for dep_id in task.dependencies:
            dependency = state.placed.get(dep_id)
            if dependency is None:
                return False
            if _calendar_end(dependency.slot) > candidate_start:
                return False
        return True

    def placement_cost(self, task: Task, slot: TimeSlot) -> int:
        """Flat placement fee, plus the miss penalty when no ideal window envelops ``slot``."""
        cost = self.cost_config.placement_cost
        if task.ideal_windows and not any(window.envelops(slot) for window in task.ideal_windows):
            cost += self.cost_config.ideal_miss_penalty
        return cost

    def estimate_remaining_cost(self, state: ScheduleState, unplaced: Mapping[str, Task]) -> int:
        """Estimate the cost of placing ``unplaced`` on top of ``state``.

        Charges the flat fee for each task, plus the miss penalty for each
        task whose ideal windows are all blocked by existing placements.
        Conflicts between the unplaced tasks themselves are ignored, so this
        is a heuristic rather than a lower bound.
        """
        placed_slots = [placement.slot for placement in state.placed.values()]
        estimate = len(unplaced) * self.cost_config.placement_cost
        for task in unplaced.values():
            if not task.ideal_windows:
                continue
            window_free = any(
                not any(slot.intersects(window) for slot in placed_slots)
                for window in task.ideal_windows
            )
            if not window_free:
                estimate += self.cost_config.ideal_miss_penalty
        return estimate

    def create_successor(
        self, state: ScheduleState, task: Task, placement: Placement
    ) -> ScheduleState:
        """Build the state reached by applying ``placement`` to ``state``.

        The remaining-cost estimate is taken against the parent ``state``, so
        windows blocked only by the new placement are not yet penalized.
        """
        placed = dict(state.placed)
        placed[task.id] = placement
        unplaced = {task_id: t for task_id, t in state.unplaced.items() if task_id != task.id}

        cost_so_far = state.cost_so_far + placement.cost
        return ScheduleState(
            placed=placed,
            unplaced=unplaced,
            cost_so_far=cost_so_far,
            estimated_total_cost=cost_so_far + self.estimate_remaining_cost(state, unplaced),
        )
