"""Invariants that must hold for every state a strategy generates."""

from collections.abc import Callable

import pytest

from weekplan.models import Placement, ScheduleState, Task, Weekday
from weekplan.planner import (
    BacktrackingStrategy,
    BestFirstStrategy,
    PlacementGenerator,
    SchedulerConfig,
)


class CheckingGenerator(PlacementGenerator):
    """Placement generator that checks each successor as it is built."""

    def __init__(self, task_ids: set[str], *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.task_ids = task_ids
        self.successors = 0

    def create_successor(
        self, state: ScheduleState, task: Task, placement: Placement
    ) -> ScheduleState:
        successor = super().create_successor(state, task, placement)
        self.successors += 1

        slots = [p.slot for p in successor.placed.values()]
        for i, a in enumerate(slots):
            for b in slots[i + 1 :]:
                assert not a.intersects(b), f"{a} overlaps {b}"

        assert not successor.placed.keys() & successor.unplaced.keys()
        assert set(successor.placed) | set(successor.unplaced) == self.task_ids
        assert len(successor.placed) == len(state.placed) + 1
        assert successor.estimated_total_cost >= successor.cost_so_far
        assert successor.cost_so_far == state.cost_so_far + placement.cost

        for dep_id in task.dependencies:
            dep_slot = successor.placed[dep_id].slot
            assert (dep_slot.day, dep_slot.end) <= (placement.slot.day, placement.slot.start)
        return successor


def _with_checking_generator(
    strategy: BacktrackingStrategy | BestFirstStrategy, start: ScheduleState
) -> CheckingGenerator:
    generator = CheckingGenerator(
        start.task_ids, strategy.scheduler_config, strategy.cost_config
    )
    strategy.generator = generator
    return generator


@pytest.mark.parametrize(
    "make_strategy",
    [
        lambda: BacktrackingStrategy(),
        lambda: BestFirstStrategy(SchedulerConfig(work_days=[Weekday.MONDAY], max_nodes=300)),
    ],
    ids=["backtracking", "best-first"],
)
def test_every_successor_is_valid(
    start_state: ScheduleState,
    make_strategy: Callable[[], BacktrackingStrategy | BestFirstStrategy],
) -> None:
    strategy = make_strategy()
    generator = _with_checking_generator(strategy, start_state)

    result = strategy.search(start_state)

    assert result.is_complete
    assert generator.successors > 0


@pytest.mark.parametrize(
    "strategy_class", [BacktrackingStrategy, BestFirstStrategy], ids=["backtracking", "best-first"]
)
def test_every_successor_is_valid_with_dependency_chain(
    make_task: Callable[..., Task],
    strategy_class: type[BacktrackingStrategy] | type[BestFirstStrategy],
) -> None:
    tasks = [
        make_task("design", 60),
        make_task("build", 120, requires=("design",)),
        make_task("review", 30, requires=("design",)),
        make_task("ship", 30, requires=("build", "review")),
    ]
    start = ScheduleState.initial(tasks)
    config = SchedulerConfig(work_days=[Weekday.MONDAY], slot_minutes=30, max_nodes=200)
    strategy = strategy_class(config)
    generator = _with_checking_generator(strategy, start)

    strategy.search(start)

    assert generator.successors > 0
