"""Tests for the best-first strategy."""

from collections.abc import Callable

from tests.conftest import slot
from tests.test_backtracking import assert_valid_schedule
from weekplan.models import ScheduleState, Task, Weekday
from weekplan.planner import BacktrackingStrategy, BestFirstStrategy, SchedulerConfig

MONDAY_CONFIG = SchedulerConfig(work_days=[Weekday.MONDAY], max_nodes=300)


def test_three_task_week(start_state: ScheduleState) -> None:
    result = BestFirstStrategy(MONDAY_CONFIG).find_schedule(start_state)

    assert result.is_complete
    assert result.cost_so_far == 30
    assert slot(Weekday.MONDAY, "08:00", "09:00").envelops(result.placed["A"].slot)
    assert slot(Weekday.MONDAY, "09:00", "11:00").envelops(result.placed["B"].slot)
    assert slot(Weekday.MONDAY, "14:00", "16:00").envelops(result.placed["C"].slot)
    assert_valid_schedule(start_state, result)


def test_never_worse_than_backtracking(start_state: ScheduleState) -> None:
    best_first = BestFirstStrategy(MONDAY_CONFIG).find_schedule(start_state)
    backtracking = BacktrackingStrategy(MONDAY_CONFIG).find_schedule(start_state)
    assert best_first.cost_so_far <= backtracking.cost_so_far


def test_search_reports_statistics(start_state: ScheduleState) -> None:
    result = BestFirstStrategy(MONDAY_CONFIG).search(start_state)

    assert result.strategy == "best_first"
    assert result.is_complete
    # Complete states do not stop the search, only the budget does
    assert result.budget_exhausted
    assert result.nodes_explored > MONDAY_CONFIG.max_nodes


def test_repeat_runs_are_identical(start_state: ScheduleState) -> None:
    strategy = BestFirstStrategy(MONDAY_CONFIG)
    first = strategy.find_schedule(start_state)
    second = strategy.find_schedule(start_state)
    assert first.placed == second.placed


def test_start_state_not_modified(start_state: ScheduleState) -> None:
    BestFirstStrategy(MONDAY_CONFIG).find_schedule(start_state)
    assert start_state.placed == {}
    assert start_state.cost_so_far == 0


def test_node_budget_of_one_returns_start_state(start_state: ScheduleState) -> None:
    config = SchedulerConfig(work_days=[Weekday.MONDAY], max_nodes=1)
    result = BestFirstStrategy(config).search(start_state)

    assert result.state is start_state
    assert not result.is_complete


def test_exhausted_frontier_without_solution(make_task: Callable[..., Task]) -> None:
    tasks = [make_task("short", 30), make_task("marathon", 600)]
    start = ScheduleState.initial(tasks)
    config = SchedulerConfig(work_days=[Weekday.MONDAY])

    result = BestFirstStrategy(config).search(start)

    assert result.state is start
    assert not result.budget_exhausted
    # Root plus one state per placement of the short task
    assert result.nodes_explored == 1 + 52


def test_single_task(make_task: Callable[..., Task]) -> None:
    window = (slot(Weekday.WEDNESDAY, "13:00", "15:00"),)
    start = ScheduleState.initial([make_task("solo", 90, windows=window)])
    config = SchedulerConfig(max_nodes=50)

    result = BestFirstStrategy(config).find_schedule(start)

    assert result.is_complete
    assert result.cost_so_far == 10
    assert window[0].envelops(result.placed["solo"].slot)


def test_empty_task_set() -> None:
    start = ScheduleState.initial([])
    result = BestFirstStrategy().search(start)
    assert result.is_complete
    assert result.state is start
    assert result.nodes_explored == 1
