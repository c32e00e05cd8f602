"""Tests for pre-flight task validation."""

from collections.abc import Callable

import pytest

from tests.conftest import slot
from weekplan.exceptions import (
    CircularDependencyError,
    IdealWindowError,
    MissingReferenceError,
    ValidationError,
)
from weekplan.models import Task, Weekday
from weekplan.planner import (
    find_circular_dependency,
    find_missing_references,
    find_oversized_tasks,
    validate_tasks,
)
from weekplan.samples import sample_tasks


def _by_id(*tasks: Task) -> dict[str, Task]:
    return {task.id: task for task in tasks}


def test_acyclic_graph(three_tasks: dict[str, Task]) -> None:
    assert find_circular_dependency(three_tasks) is None
    validate_tasks(three_tasks)


def test_two_task_cycle(make_task: Callable[..., Task]) -> None:
    tasks = _by_id(make_task("A", requires=("B",)), make_task("B", requires=("A",)))
    assert find_circular_dependency(tasks) == ["A", "B", "A"]

    with pytest.raises(CircularDependencyError, match="A -> B -> A"):
        validate_tasks(tasks)


def test_self_dependency(make_task: Callable[..., Task]) -> None:
    tasks = _by_id(make_task("solo", requires=("solo",)))
    assert find_circular_dependency(tasks) == ["solo", "solo"]


def test_cycle_reported_without_lead_in(make_task: Callable[..., Task]) -> None:
    tasks = _by_id(
        make_task("a", requires=("b",)),
        make_task("b", requires=("c",)),
        make_task("c", requires=("d",)),
        make_task("d", requires=("b",)),
    )
    assert find_circular_dependency(tasks) == ["b", "c", "d", "b"]


def test_missing_reference(make_task: Callable[..., Task]) -> None:
    tasks = _by_id(make_task("A", requires=("ghost", "B")), make_task("B"))
    assert find_missing_references(tasks) == {"A": ["ghost"]}

    with pytest.raises(MissingReferenceError, match="ghost"):
        validate_tasks(tasks)


def test_oversized_task(make_task: Callable[..., Task]) -> None:
    tasks = _by_id(
        make_task("fits", 60, windows=(slot(Weekday.MONDAY, "09:00", "10:00"),)),
        make_task(
            "too-long",
            90,
            windows=(
                slot(Weekday.MONDAY, "09:00", "10:00"),
                slot(Weekday.TUESDAY, "09:00", "10:15"),
            ),
        ),
        make_task("no-window", 600),
    )
    assert find_oversized_tasks(tasks) == ["too-long"]

    with pytest.raises(IdealWindowError, match=r"too-long \(90m\)"):
        validate_tasks(tasks)


def test_errors_share_base_class(make_task: Callable[..., Task]) -> None:
    tasks = _by_id(make_task("A", requires=("A",)))
    with pytest.raises(ValidationError):
        validate_tasks(tasks)


def test_sample_week_is_valid() -> None:
    tasks = sample_tasks()
    assert len(tasks) == 10
    validate_tasks(tasks)
    assert tasks["client-demo"].dependencies == frozenset({"staging-deploy"})
    assert tasks["unit-testing"].dependencies == frozenset({"backend", "frontend"})
