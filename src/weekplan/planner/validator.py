"""Pre-flight validation of task sets.

The planning engine assumes its input is acyclic and that every task fits in
at least one of its ideal windows; it does not re-check either. Run these
checks before handing tasks to a planner.
"""

from collections.abc import Mapping

from weekplan.exceptions import CircularDependencyError, IdealWindowError, MissingReferenceError
from weekplan.logger import get_logger
from weekplan.models import Task

logger = get_logger()


def find_circular_dependency(tasks: Mapping[str, Task]) -> list[str] | None:
    """Find one dependency cycle, if any.

    Returns:
        The cycle as a list of task IDs whose first and last entries are the
        same task, or None if the dependency graph is acyclic
    """
    visited: set[str] = set()

    for task_id in sorted(tasks):
        path: list[str] = []
        if _has_circular_dependency(tasks, task_id, visited, path):
            # path ends with the task that closed the cycle
            repeated = path[-1]
            return path[path.index(repeated) :]
    return None


def _has_circular_dependency(
    tasks: Mapping[str, Task],
    task_id: str,
    visited: set[str],
    path: list[str],
) -> bool:
    """Recursively check for circular dependencies."""
    if task_id in path:
        path.append(task_id)
        return True

    if task_id in visited:
        return False

    visited.add(task_id)
    path.append(task_id)

    task = tasks.get(task_id)
    if task:
        for dep_id in sorted(task.dependencies):
            if _has_circular_dependency(tasks, dep_id, visited, path):
                return True

    path.pop()
    return False


def find_missing_references(tasks: Mapping[str, Task]) -> dict[str, list[str]]:
    """Map each task ID to the dependency IDs it names that are not in ``tasks``."""
    missing: dict[str, list[str]] = {}
    for task_id, task in tasks.items():
        unknown = sorted(dep_id for dep_id in task.dependencies if dep_id not in tasks)
        if unknown:
            missing[task_id] = unknown
    return missing


def find_oversized_tasks(tasks: Mapping[str, Task]) -> list[str]:
    """List tasks that declare ideal windows but are longer than all of them."""
    oversized: list[str] = []
    for task_id, task in tasks.items():
        if not task.ideal_windows:
            continue
        if not any(window.duration >= task.duration for window in task.ideal_windows):
            oversized.append(task_id)
    return sorted(oversized)


def validate_tasks(tasks: Mapping[str, Task]) -> None:
    """Run every pre-flight check, raising on the first failure.

    Raises:
        MissingReferenceError: A task depends on an unknown task ID
        CircularDependencyError: The dependency graph has a cycle
        IdealWindowError: A task is longer than every one of its ideal windows
    """
    missing = find_missing_references(tasks)
    if missing:
        task_id, unknown = next(iter(sorted(missing.items())))
        raise MissingReferenceError(
            f"Task '{task_id}' depends on unknown task(s): {', '.join(unknown)}"
        )

    cycle = find_circular_dependency(tasks)
    if cycle:
        logger.error(f"Circular dependency detected involving task: {cycle[0]}")
        raise CircularDependencyError(f"Circular dependency detected: {' -> '.join(cycle)}")

    oversized = find_oversized_tasks(tasks)
    if oversized:
        details = ", ".join(
            f"{task_id} ({tasks[task_id].duration_minutes}m)" for task_id in oversized
        )
        raise IdealWindowError(f"Tasks longer than every ideal window: {details}")

    logger.checks(f"Validated {len(tasks)} tasks")
