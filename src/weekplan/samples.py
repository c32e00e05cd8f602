"""Built-in sample week used when no task file is given."""

from datetime import time, timedelta

from .logger import get_logger
from .models import Task, TimeSlot, Weekday

logger = get_logger()


def _window(day: Weekday, start_hour: int, end_hour: int) -> tuple[TimeSlot, ...]:
    return (TimeSlot(day=day, start=time(start_hour, 0), end=time(end_hour, 0)),)


def _task(
    task_id: str,
    name: str,
    description: str,
    minutes: int,
    window: tuple[TimeSlot, ...],
    requires: tuple[str, ...] = (),
) -> Task:
    return Task(
        id=task_id,
        name=name,
        description=description,
        duration=timedelta(minutes=minutes),
        dependencies=frozenset(requires),
        ideal_windows=window,
    )


def sample_tasks() -> dict[str, Task]:
    """Return a deterministic ten-task software week.

    A standup and documentation pass lead into backend and frontend work,
    which feed testing, a staging deploy and a Friday client demo.
    """
    tasks = [
        _task(
            "morning-meeting",
            "Morning Meeting",
            "Team standup meeting",
            30,
            _window(Weekday.MONDAY, 8, 9),
        ),
        _task(
            "documentation",
            "Documentation",
            "Update project documentation",
            60,
            _window(Weekday.TUESDAY, 9, 10),
            ("morning-meeting",),
        ),
        _task(
            "code-review",
            "Code Review",
            "Review pull requests",
            90,
            _window(Weekday.WEDNESDAY, 10, 12),
        ),
        _task(
            "design-meeting",
            "Design Meeting",
            "Discuss UI/UX design",
            60,
            _window(Weekday.THURSDAY, 8, 9),
            ("morning-meeting",),
        ),
        _task(
            "backend",
            "Backend Implementation",
            "Implement API endpoints",
            120,
            _window(Weekday.FRIDAY, 13, 15),
            ("documentation",),
        ),
        _task(
            "frontend",
            "Frontend Implementation",
            "Implement UI screens",
            120,
            _window(Weekday.MONDAY, 13, 15),
            ("documentation",),
        ),
        _task(
            "unit-testing",
            "Unit Testing",
            "Write unit tests",
            60,
            _window(Weekday.TUESDAY, 16, 17),
            ("backend", "frontend"),
        ),
        _task(
            "integration-testing",
            "Integration Testing",
            "Integration tests for API and frontend",
            90,
            _window(Weekday.WEDNESDAY, 15, 17),
            ("unit-testing",),
        ),
        _task(
            "staging-deploy",
            "Deployment to Staging",
            "Deploy application to staging environment",
            60,
            _window(Weekday.THURSDAY, 15, 16),
            ("integration-testing",),
        ),
        _task(
            "client-demo",
            "Client Demo",
            "Demo to client",
            60,
            _window(Weekday.FRIDAY, 16, 17),
            ("staging-deploy",),
        ),
    ]
    logger.debug(f"Created {len(tasks)} sample tasks")
    return {task.id: task for task in tasks}
