"""Plain-text rendering of schedules and strategy comparisons."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .models import ScheduleState, Task
from .planner.core import SearchResult


def format_schedule(state: ScheduleState, tasks: Mapping[str, Task] | None = None) -> str:
    """Render a schedule as a per-day listing.

    Args:
        state: Schedule to render (complete or not)
        tasks: Optional task lookup for display names; defaults to task IDs

    Returns:
        Multi-line text ending without a trailing newline
    """
    tasks = tasks or {}
    lines: list[str] = []

    for day, placements in state.placements_by_day().items():
        lines.append(day.label)
        for placement in placements:
            task = tasks.get(placement.task_id)
            label = task.name if task else placement.task_id
            slot = placement.slot
            lines.append(
                f"  {slot.start:%H:%M}-{slot.end:%H:%M}  {label}  (cost {placement.cost})"
            )

    if not state.placed:
        lines.append("No tasks placed")

    if state.unplaced:
        lines.append(f"Unplaced: {', '.join(sorted(state.unplaced))}")

    lines.append(f"Total cost: {state.cost_so_far}")
    return "\n".join(lines)


def format_comparison(results: Sequence[SearchResult]) -> str:
    """Render one row per strategy run: completeness, cost, nodes and time."""
    header = f"{'strategy':<12} {'complete':<9} {'cost':>6} {'nodes':>8} {'time_ms':>9}  budget"
    lines = [header, "-" * len(header)]
    for result in results:
        cost = str(result.total_cost) if result.is_complete else "-"
        lines.append(
            f"{result.strategy:<12} {'yes' if result.is_complete else 'no':<9} {cost:>6} "
            f"{result.nodes_explored:>8} {result.elapsed_ms:>9.1f}  "
            f"{'exhausted' if result.budget_exhausted else 'ok'}"
        )
    return "\n".join(lines)
