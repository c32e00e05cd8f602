"""Command-line interface for weekplan."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from .exceptions import WeekplanError
from .formatter import format_comparison, format_schedule
from .loader import TaskFile, load_task_file
from .logger import VERBOSITY_DEBUG, VERBOSITY_SILENT, setup_logger
from .models import ScheduleState
from .planner import (
    PlannerConfig,
    SchedulePlanner,
    SchedulerConfig,
    SearchResult,
    StrategyConfig,
    StrategyType,
    create_strategy,
    strategy_from_config,
    validate_tasks,
)
from .samples import sample_tasks
from .unified_config import load_planner_config

app = typer.Typer(
    name="weekplan",
    help="Place interdependent, duration-bounded tasks into a working week",
    add_completion=False,
)

# Exit code when the search ends without a complete schedule
EXIT_INCOMPLETE = 2

TaskFileArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to the task YAML file (default: built-in sample week)"),
]
MaxNodesOption = Annotated[
    int | None,
    typer.Option("--max-nodes", help="Override the search node budget", min=1),
]
MaxTimeOption = Annotated[
    int | None,
    typer.Option("--max-time-ms", help="Override the search time budget in milliseconds", min=0),
]


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show best solutions, "
            "2=show task selection, 3=debug",
            min=VERBOSITY_SILENT,
            max=VERBOSITY_DEBUG,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: weekplan_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for weekplan commands."""
    setup_logger(verbose)
    ctx.obj = {"config_path": config}


def _config_path(ctx: typer.Context) -> Path | None:
    return (ctx.obj or {}).get("config_path")


def _load_tasks(file: Path | None, config_path: Path | None) -> TaskFile:
    """Load a task file, or the validated sample week when no file is given."""
    if file is not None:
        return load_task_file(file, config_path)

    tasks = sample_tasks()
    validate_tasks(tasks)
    config = load_planner_config(config_path) if config_path else PlannerConfig()
    return TaskFile(tasks=tasks, config=config)


def _with_overrides(
    config: PlannerConfig,
    *,
    strategy: StrategyType | None = None,
    max_nodes: int | None = None,
    max_time_ms: int | None = None,
) -> PlannerConfig:
    """Apply CLI overrides, re-validating the scheduler section."""
    updates: dict[str, Any] = {}
    if max_nodes is not None:
        updates["max_nodes"] = max_nodes
    if max_time_ms is not None:
        updates["max_time_ms"] = max_time_ms

    scheduler = config.scheduler
    if updates:
        scheduler = SchedulerConfig.model_validate({**scheduler.model_dump(), **updates})

    strategy_config = StrategyConfig(type=strategy) if strategy else config.strategy
    return PlannerConfig(scheduler=scheduler, cost=config.cost, strategy=strategy_config)


def _fail(error: Exception) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(1)


def _describe(result: SearchResult) -> str:
    return (
        f"Strategy: {result.strategy}, nodes explored: {result.nodes_explored}, "
        f"elapsed: {result.elapsed_ms:.0f}ms"
    )


@app.command()
def plan(
    ctx: typer.Context,
    file: TaskFileArgument = None,
    strategy: Annotated[
        StrategyType | None,
        typer.Option("--strategy", "-s", help="Search strategy (overrides config)"),
    ] = None,
    max_nodes: MaxNodesOption = None,
    max_time_ms: MaxTimeOption = None,
) -> None:
    """Plan the week and print the best schedule found."""
    try:
        task_file = _load_tasks(file, _config_path(ctx))
        config = _with_overrides(
            task_file.config, strategy=strategy, max_nodes=max_nodes, max_time_ms=max_time_ms
        )
    except (WeekplanError, ValueError, FileNotFoundError) as e:
        raise _fail(e) from None

    planner = SchedulePlanner(strategy_from_config(config))
    result = planner.plan_with_stats(ScheduleState.initial(task_file.tasks))

    typer.echo(format_schedule(result.state, task_file.tasks))
    typer.echo(_describe(result))

    if not result.is_complete:
        reason = "budget exhausted" if result.budget_exhausted else "no feasible placement"
        typer.echo(f"Warning: no complete schedule found ({reason})", err=True)
        raise typer.Exit(EXIT_INCOMPLETE)

    typer.echo("Best schedule found within budget (not proven optimal)")


@app.command()
def compare(
    ctx: typer.Context,
    file: TaskFileArgument = None,
    max_nodes: MaxNodesOption = None,
    max_time_ms: MaxTimeOption = None,
) -> None:
    """Run every strategy on the same tasks and compare cost, nodes and time."""
    try:
        task_file = _load_tasks(file, _config_path(ctx))
        config = _with_overrides(task_file.config, max_nodes=max_nodes, max_time_ms=max_time_ms)
    except (WeekplanError, ValueError, FileNotFoundError) as e:
        raise _fail(e) from None

    results: list[SearchResult] = []
    for strategy_type in StrategyType:
        strategy = create_strategy(strategy_type, config.scheduler, config.cost)
        # Each run gets its own start state and search counters
        start_state = ScheduleState.initial(task_file.tasks)
        results.append(SchedulePlanner(strategy).plan_with_stats(start_state))

    typer.echo(format_comparison(results))
    typer.echo("Costs are the best found within budget, not proven optimal")


@app.command()
def validate(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")],
) -> None:
    """Check a task file for cycles, unknown references and oversized tasks."""
    try:
        task_file = load_task_file(file, _config_path(ctx))
    except (WeekplanError, ValueError, FileNotFoundError) as e:
        raise _fail(e) from None

    typer.echo(f"{len(task_file.tasks)} tasks OK")


def main() -> None:
    """Entry point for the weekplan console script."""
    app()


if __name__ == "__main__":
    main()
