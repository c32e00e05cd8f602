"""Task file loading with validation and config discovery."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError, ParseError, ValidationError
from .models import Task
from .planner.config import PlannerConfig
from .planner.validator import validate_tasks
from .schemas import TaskFileSchema
from .unified_config import CONFIG_FILENAME, load_planner_config, parse_planner_config


@dataclass
class TaskFile:
    """Tasks and configuration loaded from a task file."""

    tasks: dict[str, Task]
    config: PlannerConfig
    path: Path | None = None


def parse_task_data(data: dict[str, Any]) -> tuple[dict[str, Task], PlannerConfig | None]:
    """Convert loaded YAML data into tasks and the optional embedded config.

    Raises:
        ValidationError: If the structure or a task is invalid
    """
    try:
        schema = TaskFileSchema(**data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid task file structure: {e}") from e

    tasks: dict[str, Task] = {}
    for task_id, task_data in schema.tasks.items():
        try:
            tasks[task_id] = task_data.to_task(task_id)
        except ValueError as e:
            raise ValidationError(f"Invalid task '{task_id}': {e}") from e

    embedded: PlannerConfig | None = None
    if schema.config is not None:
        try:
            embedded = parse_planner_config(schema.config)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid config section: {e}") from e

    return tasks, embedded


def _discover_config(task_file_path: Path) -> PlannerConfig | None:
    """Discover a config file next to the task file or in the current directory.

    Search order:
    1. task file directory / weekplan_config.yaml
    2. Current directory / weekplan_config.yaml
    """
    dir_config = task_file_path.parent / CONFIG_FILENAME
    if dir_config.exists():
        return load_planner_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_planner_config(cwd_config)

    return None


def load_task_file(
    path: Path | str,
    config_path: Path | None = None,
    *,
    validate: bool = True,
) -> TaskFile:
    """Load, convert and (by default) validate a task file.

    Configuration precedence: ``config_path`` (the CLI passes --config here),
    then the task file's own ``config`` section, then a
    weekplan_config.yaml beside the task file or in the current directory,
    then defaults.

    Args:
        path: Path to the task YAML file
        config_path: Optional explicit path to a config file
        validate: Run pre-flight validation (cycles, references, window fit)

    Returns:
        TaskFile with tasks keyed by ID and the effective configuration

    Raises:
        ParseError: If the file is missing or is not valid YAML
        ValidationError: If the tasks fail schema or pre-flight validation
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("YAML must contain a dictionary at the root level")

    tasks, embedded = parse_task_data(data)  # type: ignore[arg-type]

    config: PlannerConfig | None = None
    if config_path is not None:
        config = load_planner_config(config_path)
    elif embedded is not None:
        config = embedded
    else:
        config = _discover_config(path)

    if validate:
        validate_tasks(tasks)

    return TaskFile(tasks=tasks, config=config or PlannerConfig(), path=path)
