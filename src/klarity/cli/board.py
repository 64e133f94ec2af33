"""Plain-text rendering of the board for the command line."""

from datetime import datetime
from typing import assert_never

from ..models import (
    EmptyState,
    ErrorState,
    IdleState,
    KanbanColumn,
    LoadingState,
    SuccessState,
    Task,
    TasksUiState,
)
from .output import CHECK, DIM, GREEN, PRIORITY_COLORS, colorize, error, header, info, warning


def format_task(task: Task, now: datetime | None = None) -> str:
    """Render a task as a single line."""
    marker = colorize(CHECK, GREEN) if task.completed else colorize(
        "o", PRIORITY_COLORS.get(task.priority.name, DIM)
    )
    parts = [f"{marker} {task.title}"]

    if task.assignee:
        parts.append(f"@{task.assignee}")
    if task.points is not None:
        parts.append(f"{task.points} pts")
    if task.tags:
        parts.append(" ".join(f"#{tag.label}" for tag in task.tags))

    done, total = task.subtask_progress
    if total:
        parts.append(f"[{done}/{total}]")

    if task.timer is not None:
        state = " paused" if task.timer.is_paused else ""
        parts.append(f"timer {task.timer.formatted_time(now)}{state}")

    if task.is_overdue(now):
        parts.append("OVERDUE")

    return "  ".join(parts)


def format_column_title(column: KanbanColumn) -> str:
    """Column heading with task count and WIP limit."""
    count = f"{len(column.tasks)}/{column.wip_limit}" if column.wip_limit else str(len(column.tasks))
    title = f"{column.title} ({count})"
    if column.is_collapsed:
        title += " [collapsed]"
    return title


def render_board(columns: list[KanbanColumn], now: datetime | None = None) -> None:
    """Print every column and its tasks."""
    for column in columns:
        header(format_column_title(column))
        if column.is_over_wip_limit:
            warning(f"{column.title} is over its WIP limit")
        if column.is_collapsed:
            continue
        for task in column.tasks:
            print(f"  {format_task(task, now)}")
        if not column.tasks:
            print(colorize("  (no tasks)", DIM))


def render_state(state: TasksUiState, now: datetime | None = None) -> int:
    """Print a screen state. Returns a process exit code."""
    match state:
        case SuccessState():
            render_board(state.columns, now)
            return 0
        case EmptyState():
            info("Board is empty")
            return 0
        case ErrorState():
            error(state.message)
            return 1
        case IdleState() | LoadingState():
            info("Board not loaded")
            return 1
        case _:
            assert_never(state)
