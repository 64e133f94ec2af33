"""Data models."""

from .board import KanbanColumn, default_columns
from .enums import TagColor, TaskPriority, TaskStatus
from .klarity_config import BoardConfig, ColumnConfig, KlarityConfig
from .task import Subtask, Task, TaskTag, TaskTimer
from .ui_state import (
    EmptyState,
    ErrorState,
    IdleState,
    LoadingState,
    SuccessState,
    TasksUiState,
)

__all__ = [
    "BoardConfig",
    "ColumnConfig",
    "EmptyState",
    "ErrorState",
    "IdleState",
    "KanbanColumn",
    "KlarityConfig",
    "LoadingState",
    "Subtask",
    "SuccessState",
    "TagColor",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TaskTag",
    "TaskTimer",
    "TasksUiState",
    "default_columns",
]
