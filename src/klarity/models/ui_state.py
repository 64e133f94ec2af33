"""View states for the task board screen.

This module defines the screen state as a discriminated union. Each
variant is its own model with a `kind` literal, so callers can narrow
with isinstance() checks or a match statement:

    match state:
        case SuccessState(columns=columns):
            ...
        case ErrorState(message=message):
            ...
"""

from typing import Literal

from pydantic import BaseModel, Field

from .board import KanbanColumn


class IdleState(BaseModel):
    """Nothing has been requested yet."""

    kind: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    """The board is being loaded from the store."""

    kind: Literal["loading"] = "loading"


class SuccessState(BaseModel):
    """The board is loaded and ready to render."""

    kind: Literal["success"] = "success"

    columns: list[KanbanColumn] = Field(default_factory=list)
    filter_expression: str = ""
    selected_task_id: str | None = None


class ErrorState(BaseModel):
    """Loading failed; the UI shows the message and may offer a retry."""

    kind: Literal["error"] = "error"

    message: str
    retryable: bool = True


class EmptyState(BaseModel):
    """The board loaded but holds no columns."""

    kind: Literal["empty"] = "empty"


# Discriminated union of all screen states
TasksUiState = IdleState | LoadingState | SuccessState | ErrorState | EmptyState


def is_loading(state: TasksUiState) -> bool:
    return isinstance(state, LoadingState)


def is_success(state: TasksUiState) -> bool:
    return isinstance(state, SuccessState)


def is_error(state: TasksUiState) -> bool:
    return isinstance(state, ErrorState)


def get_or_none(state: TasksUiState) -> list[KanbanColumn] | None:
    """Columns of a success state, or None for any other state."""
    if isinstance(state, SuccessState):
        return state.columns
    return None


def get_or_default(state: TasksUiState, default: list[KanbanColumn]) -> list[KanbanColumn]:
    """Columns of a success state, or the given default."""
    columns = get_or_none(state)
    return default if columns is None else columns
