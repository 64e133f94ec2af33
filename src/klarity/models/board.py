"""Board column models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .enums import TaskStatus
from .task import Task


class KanbanColumn(BaseModel):
    """A status column holding an ordered list of tasks."""

    status: TaskStatus
    tasks: list[Task] = Field(default_factory=list)
    is_collapsed: bool = False
    wip_limit: int | None = Field(default=None, ge=1)

    @property
    def title(self) -> str:
        """Display title - the status label."""
        return self.status.label

    @property
    def is_over_wip_limit(self) -> bool:
        """True when the column holds more tasks than its WIP limit."""
        return self.wip_limit is not None and len(self.tasks) > self.wip_limit


def default_columns() -> list[KanbanColumn]:
    """Initial board layout used when nothing is persisted or configured."""
    return [
        KanbanColumn(status=TaskStatus.BACKLOG),
        KanbanColumn(status=TaskStatus.TODO, wip_limit=5),
        KanbanColumn(status=TaskStatus.IN_PROGRESS, wip_limit=3),
        KanbanColumn(status=TaskStatus.IN_REVIEW),
        KanbanColumn(status=TaskStatus.DONE),
    ]
