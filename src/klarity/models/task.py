"""Task domain model."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from ..utils import now_utc
from .enums import TagColor, TaskPriority, TaskStatus

MAX_TIMER_HOURS = 99


class Subtask(BaseModel):
    """A checklist item nested inside a task."""

    id: str
    title: str
    is_completed: bool = False
    order: int = 0


class TaskTag(BaseModel):
    """A colored label attached to a task."""

    label: str
    color: TagColor = TagColor.GRAY


class TaskTimer(BaseModel):
    """Time tracking state for a task that is being worked on."""

    started_at: datetime
    paused_duration: timedelta = timedelta(0)
    is_paused: bool = False

    def elapsed(self, now: datetime | None = None) -> timedelta:
        """Working time since the timer started, excluding paused time."""
        now = now or now_utc()
        elapsed = now - self.started_at - self.paused_duration
        return max(elapsed, timedelta(0))

    def formatted_time(self, now: datetime | None = None) -> str:
        """Elapsed time as HH:MM:SS (hours capped at 99)."""
        total_seconds = int(self.elapsed(now).total_seconds())
        hours, remainder = divmod(total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours > MAX_TIMER_HOURS:
            hours, minutes, seconds = MAX_TIMER_HOURS, 59, 59
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class Task(BaseModel):
    """A single card on the Kanban board."""

    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    tags: list[TaskTag] = Field(default_factory=list)
    points: int | None = None  # story points
    assignee: str | None = None
    due_date: datetime | None = None
    start_date: datetime | None = None
    estimated_hours: float | None = None
    actual_hours: float | None = None
    subtasks: list[Subtask] = Field(default_factory=list)
    linked_note_ids: list[str] = Field(default_factory=list)
    timer: TaskTimer | None = None
    is_active: bool = False
    completed: bool = False
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None
    order: int = 0  # position within its column

    @property
    def has_active_timer(self) -> bool:
        """Whether a timer is attached to this task."""
        return self.timer is not None

    @property
    def subtask_progress(self) -> tuple[int, int]:
        """(completed, total) subtask counts."""
        done = sum(1 for s in self.subtasks if s.is_completed)
        return done, len(self.subtasks)

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Whether the due date has passed on an open task."""
        if self.due_date is None or self.completed:
            return False
        return self.due_date < (now or now_utc())
