"""Flat board document records used for persistence.

The document keeps columns and tasks in two independent lists; a task
refers to its column only through the `status` string. Enums are stored
by member name, timestamps as integer epoch milliseconds and durations as
integer milliseconds.

On the wire every field uses its camelCase alias (e.g. `isCollapsed`,
`timerStartedAt`). Unknown fields are ignored when reading so that newer
documents still load.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class ColumnRecord(BaseModel):
    """Serialized column."""

    model_config = RECORD_CONFIG

    id: str
    title: str
    status: str
    order: int
    is_collapsed: bool = False
    wip_limit: int | None = None


class TagRecord(BaseModel):
    """Serialized task tag."""

    model_config = RECORD_CONFIG

    label: str
    color: str


class SubtaskRecord(BaseModel):
    """Serialized subtask."""

    model_config = RECORD_CONFIG

    id: str
    title: str
    is_completed: bool = False
    order: int = 0


class TaskRecord(BaseModel):
    """Serialized task."""

    model_config = RECORD_CONFIG

    id: str
    title: str
    description: str = ""
    status: str
    priority: str
    tags: list[TagRecord] = Field(default_factory=list)
    points: int | None = None
    assignee: str | None = None
    due_date: int | None = None
    start_date: int | None = None
    estimated_hours: float | None = None
    actual_hours: float | None = None
    subtasks: list[SubtaskRecord] = Field(default_factory=list)
    linked_note_ids: list[str] = Field(default_factory=list)
    timer_started_at: int | None = None
    timer_paused_duration: int | None = None
    timer_is_paused: bool = False
    is_active: bool = False
    completed: bool = False
    created_at: int
    updated_at: int
    completed_at: int | None = None
    order: int = 0


class BoardDocument(BaseModel):
    """The complete persisted board."""

    model_config = RECORD_CONFIG

    columns: list[ColumnRecord] = Field(default_factory=list)
    tasks: list[TaskRecord] = Field(default_factory=list)
